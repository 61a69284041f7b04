from app.routes import (
    auth_bp,
    catalog_bp,
    dashboard_bp,
    vendor_bp,
    supplier_bp,
)


def register_api_v1(app):
    """Register blueprint routes under the API version prefix."""
    app.register_blueprint(auth_bp)
    app.register_blueprint(catalog_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(vendor_bp)
    app.register_blueprint(supplier_bp)
