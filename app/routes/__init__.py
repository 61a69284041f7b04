from .auth import auth_bp
from .catalog import catalog_bp
from .dashboard import dashboard_bp
from .vendor import vendor_bp
from .supplier import supplier_bp


__all__ = [
    'auth_bp',
    'catalog_bp',
    'dashboard_bp',
    'vendor_bp',
    'supplier_bp',
]
