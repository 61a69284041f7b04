from flask import Blueprint, request
from app.version import API_PREFIX
from app.services import catalog
from app.services.store import Store
from app.utils import ok, error, auth_required

catalog_bp = Blueprint("catalog", __name__, url_prefix=API_PREFIX)


@catalog_bp.before_request
@auth_required
def _require_login():
    return None


@catalog_bp.route("/suppliers", methods=["GET"])
def list_suppliers():
    """Browse suppliers.
    ---
    tags:
      - Catalog
    parameters:
      - name: q
        in: query
        type: string
        description: Matches business name or any category
      - name: category
        in: query
        type: string
      - name: location
        in: query
        type: string
    responses:
      200:
        description: Matching suppliers
    """
    suppliers = catalog.filter_suppliers(
        Store().list_suppliers(),
        q=request.args.get("q"),
        category=request.args.get("category"),
        location=request.args.get("location"),
    )
    return ok({"suppliers": [s.to_dict() for s in suppliers], "count": len(suppliers)})


@catalog_bp.route("/suppliers/<int:supplier_id>", methods=["GET"])
def get_supplier(supplier_id):
    supplier = Store().get_supplier(supplier_id)
    if supplier is None:
        return error("Supplier not found", status=404)
    return ok(supplier.to_dict())


@catalog_bp.route("/suppliers/<int:supplier_id>/products", methods=["GET"])
def list_supplier_products(supplier_id):
    store = Store()
    supplier = store.get_supplier(supplier_id)
    if supplier is None:
        return error("Supplier not found", status=404)
    products = catalog.filter_products(
        store.list_products(supplier_id=supplier_id, active_only=True),
        q=request.args.get("q"),
        category=request.args.get("category"),
    )
    return ok({
        "supplier": supplier.to_dict(),
        "products": [p.to_dict() for p in products],
    })


@catalog_bp.route("/products/<int:product_id>", methods=["GET"])
def get_product(product_id):
    product = Store().get_product(product_id, active_only=True)
    if product is None:
        return error("Product not found or unavailable", status=404)
    return ok(product.to_dict(with_supplier=True))
