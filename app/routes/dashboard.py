from flask import Blueprint, g
from app.version import API_PREFIX
from app.auth.session import SupplierSession
from app.cart import carts
from app.services import catalog
from app.services.store import Store
from app.utils import ok, auth_required

dashboard_bp = Blueprint("dashboard", __name__, url_prefix=API_PREFIX)


@dashboard_bp.route("/dashboard", methods=["GET"])
@auth_required
def dashboard():
    session = g.session
    store = Store()
    if isinstance(session, SupplierSession):
        supplier = store.get_supplier_for_user(session.user_id)
        products = store.list_products(supplier_id=supplier.id) if supplier else []
        orders = store.list_orders(supplier_id=supplier.id) if supplier else []
        stats = catalog.supplier_stats(supplier, products, orders)
        stats["has_supplier_profile"] = supplier is not None
    else:
        orders = store.list_orders(vendor_id=session.user_id)
        stats = catalog.vendor_stats(orders)
        cart = carts.get(session.user_id)
        stats["cart_items"] = cart.item_count() if cart is not None else 0
    return ok({
        "role": session.role,
        "name": session.name,
        "stats": stats,
        "recent_orders": [o.to_dict(with_items=False) for o in orders[:5]],
    })
