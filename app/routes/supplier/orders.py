from flask import request
from app.services import catalog
from app.services.store import Store
from app.utils import ok, error, current_session
from . import supplier_bp


@supplier_bp.route("/orders", methods=["GET"])
def list_orders():
    store = Store()
    supplier = store.get_supplier_for_user(current_session().user_id)
    orders = store.list_orders(supplier_id=supplier.id) if supplier else []
    try:
        shown = catalog.filter_orders(orders, q=request.args.get("q"), tab=request.args.get("tab"))
    except ValueError as e:
        return error(str(e), status=400)
    return ok({
        "orders": [o.to_dict() for o in shown],
        "counts": catalog.order_tab_counts(catalog.filter_orders(orders, q=request.args.get("q"))),
    })
