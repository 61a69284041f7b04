from flask import request
import logging
from app.schemas.supplier import SupplierProfileRequest
from app.services.store import Store, StoreError
from app.utils import ok, error, validate_schema, role_required, current_session
from . import supplier_bp


@supplier_bp.route("/profile", methods=["GET"])
def get_profile():
    supplier = Store().get_supplier_for_user(current_session().user_id)
    if supplier is None:
        return error("Supplier profile not found", status=404)
    return ok(supplier.to_dict())


@supplier_bp.route("/profile", methods=["POST"])
@role_required("supplier:manage_profile")
@validate_schema(SupplierProfileRequest)
def create_profile():
    data: SupplierProfileRequest = request.validated_data
    store = Store()
    user_id = current_session().user_id
    if store.get_supplier_for_user(user_id):
        return error("Supplier profile already exists", status=400)
    try:
        supplier = store.create_supplier(user_id, **data.model_dump())
    except StoreError:
        return error("Failed to create supplier profile", status=502)
    logging.info("Supplier profile %s created for user %s", supplier.id, user_id)
    return ok(supplier.to_dict(), message="Supplier profile created", status=201)


@supplier_bp.route("/profile", methods=["PUT"])
@role_required("supplier:manage_profile")
@validate_schema(SupplierProfileRequest)
def update_profile():
    data: SupplierProfileRequest = request.validated_data
    store = Store()
    supplier = store.get_supplier_for_user(current_session().user_id)
    if supplier is None:
        return error("Supplier profile not found", status=404)
    try:
        store.update_supplier(supplier, **data.model_dump(exclude_unset=True))
    except StoreError:
        return error("Failed to update supplier profile", status=502)
    return ok(supplier.to_dict(), message="Supplier profile updated")
