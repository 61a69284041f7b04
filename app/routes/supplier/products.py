from flask import request
from app.schemas.supplier import AddProductRequest, UpdateProductRequest
from app.services.store import Store, StoreError
from app.utils import ok, error, validate_schema, role_required, current_session
from . import supplier_bp


def _own_supplier(store):
    return store.get_supplier_for_user(current_session().user_id)


def _own_product(store, product_id):
    supplier = _own_supplier(store)
    product = store.get_product(product_id)
    if supplier is None or product is None or product.supplier_id != supplier.id:
        return None
    return product


@supplier_bp.route("/products", methods=["GET"])
def list_products():
    store = Store()
    supplier = _own_supplier(store)
    if supplier is None:
        return ok([])
    products = store.list_products(supplier_id=supplier.id, newest_first=True)
    return ok([p.to_dict() for p in products])


@supplier_bp.route("/products", methods=["POST"])
@role_required("supplier:manage_products")
@validate_schema(AddProductRequest)
def add_product():
    data: AddProductRequest = request.validated_data
    store = Store()
    supplier = _own_supplier(store)
    if supplier is None:
        return error("You need to create a supplier profile first", status=400)
    try:
        product = store.create_product(supplier.id, **data.model_dump())
    except StoreError:
        return error("Failed to add product", status=502)
    return ok(product.to_dict(), message="Product added", status=201)


@supplier_bp.route("/products/<int:product_id>", methods=["PATCH"])
@role_required("supplier:manage_products")
@validate_schema(UpdateProductRequest)
def update_product(product_id):
    data: UpdateProductRequest = request.validated_data
    store = Store()
    product = _own_product(store, product_id)
    if product is None:
        return error("Product not found or unauthorized", status=404)
    try:
        store.update_product(product, **data.model_dump(exclude_unset=True))
    except StoreError:
        return error("Failed to update product", status=502)
    return ok(product.to_dict(), message="Product updated")


@supplier_bp.route("/products/<int:product_id>/toggle", methods=["POST"])
@role_required("supplier:manage_products")
def toggle_product(product_id):
    store = Store()
    product = _own_product(store, product_id)
    if product is None:
        return error("Product not found or unauthorized", status=404)
    try:
        store.toggle_product_active(product)
    except StoreError:
        return error("Failed to update product status", status=502)
    state = "activated" if product.is_active else "deactivated"
    return ok(product.to_dict(), message=f"Product {state}")


@supplier_bp.route("/products/<int:product_id>", methods=["DELETE"])
@role_required("supplier:manage_products")
def delete_product(product_id):
    store = Store()
    product = _own_product(store, product_id)
    if product is None:
        return error("Product not found or unauthorized", status=404)
    try:
        store.delete_product(product)
    except StoreError:
        return error("Failed to delete product", status=502)
    return ok(message="Product deleted successfully")
