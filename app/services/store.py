"""Relational persistence used by the cart checkout and the catalog views.

Every write commits on its own: a batch of order items is one transaction,
but nothing spans several calls. Backend failures surface as ``StoreError``.
"""

from typing import Iterable, List, Optional

from app.utils.db import transactional
from models import db
from models.order import Order, OrderItem
from models.product import Product
from models.supplier import Supplier


class StoreError(Exception):
    """The persistence backend rejected or failed a request."""


def _write(message):
    return transactional(message, error_cls=StoreError)


class Store:
    # ---------------------------------------------------------------- orders

    def create_order(self, *, vendor_id, supplier_id, total_amount, order_number, status="pending") -> Order:
        if db.session.get(Supplier, supplier_id) is None:
            raise StoreError(f"Unknown supplier {supplier_id}")
        order = Order(
            vendor_id=vendor_id,
            supplier_id=supplier_id,
            total_amount=total_amount,
            order_number=order_number,
            status=status,
        )
        with _write("Failed to create order"):
            db.session.add(order)
        return order

    def create_order_items(self, rows: Iterable[dict]) -> List[OrderItem]:
        """Insert all ``rows`` in one transaction or none of them."""
        items = []
        for row in rows:
            if db.session.get(Order, row["order_id"]) is None:
                raise StoreError(f"Unknown order {row['order_id']}")
            if db.session.get(Product, row["product_id"]) is None:
                raise StoreError(f"Unknown product {row['product_id']}")
            items.append(
                OrderItem(
                    order_id=row["order_id"],
                    product_id=row["product_id"],
                    quantity=row["quantity"],
                    unit_price=row["unit_price"],
                    total_price=row["total_price"],
                )
            )
        with _write("Failed to create order items"):
            db.session.add_all(items)
        return items

    def get_order(self, order_id) -> Optional[Order]:
        return db.session.get(Order, order_id)

    def list_orders(self, *, vendor_id=None, supplier_id=None) -> List[Order]:
        query = Order.query
        if vendor_id is not None:
            query = query.filter_by(vendor_id=vendor_id)
        if supplier_id is not None:
            query = query.filter_by(supplier_id=supplier_id)
        return query.order_by(Order.created_at.desc(), Order.id.desc()).all()

    def rate_order(self, order: Order, rating: int) -> Order:
        order.rating = rating
        with _write("Failed to rate order"):
            pass
        return order

    # ------------------------------------------------------------- suppliers

    def get_supplier(self, supplier_id) -> Optional[Supplier]:
        return db.session.get(Supplier, supplier_id)

    def get_supplier_for_user(self, user_id) -> Optional[Supplier]:
        return Supplier.query.filter_by(user_id=user_id).first()

    def list_suppliers(self) -> List[Supplier]:
        return Supplier.query.order_by(
            Supplier.is_featured.desc(), Supplier.business_name.asc()
        ).all()

    def create_supplier(self, user_id, **fields) -> Supplier:
        supplier = Supplier(user_id=user_id, **fields)
        with _write("Failed to create supplier profile"):
            db.session.add(supplier)
        return supplier

    def update_supplier(self, supplier: Supplier, **fields) -> Supplier:
        for key, value in fields.items():
            setattr(supplier, key, value)
        with _write("Failed to update supplier profile"):
            pass
        return supplier

    # -------------------------------------------------------------- products

    def get_product(self, product_id, *, active_only=False) -> Optional[Product]:
        product = db.session.get(Product, product_id)
        if product is None or (active_only and not product.is_active):
            return None
        return product

    def list_products(self, *, supplier_id=None, active_only=False, newest_first=False) -> List[Product]:
        query = Product.query
        if supplier_id is not None:
            query = query.filter_by(supplier_id=supplier_id)
        if active_only:
            query = query.filter_by(is_active=True)
        if newest_first:
            query = query.order_by(Product.created_at.desc(), Product.id.desc())
        else:
            query = query.order_by(Product.name.asc())
        return query.all()

    def create_product(self, supplier_id, **fields) -> Product:
        product = Product(supplier_id=supplier_id, **fields)
        with _write("Failed to create product"):
            db.session.add(product)
        return product

    def update_product(self, product: Product, **fields) -> Product:
        for key, value in fields.items():
            setattr(product, key, value)
        with _write("Failed to update product"):
            pass
        return product

    def toggle_product_active(self, product: Product) -> Product:
        product.is_active = not product.is_active
        with _write("Failed to update product status"):
            pass
        return product

    def delete_product(self, product: Product) -> None:
        with _write("Failed to delete product"):
            db.session.delete(product)
