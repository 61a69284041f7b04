from sqlalchemy import Column, Integer, String, Float, Text, DateTime, Date, ForeignKey
from datetime import datetime
from models import db, BIGINT

ORDER_STATUSES = ("pending", "processing", "in_transit", "delivered", "cancelled")
ACTIVE_STATUSES = ("processing", "in_transit")


class Order(db.Model):
    __tablename__ = "orders"
    __table_args__ = (
        db.Index("ix_orders_vendor_created", "vendor_id", "created_at"),
        db.Index("ix_orders_supplier_status", "supplier_id", "status"),
    )
    id = Column(BIGINT, primary_key=True)
    order_number = Column(String(40), unique=True, nullable=False)
    vendor_id = Column(BIGINT, ForeignKey("profiles.id"), nullable=False)
    supplier_id = Column(BIGINT, ForeignKey("suppliers.id"), nullable=False)
    status = Column(String(20), default="pending")  # see ORDER_STATUSES
    total_amount = Column(Float, nullable=False)
    delivery_date = Column(Date, nullable=True)
    tracking_id = Column(String(60), nullable=True)
    rating = Column(Integer, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    supplier = db.relationship("Supplier", lazy=True)
    items = db.relationship("OrderItem", backref="order", cascade="all, delete-orphan", lazy=True)

    def to_dict(self, with_items=True):
        data = {
            "id": self.id,
            "order_number": self.order_number,
            "vendor_id": self.vendor_id,
            "supplier_id": self.supplier_id,
            "supplier_name": self.supplier.business_name if self.supplier else None,
            "status": self.status,
            "total_amount": self.total_amount,
            "delivery_date": self.delivery_date.isoformat() if self.delivery_date else None,
            "tracking_id": self.tracking_id,
            "rating": self.rating,
            "notes": self.notes,
            "created_at": self.created_at,
        }
        if with_items:
            data["items"] = [item.to_dict() for item in self.items]
        return data


class OrderItem(db.Model):
    __tablename__ = "order_items"
    id = Column(BIGINT, primary_key=True)
    order_id = Column(BIGINT, ForeignKey("orders.id"), nullable=False)
    product_id = Column(BIGINT, ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Float, nullable=False)
    total_price = Column(Float, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    product = db.relationship("Product", lazy=True)

    def to_dict(self):
        return {
            "product_id": self.product_id,
            "product_name": self.product.name if self.product else None,
            "unit": self.product.unit if self.product else None,
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "total_price": self.total_price,
        }
