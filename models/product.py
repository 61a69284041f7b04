from models import db, BIGINT
from datetime import datetime

PRODUCT_CATEGORIES = (
    "rice",
    "pulses",
    "oil",
    "spices",
    "vegetables",
    "fruits",
    "dairy",
    "meat",
    "seafood",
    "grains",
    "condiments",
    "herbs",
)


class Product(db.Model):
    __tablename__ = "products"
    __table_args__ = (
        db.Index("ix_products_supplier_active", "supplier_id", "is_active"),
    )

    id = db.Column(BIGINT, primary_key=True)
    supplier_id = db.Column(BIGINT, db.ForeignKey("suppliers.id"), nullable=False)

    name = db.Column(db.String(150), nullable=False)
    description = db.Column(db.Text, nullable=True)
    category = db.Column(db.String(30), nullable=False)           # one of PRODUCT_CATEGORIES

    # Pricing & inventory
    unit = db.Column(db.String(20), nullable=False)               # kg, litre, packet
    price_per_unit = db.Column(db.Float, nullable=False)
    stock_quantity = db.Column(db.Integer, default=0)
    minimum_quantity = db.Column(db.Integer, default=1)

    is_active = db.Column(db.Boolean, default=True)
    image_url = db.Column(db.String(255), nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self, with_supplier=False):
        data = {
            "id": self.id,
            "supplier_id": self.supplier_id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "unit": self.unit,
            "price_per_unit": self.price_per_unit,
            "stock_quantity": self.stock_quantity,
            "minimum_quantity": self.minimum_quantity or 1,
            "is_active": bool(self.is_active),
            "image_url": self.image_url,
        }
        if with_supplier and self.supplier is not None:
            data["supplier"] = {
                "business_name": self.supplier.business_name,
                "rating": self.supplier.rating,
                "delivery_time": self.supplier.delivery_time,
                "trust_score": self.supplier.trust_score,
            }
        return data
