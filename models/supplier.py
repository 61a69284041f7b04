from models import db, BIGINT
from datetime import datetime


class Supplier(db.Model):
    __tablename__ = "suppliers"

    id = db.Column(BIGINT, primary_key=True)
    user_id = db.Column(BIGINT, db.ForeignKey("profiles.id"), unique=True, nullable=False)
    business_name = db.Column(db.String(150), nullable=False)
    description = db.Column(db.Text, nullable=True)

    # Contact & location
    phone = db.Column(db.String(20), nullable=True)
    address = db.Column(db.String(255), nullable=True)
    city = db.Column(db.String(100), nullable=True)
    state = db.Column(db.String(100), nullable=True)
    pincode = db.Column(db.String(10), nullable=True)

    # Trading terms
    categories = db.Column(db.JSON, nullable=True)                # list of product categories
    min_order_amount = db.Column(db.Float, default=0)
    delivery_time = db.Column(db.String(50), nullable=True)       # "Same Day", "24 hours"
    discount_text = db.Column(db.String(150), nullable=True)

    # Reputation, maintained outside this service
    rating = db.Column(db.Float, nullable=True)
    trust_score = db.Column(db.Integer, nullable=True)
    is_featured = db.Column(db.Boolean, default=False)

    image_url = db.Column(db.String(255), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    products = db.relationship("Product", backref="supplier", lazy=True, cascade="all, delete-orphan")

    @property
    def location(self):
        return ", ".join(p for p in (self.address, self.city, self.state) if p)

    def to_dict(self):
        return {
            "id": self.id,
            "business_name": self.business_name,
            "description": self.description,
            "phone": self.phone,
            "address": self.address,
            "city": self.city,
            "state": self.state,
            "pincode": self.pincode,
            "location": self.location,
            "categories": list(self.categories or []),
            "min_order_amount": self.min_order_amount,
            "delivery_time": self.delivery_time,
            "discount_text": self.discount_text,
            "rating": self.rating,
            "trust_score": self.trust_score,
            "is_featured": bool(self.is_featured),
            "image_url": self.image_url,
        }
