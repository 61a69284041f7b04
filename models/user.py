# --- models/user.py ---
from models import db, BIGINT
from datetime import datetime

ROLES = ("vendor", "supplier")


class Profile(db.Model):
    __tablename__ = "profiles"

    id = db.Column(BIGINT, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(100), nullable=True)
    role = db.Column(db.String(20), nullable=False, default="vendor")  # vendor or supplier
    business_name = db.Column(db.String(150), nullable=True)
    phone = db.Column(db.String(20), nullable=True)
    location = db.Column(db.String(150), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<Profile id={self.id} role={self.role}>"

    def to_dict(self):
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "role": self.role,
            "business_name": self.business_name,
            "phone": self.phone,
            "location": self.location,
            "created_at": self.created_at,
        }
