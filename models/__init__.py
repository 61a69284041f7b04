from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import BigInteger, Integer

# Use BigInteger in production but fall back to Integer for SQLite
BIGINT = BigInteger().with_variant(Integer, "sqlite")

db = SQLAlchemy()

# Re-export common models for convenience
from .user import Profile  # noqa: F401,E402
from .supplier import Supplier  # noqa: F401,E402
from .product import Product, PRODUCT_CATEGORIES  # noqa: F401,E402
from .order import Order, OrderItem, ORDER_STATUSES  # noqa: F401,E402
