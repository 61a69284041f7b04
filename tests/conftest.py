import os
import sys
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault('APP_ENV', 'testing')

from models import db
from models.supplier import Supplier
from models.product import Product
from app.cart import carts


@pytest.fixture(scope='session')
def app_instance():
    os.environ['APP_ENV'] = 'testing'
    from app import create_app
    return create_app()

@pytest.fixture(scope='function')
def app(app_instance):
    with app_instance.app_context():
        db.drop_all()
        db.create_all()
        carts.clear()
        yield app_instance
        db.session.remove()
        db.drop_all()
        carts.clear()

@pytest.fixture(scope='function')
def client(app):
    return app.test_client()


def login(client, email, role="vendor", name=None):
    """Sign in through the test stub and return (user_id, auth headers)."""
    body = {"email": email, "role": role}
    if name:
        body["name"] = name
    r = client.post("/__auth/login_stub", json=body)
    data = r.get_json()["data"]
    return data["user_id"], {"Authorization": f"Bearer {data['access']}"}


def make_supplier(user_id, business_name, **fields):
    supplier = Supplier(user_id=user_id, business_name=business_name, **fields)
    db.session.add(supplier)
    db.session.commit()
    return supplier


def make_product(supplier, name, price, unit="kg", category="rice", minimum_quantity=1, is_active=True):
    product = Product(
        supplier_id=supplier.id,
        name=name,
        category=category,
        unit=unit,
        price_per_unit=price,
        minimum_quantity=minimum_quantity,
        is_active=is_active,
    )
    db.session.add(product)
    db.session.commit()
    return product


@pytest.fixture
def vendor(client):
    return login(client, "vendor@example.com", "vendor", name="Ravi")


@pytest.fixture
def supplier_user(client):
    return login(client, "supplier@example.com", "supplier", name="Asha")


@pytest.fixture
def market(app, client):
    """Two suppliers with a few products each."""
    uid_a, _ = login(client, "fresh@example.com", "supplier")
    uid_b, _ = login(client, "spice@example.com", "supplier")
    fresh = make_supplier(
        uid_a, "Fresh Farms", city="Mumbai", state="Maharashtra",
        categories=["vegetables", "fruits"], is_featured=True,
    )
    spice = make_supplier(
        uid_b, "Spice Route", city="Delhi", state="Delhi",
        categories=["spices", "rice"],
    )
    products = {
        "onion": make_product(fresh, "Onion", 10.0, category="vegetables"),
        "tomato": make_product(fresh, "Tomato", 15.0, category="vegetables", minimum_quantity=2),
        "chilli": make_product(spice, "Red Chilli", 70.0, category="spices"),
        "basmati": make_product(spice, "Basmati Rice", 90.0, category="rice", is_active=False),
    }
    return {"fresh": fresh, "spice": spice, "products": products}


@pytest.fixture
def login_as(client):
    def _login(email, role="vendor", name=None):
        return login(client, email, role, name)
    return _login
