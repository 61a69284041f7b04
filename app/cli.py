import os
import click
from flask import current_app
from flask.cli import with_appcontext
from flask_migrate import upgrade as alembic_upgrade, stamp as alembic_stamp, migrate as alembic_migrate
from werkzeug.security import generate_password_hash

from app.services.store import Store
from models import db
from models.user import Profile


def _assert_safe_for_upgrade():
    # Prevent accidental prod upgrades unless explicitly allowed
    env = (current_app.config.get("ENV") or "").lower()
    app_env = (os.getenv("APP_ENV") or "").lower()
    if app_env == "production" or env == "production":
        if (os.getenv("ALLOW_DB_MIGRATIONS") or "").lower() not in ("1", "true", "yes"):
            raise click.ClickException("Refusing to run DB migration in production without ALLOW_DB_MIGRATIONS=true")


@click.command("db-migrate-safe")
@click.option("-m", "--message", default="auto migration", help="Migration message")
@with_appcontext
def db_migrate_safe(message):
    """Generate a new migration script from current models."""
    alembic_migrate(message=message)
    click.echo("Migration script generated.")


@click.command("db-upgrade-safe")
@with_appcontext
def db_upgrade_safe():
    """Apply migrations to the configured database."""
    _assert_safe_for_upgrade()
    alembic_upgrade()
    click.echo("Database upgraded.")


@click.command("db-stamp-safe")
@click.option("--revision", default="head", help="Revision to stamp, default 'head'")
@with_appcontext
def db_stamp_safe(revision):
    """Mark the database at a given revision without running migrations."""
    _assert_safe_for_upgrade()
    alembic_stamp(revision)
    click.echo(f"Database stamped at {revision}.")


DEMO_SUPPLIERS = [
    {
        "business_name": "Krishna Traders",
        "city": "Mumbai",
        "address": "Andheri East",
        "categories": ["rice", "pulses", "grains"],
        "delivery_time": "Same Day",
        "min_order_amount": 500,
        "discount_text": "5% off on bulk orders",
        "is_featured": True,
        "products": [
            ("Basmati Rice", "rice", "kg", 50.0, 25),
            ("Toor Dal", "pulses", "kg", 110.0, 5),
        ],
    },
    {
        "business_name": "Sharma Suppliers",
        "city": "Delhi",
        "address": "Karol Bagh",
        "categories": ["oil", "spices", "condiments"],
        "delivery_time": "24 hours",
        "min_order_amount": 300,
        "products": [
            ("Mustard Oil", "oil", "litre", 160.0, 5),
            ("Turmeric Powder", "spices", "kg", 180.0, 1),
        ],
    },
    {
        "business_name": "Fresh Produce Co.",
        "city": "Bangalore",
        "address": "Whitefield",
        "categories": ["vegetables", "fruits", "herbs"],
        "delivery_time": "4-6 hours",
        "min_order_amount": 200,
        "discount_text": "Free delivery on orders above ₹1000",
        "is_featured": True,
        "products": [
            ("Red Onions", "vegetables", "kg", 30.0, 10),
            ("Coriander", "herbs", "bunch", 10.0, 5),
        ],
    },
]


@click.command("seed-demo")
@click.option("--password", default="password123", help="Password for the demo supplier accounts")
@with_appcontext
def seed_demo(password):
    """Create demo supplier accounts with a few products each."""
    store = Store()
    created = 0
    for demo in DEMO_SUPPLIERS:
        fields = dict(demo)
        products = fields.pop("products")
        email = fields["business_name"].lower().replace(" ", "").replace(".", "") + "@demo.streetsupply"
        if Profile.query.filter_by(email=email).first():
            continue
        user = Profile(
            email=email,
            password_hash=generate_password_hash(password),
            name=fields["business_name"],
            role="supplier",
        )
        db.session.add(user)
        db.session.commit()
        supplier = store.create_supplier(user.id, **fields)
        for name, category, unit, price, minimum in products:
            store.create_product(
                supplier.id,
                name=name,
                category=category,
                unit=unit,
                price_per_unit=price,
                minimum_quantity=minimum,
                stock_quantity=minimum * 20,
            )
        created += 1
    click.echo(f"Seeded {created} supplier(s).")


def register_cli(app):
    app.cli.add_command(db_migrate_safe)
    app.cli.add_command(db_upgrade_safe)
    app.cli.add_command(db_stamp_safe)
    app.cli.add_command(seed_demo)
