"""initial marketplace schema: profiles, suppliers, products, orders

Revision ID: 5a1d2c7e9f30
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '5a1d2c7e9f30'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'profiles',
        sa.Column('id', sa.BigInteger(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('name', sa.String(100)),
        sa.Column('role', sa.String(20), nullable=False),
        sa.Column('business_name', sa.String(150)),
        sa.Column('phone', sa.String(20)),
        sa.Column('location', sa.String(150)),
        sa.Column('created_at', sa.DateTime()),
        sa.Column('updated_at', sa.DateTime()),
    )
    op.create_table(
        'suppliers',
        sa.Column('id', sa.BigInteger(), primary_key=True),
        sa.Column('user_id', sa.BigInteger(), sa.ForeignKey('profiles.id'), nullable=False, unique=True),
        sa.Column('business_name', sa.String(150), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('phone', sa.String(20)),
        sa.Column('address', sa.String(255)),
        sa.Column('city', sa.String(100)),
        sa.Column('state', sa.String(100)),
        sa.Column('pincode', sa.String(10)),
        sa.Column('categories', sa.JSON()),
        sa.Column('min_order_amount', sa.Float()),
        sa.Column('delivery_time', sa.String(50)),
        sa.Column('discount_text', sa.String(150)),
        sa.Column('rating', sa.Float()),
        sa.Column('trust_score', sa.Integer()),
        sa.Column('is_featured', sa.Boolean()),
        sa.Column('image_url', sa.String(255)),
        sa.Column('created_at', sa.DateTime()),
        sa.Column('updated_at', sa.DateTime()),
    )
    op.create_table(
        'products',
        sa.Column('id', sa.BigInteger(), primary_key=True),
        sa.Column('supplier_id', sa.BigInteger(), sa.ForeignKey('suppliers.id'), nullable=False),
        sa.Column('name', sa.String(150), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('category', sa.String(30), nullable=False),
        sa.Column('unit', sa.String(20), nullable=False),
        sa.Column('price_per_unit', sa.Float(), nullable=False),
        sa.Column('stock_quantity', sa.Integer()),
        sa.Column('minimum_quantity', sa.Integer()),
        sa.Column('is_active', sa.Boolean()),
        sa.Column('image_url', sa.String(255)),
        sa.Column('created_at', sa.DateTime()),
        sa.Column('updated_at', sa.DateTime()),
    )
    op.create_index('ix_products_supplier_active', 'products', ['supplier_id', 'is_active'])
    op.create_table(
        'orders',
        sa.Column('id', sa.BigInteger(), primary_key=True),
        sa.Column('order_number', sa.String(40), nullable=False, unique=True),
        sa.Column('vendor_id', sa.BigInteger(), sa.ForeignKey('profiles.id'), nullable=False),
        sa.Column('supplier_id', sa.BigInteger(), sa.ForeignKey('suppliers.id'), nullable=False),
        sa.Column('status', sa.String(20)),
        sa.Column('total_amount', sa.Float(), nullable=False),
        sa.Column('delivery_date', sa.Date()),
        sa.Column('tracking_id', sa.String(60)),
        sa.Column('rating', sa.Integer()),
        sa.Column('notes', sa.Text()),
        sa.Column('created_at', sa.DateTime()),
        sa.Column('updated_at', sa.DateTime()),
    )
    op.create_index('ix_orders_vendor_created', 'orders', ['vendor_id', 'created_at'])
    op.create_index('ix_orders_supplier_status', 'orders', ['supplier_id', 'status'])
    op.create_table(
        'order_items',
        sa.Column('id', sa.BigInteger(), primary_key=True),
        sa.Column('order_id', sa.BigInteger(), sa.ForeignKey('orders.id'), nullable=False),
        sa.Column('product_id', sa.BigInteger(), sa.ForeignKey('products.id'), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('unit_price', sa.Float(), nullable=False),
        sa.Column('total_price', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime()),
    )


def downgrade():
    op.drop_table('order_items')
    op.drop_index('ix_orders_supplier_status', table_name='orders')
    op.drop_index('ix_orders_vendor_created', table_name='orders')
    op.drop_table('orders')
    op.drop_index('ix_products_supplier_active', table_name='products')
    op.drop_table('products')
    op.drop_table('suppliers')
    op.drop_table('profiles')
