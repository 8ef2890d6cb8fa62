from alembic import op
import sqlalchemy as sa

revision = '0001_init'
down_revision = None
branch_labels = None
depends_on = None

def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]

def upgrade():
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.Text, nullable=True),
        *_timestamps()
    )
    op.create_table(
        'suppliers',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('contact_email', sa.String(255), nullable=True),
        sa.Column('phone', sa.String(20), nullable=True),
        sa.Column('address', sa.String(500), nullable=True),
        *_timestamps()
    )
    op.create_table(
        'products',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('price', sa.Numeric(18, 2), nullable=False),
        sa.Column('quantity', sa.Integer, nullable=False),
        sa.Column('category_id', sa.Integer, sa.ForeignKey('categories.id', ondelete='RESTRICT'), nullable=False, index=True),
        sa.Column('supplier_id', sa.Integer, sa.ForeignKey('suppliers.id', ondelete='RESTRICT'), nullable=False, index=True),
        *_timestamps()
    )
    op.create_table(
        'orders',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('order_number', sa.String(50), nullable=False, unique=True, index=True),
        sa.Column('order_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('customer_email', sa.String(255), nullable=False),
        sa.Column('customer_name', sa.String(200), nullable=False),
        sa.Column('total_amount', sa.Numeric(18, 2), nullable=False),
        sa.Column('status', sa.String(50), nullable=False, server_default='Pending'),
        sa.Column('shipping_address', sa.String(500), nullable=False),
        sa.Column('shipped_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('delivered_date', sa.DateTime(timezone=True), nullable=True),
        *_timestamps()
    )
    op.create_table(
        'order_items',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('order_id', sa.Integer, sa.ForeignKey('orders.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('product_id', sa.Integer, sa.ForeignKey('products.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('quantity', sa.Integer, nullable=False),
        sa.Column('unit_price', sa.Numeric(18, 2), nullable=False),
        sa.Column('line_total', sa.Numeric(18, 2), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False)
    )
    op.create_table(
        'deliveries',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('order_id', sa.Integer, sa.ForeignKey('orders.id', ondelete='RESTRICT'), nullable=False, index=True),
        sa.Column('tracking_number', sa.String(100), nullable=False, index=True),
        sa.Column('carrier_name', sa.String(100), nullable=False),
        sa.Column('status', sa.String(50), nullable=False, server_default='Pending'),
        sa.Column('shipped_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('delivered_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('delivery_address', sa.String(500), nullable=False),
        sa.Column('delivery_notes', sa.Text, nullable=True),
        sa.Column('signed_by', sa.String(200), nullable=True),
        *_timestamps()
    )
    op.create_table(
        'inventory',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('product_id', sa.Integer, sa.ForeignKey('products.id', ondelete='RESTRICT'), nullable=False, index=True),
        sa.Column('quantity_on_hand', sa.Integer, nullable=False),
        sa.Column('quantity_reserved', sa.Integer, nullable=False, server_default='0'),
        sa.Column('quantity_available', sa.Integer, nullable=False),
        sa.Column('reorder_level', sa.Integer, nullable=False, server_default='0'),
        sa.Column('reorder_quantity', sa.Integer, nullable=False, server_default='0'),
        sa.Column('warehouse_location', sa.String(100), nullable=False),
        *_timestamps()
    )
    op.create_table(
        'payments',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('order_id', sa.Integer, sa.ForeignKey('orders.id', ondelete='RESTRICT'), nullable=False, index=True),
        sa.Column('amount', sa.Numeric(18, 2), nullable=False),
        sa.Column('payment_method', sa.String(50), nullable=False),
        sa.Column('status', sa.String(50), nullable=False, server_default='Pending'),
        sa.Column('transaction_id', sa.String(100), nullable=False),
        sa.Column('reference', sa.String(100), nullable=True),
        sa.Column('payment_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('refund_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('refund_reason', sa.Text, nullable=True),
        *_timestamps()
    )

def downgrade():
    for table in ('payments', 'inventory', 'deliveries', 'order_items', 'orders', 'products', 'suppliers', 'categories'):
        op.drop_table(table)
