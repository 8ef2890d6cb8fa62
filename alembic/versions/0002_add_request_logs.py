from alembic import op
import sqlalchemy as sa

revision = '0002_add_request_logs'
down_revision = '0001_init'
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'request_logs',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('request_method', sa.String(10), nullable=False),
        sa.Column('request_path', sa.String(2048), nullable=False),
        sa.Column('status_code', sa.Integer, nullable=True),
        sa.Column('elapsed_milliseconds', sa.BigInteger, nullable=False),
        sa.Column('requested_at', sa.DateTime(timezone=True), nullable=False)
    )
    op.create_index('ix_request_logs_requested_at', 'request_logs', ['requested_at'])

def downgrade():
    op.drop_index('ix_request_logs_requested_at', table_name='request_logs')
    op.drop_table('request_logs')
