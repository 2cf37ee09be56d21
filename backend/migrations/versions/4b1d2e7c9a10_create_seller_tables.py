"""create sellers, refresh_tokens and products

Revision ID: 4b1d2e7c9a10
Revises:
Create Date: 2025-01-15 00:00:00.000000
"""
import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = '4b1d2e7c9a10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'sellers',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('shop_name', sa.String(length=120), nullable=True),
        sa.Column('owner_name', sa.String(length=120), nullable=True),
        sa.Column('address', sa.String(length=255), nullable=True),
        sa.Column('city', sa.String(length=80), nullable=True),
        sa.Column('state', sa.String(length=80), nullable=True),
        sa.Column('pincode', sa.String(length=12), nullable=True),
        sa.Column('open_time', sa.String(length=10), nullable=True),
        sa.Column('close_time', sa.String(length=10), nullable=True),
        sa.Column('categories', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_sellers')),
        sa.UniqueConstraint('phone', name='uq_sellers_phone'),
    )

    op.create_table(
        'refresh_tokens',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('token', sa.Text(), nullable=False),
        sa.Column('seller_id', sa.String(length=36), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.ForeignKeyConstraint(['seller_id'], ['sellers.id'], name=op.f('fk_refresh_tokens_seller_id_sellers'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_refresh_tokens')),
    )
    with op.batch_alter_table('refresh_tokens', schema=None) as batch_op:
        batch_op.create_index('ix_refresh_tokens_seller_id', ['seller_id'], unique=False)

    op.create_table(
        'products',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('seller_id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('mrp_price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('selling_price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('images', sa.JSON(), nullable=False),
        sa.Column('category', sa.String(length=120), nullable=True),
        sa.Column('subcategory', sa.String(length=120), nullable=True),
        sa.Column('size_quantities', sa.JSON(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.CheckConstraint('selling_price <= mrp_price', name=op.f('ck_products_selling_le_mrp')),
        sa.CheckConstraint('mrp_price >= 0', name=op.f('ck_products_mrp_non_negative')),
        sa.CheckConstraint('selling_price >= 0', name=op.f('ck_products_selling_non_negative')),
        sa.ForeignKeyConstraint(['seller_id'], ['sellers.id'], name=op.f('fk_products_seller_id_sellers'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_products')),
    )
    with op.batch_alter_table('products', schema=None) as batch_op:
        batch_op.create_index('ix_products_seller_id', ['seller_id'], unique=False)
        batch_op.create_index('ix_products_active_category', ['is_active', 'category'], unique=False)


def downgrade():
    with op.batch_alter_table('products', schema=None) as batch_op:
        batch_op.drop_index('ix_products_active_category')
        batch_op.drop_index('ix_products_seller_id')
    op.drop_table('products')

    with op.batch_alter_table('refresh_tokens', schema=None) as batch_op:
        batch_op.drop_index('ix_refresh_tokens_seller_id')
    op.drop_table('refresh_tokens')

    op.drop_table('sellers')
