"""Shipping rates

Revision ID: a83e5b0c61d2
Revises: 4f1c2a9d7e35
Create Date: 2026-10-19 10:27:03.114592

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'a83e5b0c61d2'
down_revision = '4f1c2a9d7e35'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('shipping_rates',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('when_created', sa.DateTime(), nullable=True),
        sa.Column('when_changed', sa.DateTime(), nullable=True),
        sa.Column('name', sa.String(length=128), nullable=True),
        sa.Column('pincode', sa.String(length=16), nullable=True),
        sa.Column('pincode_prefix', sa.String(length=16), nullable=True),
        sa.Column('zone', sa.String(length=64), nullable=True),
        sa.Column('base_cost', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('surcharge', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('free_shipping_threshold', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('estimated_delivery_min', sa.Integer(), nullable=True),
        sa.Column('estimated_delivery_max', sa.Integer(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_shipping_rates_when_created'), 'shipping_rates', ['when_created'], unique=False)
    op.create_index(op.f('ix_shipping_rates_pincode'), 'shipping_rates', ['pincode'], unique=False)
    op.create_index(op.f('ix_shipping_rates_pincode_prefix'), 'shipping_rates', ['pincode_prefix'], unique=False)
    op.create_index(op.f('ix_shipping_rates_zone'), 'shipping_rates', ['zone'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_shipping_rates_zone'), table_name='shipping_rates')
    op.drop_index(op.f('ix_shipping_rates_pincode_prefix'), table_name='shipping_rates')
    op.drop_index(op.f('ix_shipping_rates_pincode'), table_name='shipping_rates')
    op.drop_index(op.f('ix_shipping_rates_when_created'), table_name='shipping_rates')
    op.drop_table('shipping_rates')
