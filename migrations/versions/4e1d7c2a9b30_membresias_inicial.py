"""membresias inicial

Revision ID: 4e1d7c2a9b30
Revises: 
Create Date: 2025-01-08 18:12:44.512307

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID


# revision identifiers, used by Alembic.
revision: str = '4e1d7c2a9b30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'membership_plans',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('price', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('duration_months', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('free_months', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('subscription_fee', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_membership_plans_id', 'membership_plans', ['id'])

    op.create_table(
        'pickup_locations',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('schedule', sa.Text()),
        sa.Column('zone', sa.Text()),
        sa.Column('delivery_days', sa.Text()),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        'customers',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('email', sa.Text(), nullable=False, unique=True),
        sa.Column('phone', sa.Text()),
        sa.Column('password_hash', sa.Text(), nullable=False),
        sa.Column('membership_code', sa.Text(), nullable=False),
        sa.Column('status', sa.Text(), nullable=False, server_default='PENDING'),
        sa.Column('membership_plan_id', sa.Integer(), sa.ForeignKey('membership_plans.id'), nullable=False),
        sa.Column('start_date', sa.Date()),
        sa.Column('end_date', sa.Date()),
        sa.Column('pickup_location_id', UUID(as_uuid=True),
                  sa.ForeignKey('pickup_locations.id', ondelete='SET NULL')),
        sa.Column('delivered', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('delivered_at', sa.TIMESTAMP(timezone=True)),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint("status IN ('ACTIVE','CANCELLED','PENDING')", name='ck_customers_status'),
        sa.CheckConstraint('end_date IS NULL OR start_date IS NULL OR end_date >= start_date',
                           name='ck_customers_fechas'),
    )
    op.create_index('ix_customers_membership_code', 'customers', ['membership_code'], unique=True)

    op.create_table(
        'membership_renewals',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('customer_id', UUID(as_uuid=True),
                  sa.ForeignKey('customers.id', ondelete='CASCADE'), nullable=False),
        sa.Column('membership_plan_id', sa.Integer(), sa.ForeignKey('membership_plans.id'), nullable=False),
        sa.Column('renewal_date', sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column('concept', sa.Text(), nullable=False),
        sa.Column('amount', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('method_of_payment', sa.Text()),
        sa.Column('received_by', sa.Text()),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        'huacales',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('customer_id', UUID(as_uuid=True),
                  sa.ForeignKey('customers.id', ondelete='CASCADE'), nullable=False),
        sa.Column('pickup_location_id', UUID(as_uuid=True),
                  sa.ForeignKey('pickup_locations.id', ondelete='SET NULL')),
        sa.Column('cantidad', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('tipo', sa.Text()),
        sa.Column('extras', sa.Text(), nullable=False, server_default='No'),
        sa.Column('extra_item', sa.Text()),
        sa.Column('extra_price', sa.Numeric(10, 2)),
        sa.Column('delivery_time', sa.Text()),
        sa.Column('transport_type', sa.Text(), nullable=False, server_default='Huacal'),
        sa.Column('returned_huacals', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('payment_method', sa.Text()),
        sa.Column('cash_payment', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('status', sa.Text(), nullable=False, server_default='Pendiente'),
        sa.Column('domicilio', sa.Text()),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        'administrador',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('email', sa.Text(), nullable=False, unique=True),
        sa.Column('password_hash', sa.Text(), nullable=False),
        sa.Column('activo', sa.Boolean(), server_default=sa.true()),
        sa.Column('creado_en', sa.TIMESTAMP(timezone=True), server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table('administrador')
    op.drop_table('huacales')
    op.drop_table('membership_renewals')
    op.drop_index('ix_customers_membership_code', table_name='customers')
    op.drop_table('customers')
    op.drop_table('pickup_locations')
    op.drop_index('ix_membership_plans_id', table_name='membership_plans')
    op.drop_table('membership_plans')
