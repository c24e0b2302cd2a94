"""create trips table

Revision ID: 20261019_1210_create_trips
Revises: 20261019_1200_create_users
Create Date: 2026-10-19 12:10:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20261019_1210_create_trips'
down_revision = '20261019_1200_create_users'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'trips',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('location', sa.String(255), nullable=False),
        sa.Column('date', sa.Date(), nullable=False, index=True),
        sa.Column('category', sa.String(32), nullable=False, index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

def downgrade() -> None:
    op.drop_table('trips')
