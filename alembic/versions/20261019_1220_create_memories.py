"""create memories table

trip_id carries no foreign key: deleting a trip leaves its memories.

Revision ID: 20261019_1220_create_memories
Revises: 20261019_1210_create_trips
Create Date: 2026-10-19 12:20:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20261019_1220_create_memories'
down_revision = '20261019_1210_create_trips'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'memories',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('trip_id', sa.Integer(), nullable=False, index=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('photo_url', sa.String(1024), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False, index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

def downgrade() -> None:
    op.drop_table('memories')
