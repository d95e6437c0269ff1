"""Create price watch items and price snapshots tables

Revision ID: 3f9c1e7a2b4d
Revises:
Create Date: 2026-10-16 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c1e7a2b4d'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create price_watch_items and price_snapshots tables."""
    op.create_table(
        'price_watch_items',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('product_name', sa.String(), nullable=False),
        sa.Column('target_price', sa.Float(), nullable=True),
        sa.Column('currency', sa.String(), nullable=True),
        sa.Column('product_url', sa.String(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='1'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_price_watch_items_user_id', 'price_watch_items', ['user_id'])

    op.create_table(
        'price_snapshots',
        sa.Column('id', sa.String(), nullable=False),
        sa.Column('item_id', sa.String(), nullable=False),
        sa.Column('fetched_at', sa.DateTime(), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('currency', sa.String(), nullable=True),
        sa.Column('source', sa.String(), nullable=True),
        sa.Column('success', sa.Boolean(), nullable=False, server_default='1'),
        sa.Column('message', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['item_id'], ['price_watch_items.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_price_snapshots_item_id', 'price_snapshots', ['item_id'])
    op.create_index('ix_price_snapshots_fetched_at', 'price_snapshots', ['fetched_at'])


def downgrade() -> None:
    """Remove price_snapshots and price_watch_items tables."""
    op.drop_table('price_snapshots')
    op.drop_table('price_watch_items')
