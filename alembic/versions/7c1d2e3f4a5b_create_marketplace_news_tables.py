"""create_marketplace_news_tables

Revision ID: 7c1d2e3f4a5b
Revises:
Create Date: 2026-10-17 10:12:41.208113

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '7c1d2e3f4a5b'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create market_places, users, subscriptions and news tables."""
    op.create_table('market_places',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('login', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('login')
    )
    op.create_index('ix_users_login', 'users', ['login'])
    op.create_index('ix_users_email', 'users', ['email'])

    op.create_table('subscriptions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('id_market_place', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_subscriptions_id_market_place', 'subscriptions', ['id_market_place'])
    op.create_index('ix_subscriptions_user_id', 'subscriptions', ['user_id'])

    op.create_table('news',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('market_place_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('now()'), nullable=True),
        sa.ForeignKeyConstraint(['market_place_id'], ['market_places.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_news_market_place_id', 'news', ['market_place_id'])


def downgrade() -> None:
    """Drop the marketplace news tables and indexes."""
    op.drop_index('ix_news_market_place_id', 'news')
    op.drop_table('news')
    op.drop_index('ix_subscriptions_user_id', 'subscriptions')
    op.drop_index('ix_subscriptions_id_market_place', 'subscriptions')
    op.drop_table('subscriptions')
    op.drop_index('ix_users_email', 'users')
    op.drop_index('ix_users_login', 'users')
    op.drop_table('users')
    op.drop_table('market_places')
