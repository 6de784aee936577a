"""Add hydration_entries and user_goals tables

Revision ID: 002
Revises: 001
Create Date: 2026-02-06 09:30:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create hydration_entries and user_goals tables."""
    op.create_table('hydration_entries', sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('amount', sa.Integer(), nullable=False),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('type', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_hydration_entries_user_id'), 'hydration_entries', ['user_id'], unique=False)
    op.create_index(op.f('ix_hydration_entries_timestamp'), 'hydration_entries', ['timestamp'], unique=False)

    op.create_table('user_goals', sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('daily_goal', sa.Integer(), nullable=False, server_default='2000'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('user_id'))


def downgrade() -> None:
    """Drop hydration_entries and user_goals tables."""
    op.drop_table('user_goals')
    op.drop_index(op.f('ix_hydration_entries_timestamp'), table_name='hydration_entries')
    op.drop_index(op.f('ix_hydration_entries_user_id'), table_name='hydration_entries')
    op.drop_table('hydration_entries')
