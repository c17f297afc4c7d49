"""create_day_reminder_preference

Revision ID: a1c2e3f4b5d6
Revises:
Create Date: 2026-10-17 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = 'a1c2e3f4b5d6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('day',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('wake_time', sqlmodel.sql.sqltypes.AutoString(length=5), nullable=False),
        sa.Column('sleep_time', sqlmodel.sql.sqltypes.AutoString(length=5), nullable=False),
        sa.Column('target_cigarettes', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('date', name='uq_day_date'),
    )
    op.create_table('reminder',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('day_id', sa.Uuid(), nullable=False),
        sa.Column('time', sqlmodel.sql.sqltypes.AutoString(length=5), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['day_id'], ['day.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_reminder_day_id'), 'reminder', ['day_id'])
    op.create_table('preference',
        sa.Column('key', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('value', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('key'),
    )


def downgrade() -> None:
    op.drop_table('preference')
    op.drop_index(op.f('ix_reminder_day_id'), table_name='reminder')
    op.drop_table('reminder')
    op.drop_table('day')
