"""create_habits_table

Revision ID: 7d2f4c1a9b3e
Revises:
Create Date: 2025-01-19 12:41:07.318204

"""
from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '7d2f4c1a9b3e'
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        'habits',
        sa.Column('id', sa.String(length=500), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=False),
        sa.Column('type', sa.Integer(), nullable=False),
        sa.Column('frequency_type', sa.Integer(), nullable=False),
        sa.Column('frequency_times_per_period', sa.Integer(), nullable=False),
        sa.Column('target_value', sa.Integer(), nullable=False),
        sa.Column('target_unit', sa.String(length=100), nullable=False),
        sa.Column('status', sa.Integer(), nullable=False),
        sa.Column('is_archived', sa.Boolean(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('milestone_target', sa.Integer(), nullable=True),
        sa.Column('milestone_current', sa.Integer(), nullable=True),
        sa.Column('created_at_utc', sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column('updated_at_utc', sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column('last_completed_at_utc', sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint(
            '(milestone_target IS NULL) = (milestone_current IS NULL)', name='ck_habits_milestone_complete'
        ),
    )


def downgrade() -> None:
    op.drop_table('habits')
