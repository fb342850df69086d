"""create workout tables

Revision ID: 5e2c9a7d41b0
Revises:
Create Date: 2026-01-12 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5e2c9a7d41b0'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = inspector.get_table_names()
    if 'workouts' not in tables:
        op.create_table(
            'workouts',
            sa.Column('id', sa.String(length=36), primary_key=True, nullable=False),
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('routine_id', sa.String(length=36), nullable=True),
            sa.Column('started_at', sa.DateTime(timezone=True), nullable=False),
            sa.Column('ended_at', sa.DateTime(timezone=True), nullable=True),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        )
        op.create_index('ix_workouts_started_at', 'workouts', ['started_at'])

    if 'workout_exercises' not in tables:
        op.create_table(
            'workout_exercises',
            sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
            sa.Column('workout_id', sa.String(length=36), sa.ForeignKey('workouts.id', ondelete='CASCADE'), nullable=False),
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('order', sa.Integer(), nullable=False, server_default='0'),
        )
        op.create_index('ix_workout_exercises_id', 'workout_exercises', ['id'])
        op.create_index('ix_workout_exercises_workout_id', 'workout_exercises', ['workout_id'])

    if 'workout_sets' not in tables:
        op.create_table(
            'workout_sets',
            sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
            sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('workout_exercises.id', ondelete='CASCADE'), nullable=False),
            sa.Column('weight', sa.Float(), nullable=False, server_default='0'),
            sa.Column('reps', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('rir', sa.Integer(), nullable=True),
            sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.true()),
        )
        op.create_index('ix_workout_sets_id', 'workout_sets', ['id'])
        op.create_index('ix_workout_sets_exercise_id', 'workout_sets', ['exercise_id'])


def downgrade() -> None:
    # Safe drop if exists, children first
    op.execute('DROP TABLE IF EXISTS workout_sets')
    op.execute('DROP TABLE IF EXISTS workout_exercises')
    op.execute('DROP TABLE IF EXISTS workouts')
