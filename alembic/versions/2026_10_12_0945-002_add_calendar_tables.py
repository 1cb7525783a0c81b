"""Add activities, workout library and workout assignments

Revision ID: 002
Revises: 001
Create Date: 2026-10-12 09:45:00.000000

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

AutoString = sqlmodel.sql.sqltypes.AutoString


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
    ]


def upgrade() -> None:
    """Create activities, workout_library, workout_segments and workout_assignments."""
    op.create_table('activities', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('intervals_icu_id', AutoString(length=50), nullable=True),
        sa.Column('external_id', AutoString(length=100), nullable=True),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', AutoString(length=255), nullable=False),
        sa.Column('description', AutoString(), nullable=True),
        sa.Column('activity_type', AutoString(length=50), nullable=False),
        sa.Column('start_date_local', AutoString(length=40), nullable=False),
        sa.Column('start_date_utc', sa.DateTime(), nullable=True),
        sa.Column('timezone', AutoString(length=64), nullable=True),
        sa.Column('elapsed_time', sa.Integer(), nullable=True),
        sa.Column('moving_time', sa.Integer(), nullable=True),
        sa.Column('recording_time', sa.Integer(), nullable=True),
        sa.Column('distance', sa.Float(), nullable=True),
        sa.Column('average_speed', sa.Float(), nullable=True),
        sa.Column('max_speed', sa.Float(), nullable=True),
        sa.Column('has_power_data', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('average_watts', sa.Float(), nullable=True),
        sa.Column('weighted_avg_watts', sa.Float(), nullable=True),
        sa.Column('max_watts', sa.Float(), nullable=True),
        sa.Column('normalized_power', sa.Float(), nullable=True),
        sa.Column('ftp_watts', sa.Integer(), nullable=True),
        sa.Column('has_heartrate', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('average_heartrate', sa.Float(), nullable=True),
        sa.Column('max_heartrate', sa.Float(), nullable=True),
        sa.Column('average_cadence', sa.Float(), nullable=True),
        sa.Column('training_load', sa.Float(), nullable=True),
        sa.Column('intensity_factor', sa.Float(), nullable=True),
        sa.Column('training_stress_score', sa.Float(), nullable=True),
        sa.Column('calories', sa.Float(), nullable=True),
        sa.Column('elevation_gain', sa.Float(), nullable=True),
        sa.Column('power_zone_times', sa.JSON(), nullable=True),
        sa.Column('hr_zone_times', sa.JSON(), nullable=True),
        sa.Column('trainer', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('commute', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('race', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('source', AutoString(length=50), nullable=False, server_default='intervals.icu'),
        sa.Column('synced_at', sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'intervals_icu_id', name='uq_activity_user_icu_id'))
    op.create_index(op.f('ix_activities_user_id'), 'activities', ['user_id'], unique=False)
    op.create_index(op.f('ix_activities_activity_type'), 'activities', ['activity_type'], unique=False)
    op.create_index(op.f('ix_activities_start_date_local'), 'activities', ['start_date_local'], unique=False)

    op.create_table('workout_library', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', AutoString(length=255), nullable=False),
        sa.Column('description', AutoString(), nullable=True),
        sa.Column('training_type', AutoString(length=50), nullable=False),
        sa.Column('primary_control_parameter', AutoString(length=50), nullable=False, server_default='power'),
        sa.Column('secondary_control_parameter', AutoString(length=50), nullable=True),
        sa.Column('estimated_duration_minutes', sa.Integer(), nullable=False),
        sa.Column('difficulty_level', sa.Integer(), nullable=False, server_default='5'),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('is_public', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_by', sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['created_by'], ['users.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('difficulty_level BETWEEN 1 AND 10', name='ck_workout_library_difficulty'))
    op.create_index(op.f('ix_workout_library_name'), 'workout_library', ['name'], unique=False)
    op.create_index(op.f('ix_workout_library_training_type'), 'workout_library', ['training_type'], unique=False)

    op.create_table('workout_segments', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('workout_library_id', sa.Integer(), nullable=False),
        sa.Column('segment_order', sa.Integer(), nullable=False),
        sa.Column('segment_type', AutoString(length=20), nullable=False),
        sa.Column('name', AutoString(length=255), nullable=True),
        sa.Column('duration_minutes', sa.Float(), nullable=False),
        sa.Column('power_min_percent', sa.Float(), nullable=True),
        sa.Column('power_max_percent', sa.Float(), nullable=True),
        sa.Column('hr_min_percent', sa.Float(), nullable=True),
        sa.Column('hr_max_percent', sa.Float(), nullable=True),
        sa.Column('cadence_min', sa.Integer(), nullable=True),
        sa.Column('cadence_max', sa.Integer(), nullable=True),
        sa.Column('rpe_min', sa.Integer(), nullable=True),
        sa.Column('rpe_max', sa.Integer(), nullable=True),
        sa.Column('repetitions', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('rest_duration_minutes', sa.Float(), nullable=True),
        sa.Column('instructions', AutoString(), nullable=True),
        sa.ForeignKeyConstraint(['workout_library_id'], ['workout_library.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('workout_library_id', 'segment_order', name='uq_segment_workout_order'))
    op.create_index(op.f('ix_workout_segments_workout_library_id'), 'workout_segments', ['workout_library_id'],
                    unique=False)

    op.create_table('workout_assignments', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('workout_library_id', sa.Integer(), nullable=False),
        sa.Column('assigned_to_user_id', sa.Integer(), nullable=False),
        sa.Column('assigned_by_user_id', sa.Integer(), nullable=False),
        sa.Column('scheduled_date', sa.Date(), nullable=False),
        sa.Column('status', AutoString(length=20), nullable=False, server_default='assigned'),
        sa.Column('priority', AutoString(length=20), nullable=False, server_default='normal'),
        sa.Column('intensity_adjustment', sa.Float(), nullable=False, server_default='1.0'),
        sa.Column('duration_adjustment', sa.Float(), nullable=False, server_default='1.0'),
        sa.Column('custom_notes', AutoString(length=2000), nullable=True),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.Column('athlete_feedback', AutoString(length=2000), nullable=True),
        sa.Column('coach_review', AutoString(length=2000), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['workout_library_id'], ['workout_library.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['assigned_to_user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['assigned_by_user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint("status IN ('assigned', 'in_progress', 'completed', 'skipped', 'cancelled')",
                           name='ck_workout_assignments_status'),
        sa.CheckConstraint("priority IN ('low', 'normal', 'high', 'urgent')", name='ck_workout_assignments_priority'))
    op.create_index(op.f('ix_workout_assignments_workout_library_id'), 'workout_assignments', ['workout_library_id'],
                    unique=False)
    op.create_index(op.f('ix_workout_assignments_assigned_to_user_id'), 'workout_assignments',
                    ['assigned_to_user_id'], unique=False)
    op.create_index(op.f('ix_workout_assignments_assigned_by_user_id'), 'workout_assignments',
                    ['assigned_by_user_id'], unique=False)
    op.create_index(op.f('ix_workout_assignments_scheduled_date'), 'workout_assignments', ['scheduled_date'],
                    unique=False)
    op.create_index('ix_workout_assignments_user_date', 'workout_assignments',
                    ['assigned_to_user_id', 'scheduled_date'], unique=False)


def downgrade() -> None:
    """Drop calendar tables."""
    op.drop_table('workout_assignments')
    op.drop_table('workout_segments')
    op.drop_table('workout_library')
    op.drop_table('activities')
