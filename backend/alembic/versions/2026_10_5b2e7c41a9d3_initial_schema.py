"""initial schema

Revision ID: 5b2e7c41a9d3
Revises:
Create Date: 2026-10-18 10:12:44.518203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '5b2e7c41a9d3'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

JSON_TYPE = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    op.create_table(
        'user_profiles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('sex', sa.String(20), nullable=False),
        sa.Column('age', sa.Integer(), nullable=False),
        sa.Column('weight', sa.Integer(), nullable=False),
        sa.Column('height', sa.Integer(), nullable=False),
        sa.Column('goal', sa.String(50), nullable=False),
        sa.Column('activity_level', sa.String(50), nullable=False),
        sa.Column('equipment', JSON_TYPE, nullable=True),
        sa.Column('impediments', sa.String(), nullable=True),
        sa.Column('time_per_day', sa.Integer(), nullable=True),
        sa.Column('difficulty', sa.String(20), nullable=True),
        sa.Column('language', sa.String(5), nullable=True),
        sa.Column('timezone', sa.String(50), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_user_profiles_id', 'user_profiles', ['id'])

    op.create_table(
        'fitness_plans',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('user_profiles.id', ondelete='CASCADE'), nullable=False),
        sa.Column('plan_data', JSON_TYPE, nullable=False),
        sa.Column('current_day', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('duration_days', sa.Integer(), nullable=False, server_default='30'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('start_date', sa.DateTime(), nullable=True),
        sa.Column('end_date', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_fitness_plans_id', 'fitness_plans', ['id'])
    op.create_index('ix_fitness_plans_user_id', 'fitness_plans', ['user_id'])

    op.create_table(
        'exercise_progress',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('user_profiles.id', ondelete='CASCADE'), nullable=False),
        sa.Column('plan_id', sa.Integer(), sa.ForeignKey('fitness_plans.id', ondelete='CASCADE'), nullable=False),
        sa.Column('day', sa.Integer(), nullable=False),
        sa.Column('completed', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('difficulty', sa.String(20), nullable=True),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_exercise_progress_id', 'exercise_progress', ['id'])
    op.create_index('ix_exercise_progress_user_id', 'exercise_progress', ['user_id'])
    op.create_index('ix_exercise_progress_plan_id', 'exercise_progress', ['plan_id'])

    op.create_table(
        'custom_meals',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('user_profiles.id', ondelete='CASCADE'), nullable=False),
        sa.Column('plan_id', sa.Integer(), sa.ForeignKey('fitness_plans.id', ondelete='CASCADE'), nullable=False),
        sa.Column('day_index', sa.Integer(), nullable=False),
        sa.Column('meal_slot', sa.Integer(), nullable=False),
        sa.Column('custom_meal', JSON_TYPE, nullable=False),
        sa.Column('original_meal', JSON_TYPE, nullable=True),
        sa.Column('source', sa.String(20), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.UniqueConstraint('plan_id', 'day_index', 'meal_slot', name='uq_custom_meal_slot'),
    )
    op.create_index('ix_custom_meals_id', 'custom_meals', ['id'])
    op.create_index('ix_custom_meals_user_id', 'custom_meals', ['user_id'])
    op.create_index('ix_custom_meals_plan_id', 'custom_meals', ['plan_id'])

    op.create_table(
        'exercises',
        sa.Column('id', sa.String(100), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('name_pt', sa.String(), nullable=True),
        sa.Column('category', sa.String(), nullable=True),
        sa.Column('primary_muscles', JSON_TYPE, nullable=True),
        sa.Column('secondary_muscles', JSON_TYPE, nullable=True),
        sa.Column('equipment', sa.String(), nullable=True),
        sa.Column('difficulty', sa.String(), nullable=True),
        sa.Column('image_url', sa.String(), nullable=True),
        sa.Column('video_url', sa.String(), nullable=True),
        sa.Column('instructions', sa.Text(), nullable=True),
        sa.Column('instructions_pt', sa.Text(), nullable=True),
        sa.Column('is_enriched', sa.Boolean(), nullable=True),
    )
    op.create_index('ix_exercises_id', 'exercises', ['id'])
    op.create_index('ix_exercises_name', 'exercises', ['name'])
    op.create_index('ix_exercises_name_pt', 'exercises', ['name_pt'])

    op.create_table(
        'notification_settings',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('user_profiles.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('water_reminders_enabled', sa.Boolean(), nullable=True),
        sa.Column('water_reminder_interval_minutes', sa.Integer(), nullable=True),
        sa.Column('water_target_ml', sa.Integer(), nullable=True),
        sa.Column('sleep_start_hour', sa.Integer(), nullable=True),
        sa.Column('sleep_end_hour', sa.Integer(), nullable=True),
    )
    op.create_index('ix_notification_settings_id', 'notification_settings', ['id'])

    op.create_table(
        'notifications',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('user_profiles.id', ondelete='CASCADE'), nullable=False),
        sa.Column('type', sa.String(50), nullable=True),
        sa.Column('message', sa.String(255), nullable=False),
        sa.Column('read', sa.Boolean(), nullable=True),
        sa.Column('sent_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_notifications_id', 'notifications', ['id'])
    op.create_index('ix_notifications_user_id', 'notifications', ['user_id'])

    op.create_table(
        'coach_messages',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('user_profiles.id', ondelete='CASCADE'), nullable=False),
        sa.Column('role', sa.String(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_coach_messages_id', 'coach_messages', ['id'])
    op.create_index('ix_coach_messages_user_id', 'coach_messages', ['user_id'])


def downgrade() -> None:
    for table in (
        'coach_messages', 'notifications', 'notification_settings', 'exercises',
        'custom_meals', 'exercise_progress', 'fitness_plans', 'user_profiles',
    ):
        op.drop_table(table)
