"""Add profile, session template, event and booking tables

Revision ID: 001
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

AutoString = sqlmodel.sql.sqltypes.AutoString


def upgrade() -> None:
    """Create user_profiles, session_templates, events and bookings."""
    op.create_table('user_profiles', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', AutoString(length=255), nullable=False),
        sa.Column('full_name', AutoString(length=255), nullable=False),
        sa.Column('home_borough', AutoString(length=255), nullable=False),
        sa.Column('favourite_activity', AutoString(length=255), nullable=False),
        sa.Column('other_activities', AutoString(), nullable=False),
        sa.Column('preferred_days', AutoString(), nullable=False),
        sa.Column('preferred_times', AutoString(), nullable=False),
        sa.Column('experience_level', AutoString(length=100), nullable=False),
        sa.Column('motivations', AutoString(), nullable=False),
        sa.Column('session_format', AutoString(length=100), nullable=False),
        sa.Column('gender', AutoString(length=50), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_user_profiles_email'), 'user_profiles', ['email'], unique=True)

    op.create_table('session_templates', sa.Column('session_template_id', AutoString(length=64), nullable=False),
        sa.Column('title', AutoString(length=255), nullable=False),
        sa.Column('sport', AutoString(length=100), nullable=False),
        sa.Column('difficulty', AutoString(length=100), nullable=False),
        sa.Column('default_duration_minutes', sa.Integer(), nullable=True),
        sa.Column('tags', AutoString(), nullable=False),
        sa.Column('description', AutoString(), nullable=False),
        sa.PrimaryKeyConstraint('session_template_id'))

    op.create_table('events', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('event_id', AutoString(length=64), nullable=False),
        sa.Column('session_template_id', AutoString(length=64), nullable=False),
        sa.Column('event_name', AutoString(length=255), nullable=False),
        sa.Column('category', AutoString(length=100), nullable=False),
        sa.Column('date', AutoString(length=50), nullable=False),
        sa.Column('time', AutoString(length=50), nullable=False),
        sa.Column('end_time', AutoString(length=50), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=True),
        sa.Column('location', AutoString(length=500), nullable=False),
        sa.Column('borough', AutoString(length=100), nullable=False),
        sa.Column('base_price', AutoString(length=50), nullable=False),
        sa.Column('spots_remaining', sa.Integer(), nullable=True),
        sa.Column('active', AutoString(length=20), nullable=False),
        sa.Column('gender_target', AutoString(length=50), nullable=False),
        sa.Column('motivation_tags', AutoString(), nullable=False),
        sa.Column('session_format', AutoString(length=100), nullable=False),
        sa.Column('booking_url', AutoString(length=500), nullable=False),
        sa.Column('attendee_list_url', AutoString(length=500), nullable=False),
        sa.Column('image_url', AutoString(length=500), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_events_event_id'), 'events', ['event_id'], unique=False)
    op.create_index(op.f('ix_events_session_template_id'), 'events', ['session_template_id'], unique=False)
    op.create_index(op.f('ix_events_date'), 'events', ['date'], unique=False)

    op.create_table('bookings', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('booking_id', AutoString(length=64), nullable=False),
        sa.Column('booking_date', AutoString(length=50), nullable=False),
        sa.Column('event_id', AutoString(length=64), nullable=False),
        sa.Column('customer_email', AutoString(length=255), nullable=False),
        sa.Column('amount_paid', AutoString(length=50), nullable=False),
        sa.Column('status', AutoString(length=50), nullable=False),
        sa.Column('skill_level', AutoString(length=100), nullable=False),
        sa.Column('event_name', AutoString(length=255), nullable=False),
        sa.Column('event_date', AutoString(length=50), nullable=False),
        sa.Column('event_time', AutoString(length=50), nullable=False),
        sa.Column('event_location', AutoString(length=500), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_bookings_booking_id'), 'bookings', ['booking_id'], unique=False)
    op.create_index(op.f('ix_bookings_event_id'), 'bookings', ['event_id'], unique=False)
    op.create_index(op.f('ix_bookings_customer_email'), 'bookings', ['customer_email'], unique=False)


def downgrade() -> None:
    """Drop the dashboard tables."""
    op.drop_index(op.f('ix_bookings_customer_email'), table_name='bookings')
    op.drop_index(op.f('ix_bookings_event_id'), table_name='bookings')
    op.drop_index(op.f('ix_bookings_booking_id'), table_name='bookings')
    op.drop_table('bookings')
    op.drop_index(op.f('ix_events_date'), table_name='events')
    op.drop_index(op.f('ix_events_session_template_id'), table_name='events')
    op.drop_index(op.f('ix_events_event_id'), table_name='events')
    op.drop_table('events')
    op.drop_table('session_templates')
    op.drop_index(op.f('ix_user_profiles_email'), table_name='user_profiles')
    op.drop_table('user_profiles')
