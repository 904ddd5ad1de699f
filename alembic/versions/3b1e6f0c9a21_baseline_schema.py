"""baseline schema

Revision ID: 3b1e6f0c9a21
Revises: 
Create Date: 2026-10-19 09:12:44.518203

Creates users and the four owned tables. Cascades live on the foreign keys:
deleting a user removes everything they own, deleting an application removes
its interviews and clears resource links.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3b1e6f0c9a21'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


application_status = sa.Enum(
    'applied', 'phone_screen', 'technical', 'onsite', 'final', 'offer', 'rejected', 'withdrawn',
    name='application_status',
)
interview_type = sa.Enum(
    'phone_screen', 'technical', 'system_design', 'behavioral', 'final', 'other',
    name='interview_type',
)
interview_status = sa.Enum('scheduled', 'completed', 'cancelled', name='interview_status')
resource_category = sa.Enum(
    'algorithms', 'system_design', 'behavioral', 'company_specific', 'resume', 'other',
    name='resource_category',
)
question_type = sa.Enum(
    'behavioral', 'technical', 'system_design', 'company_culture', 'experience',
    name='question_type',
)


def upgrade() -> None:
    op.create_table('users',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=True),
        sa.Column('external_id', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('external_id')
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table('applications',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('company_name', sa.Text(), nullable=False),
        sa.Column('position_title', sa.Text(), nullable=False),
        sa.Column('job_url', sa.Text(), nullable=True),
        sa.Column('logo_url', sa.Text(), nullable=True),
        sa.Column('status', application_status, nullable=False),
        sa.Column('salary_min', sa.Integer(), nullable=True),
        sa.Column('salary_max', sa.Integer(), nullable=True),
        sa.Column('location', sa.Text(), nullable=True),
        sa.Column('is_remote', sa.Boolean(), nullable=False),
        sa.Column('application_date', sa.DateTime(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_applications_user_id'), 'applications', ['user_id'], unique=False)
    op.create_index('idx_applications_user_date', 'applications', ['user_id', 'application_date'], unique=False)
    op.create_index('idx_applications_user_status', 'applications', ['user_id', 'status'], unique=False)

    op.create_table('interviews',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('application_id', sa.String(length=36), nullable=False),
        sa.Column('interview_type', interview_type, nullable=False),
        sa.Column('interview_date', sa.DateTime(), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=True),
        sa.Column('interviewer_names', sa.Text(), nullable=True),
        sa.Column('platform', sa.Text(), nullable=True),
        sa.Column('status', interview_status, nullable=False),
        sa.Column('prep_notes', sa.Text(), nullable=True),
        sa.Column('interview_notes', sa.Text(), nullable=True),
        sa.Column('questions_asked', sa.Text(), nullable=True),
        sa.Column('rating', sa.Integer(), nullable=True),
        sa.Column('follow_up_actions', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['application_id'], ['applications.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_interviews_application_id'), 'interviews', ['application_id'], unique=False)
    op.create_index('idx_interviews_status_date', 'interviews', ['status', 'interview_date'], unique=False)

    op.create_table('resources',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('url', sa.Text(), nullable=True),
        sa.Column('category', resource_category, nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('is_reviewed', sa.Boolean(), nullable=False),
        sa.Column('linked_application_id', sa.String(length=36), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['linked_application_id'], ['applications.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_resources_user_id'), 'resources', ['user_id'], unique=False)
    op.create_index(op.f('ix_resources_linked_application_id'), 'resources', ['linked_application_id'], unique=False)
    op.create_index('idx_resources_user_created', 'resources', ['user_id', 'created_at'], unique=False)

    op.create_table('questions',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('question_text', sa.Text(), nullable=False),
        sa.Column('answer_text', sa.Text(), nullable=True),
        sa.Column('question_type', question_type, nullable=False),
        sa.Column('is_favorite', sa.Boolean(), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_questions_user_id'), 'questions', ['user_id'], unique=False)
    op.create_index('idx_questions_user_created', 'questions', ['user_id', 'created_at'], unique=False)


def downgrade() -> None:
    op.drop_table('questions')
    op.drop_table('resources')
    op.drop_table('interviews')
    op.drop_table('applications')
    op.drop_table('users')

    bind = op.get_bind()
    for enum_type in (question_type, resource_category, interview_status, interview_type, application_status):
        enum_type.drop(bind, checkfirst=True)
