"""Create family, meal planning and meal event tables

Revision ID: 3b7e9d2c41a8
Revises:
Create Date: 2026-01-24 14:48:29.250395

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7e9d2c41a8'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'family',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('country', sa.String(length=2), nullable=False),
        sa.Column('language', sa.String(length=2), nullable=False),
        sa.Column('created_at', sa.String(length=32), nullable=False),
        sa.Column('updated_at', sa.String(length=32), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'meal_planning',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('family_id', sa.String(length=36), nullable=False),
        sa.Column('start_date', sa.String(length=10), nullable=False),
        sa.Column('end_date', sa.String(length=10), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='draft'),
        sa.Column('created_at', sa.String(length=32), nullable=False),
        sa.Column('updated_at', sa.String(length=32), nullable=False),
        sa.ForeignKeyConstraint(['family_id'], ['family.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('meal_planning', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_meal_planning_family_id'), ['family_id'], unique=False)

    op.create_table(
        'meal_event',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('family_id', sa.String(length=36), nullable=False),
        sa.Column('planning_id', sa.String(length=36), nullable=True),
        sa.Column('date', sa.String(length=10), nullable=False),
        sa.Column('meal_type', sa.String(length=20), nullable=False),
        sa.Column('recipe_name', sa.String(length=200), nullable=True),
        sa.Column('participants', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.String(length=32), nullable=False),
        sa.Column('updated_at', sa.String(length=32), nullable=False),
        sa.ForeignKeyConstraint(['family_id'], ['family.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['planning_id'], ['meal_planning.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('meal_event', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_meal_event_family_id'), ['family_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_meal_event_planning_id'), ['planning_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_meal_event_date'), ['date'], unique=False)


def downgrade():
    with op.batch_alter_table('meal_event', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_meal_event_date'))
        batch_op.drop_index(batch_op.f('ix_meal_event_planning_id'))
        batch_op.drop_index(batch_op.f('ix_meal_event_family_id'))
    op.drop_table('meal_event')

    with op.batch_alter_table('meal_planning', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_meal_planning_family_id'))
    op.drop_table('meal_planning')
    op.drop_table('family')
