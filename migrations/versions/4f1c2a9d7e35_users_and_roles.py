"""Users and roles

Revision ID: 4f1c2a9d7e35
Revises: 
Create Date: 2026-10-19 10:12:41.508133

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4f1c2a9d7e35'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('roles',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('when_created', sa.DateTime(), nullable=True),
        sa.Column('when_changed', sa.DateTime(), nullable=True),
        sa.Column('name', sa.String(length=32), nullable=False),
        sa.Column('description', sa.String(length=256), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name')
    )
    op.create_index(op.f('ix_roles_when_created'), 'roles', ['when_created'], unique=False)
    op.create_table('users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(length=80), nullable=False),
        sa.Column('username', sa.String(length=32), nullable=True),
        sa.Column('password', sa.String(length=255), nullable=True),
        sa.Column('active', sa.Boolean(), nullable=False),
        sa.Column('fs_uniquifier', sa.String(length=64), nullable=False),
        sa.Column('when_created', sa.DateTime(), nullable=True),
        sa.Column('when_changed', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
        sa.UniqueConstraint('fs_uniquifier'),
        sa.UniqueConstraint('username')
    )
    op.create_table('roles_users',
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('role_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['role_id'], ['roles.id'], ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], )
    )


def downgrade():
    op.drop_table('roles_users')
    op.drop_table('users')
    op.drop_index(op.f('ix_roles_when_created'), table_name='roles')
    op.drop_table('roles')
