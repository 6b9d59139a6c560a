"""create foods table

Revision ID: 3c9e1f7a2b44
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c9e1f7a2b44'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('foods'):
        op.create_table(
            'foods',
            sa.Column('id', sa.String(length=36), primary_key=True),
            sa.Column('name', sa.String(length=150), nullable=False),
            sa.Column('category', sa.String(length=30), nullable=True),
            sa.Column('allergens', sa.JSON(), nullable=True),
            sa.Column('is_safe', sa.Boolean(), nullable=False, server_default=sa.true()),
            sa.Column('is_try_bite', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('user_id', sa.String(length=64), nullable=False),
            sa.Column('household_id', sa.String(length=64), nullable=True),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_foods_user_id', 'foods', ['user_id'])
        op.create_index('ix_foods_household_id', 'foods', ['household_id'])


def downgrade():
    op.drop_index('ix_foods_household_id', table_name='foods')
    op.drop_index('ix_foods_user_id', table_name='foods')
    op.drop_table('foods')
