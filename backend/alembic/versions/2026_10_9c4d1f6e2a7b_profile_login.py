"""profile phone login

Revision ID: 9c4d1f6e2a7b
Revises: 5b2e7c41a9d3
Create Date: 2026-10-18 16:40:02.113905

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '9c4d1f6e2a7b'
down_revision: Union[str, None] = '5b2e7c41a9d3'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column('user_profiles', sa.Column('phone_number', sa.String(30), nullable=True))
    op.add_column('user_profiles', sa.Column('pin_hash', sa.String(), nullable=True))
    op.create_index('ix_user_profiles_phone_number', 'user_profiles', ['phone_number'], unique=True)


def downgrade() -> None:
    op.drop_index('ix_user_profiles_phone_number', table_name='user_profiles')
    op.drop_column('user_profiles', 'pin_hash')
    op.drop_column('user_profiles', 'phone_number')
