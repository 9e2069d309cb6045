"""create_hubspot_credential_table

Revision ID: 4f2a9c1d7e8b
Revises: 
Create Date: 2026-10-19 10:12:31.402117

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4f2a9c1d7e8b'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('hubspot_credential',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),

        # HubSpot account identity
        sa.Column('hub_id', sa.String(64), nullable=False),
        sa.Column('user_id', sa.String(64), nullable=True),
        sa.Column('app_id', sa.String(64), nullable=True),
        sa.Column('user', sa.String(255), nullable=True),

        # OAuth tokens
        sa.Column('access_token', sa.String(512), nullable=False),
        sa.Column('refresh_token', sa.String(512), nullable=False),
        sa.Column('expire_time', sa.DateTime(timezone=True), nullable=False),

        # Audit fields
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),

        sa.PrimaryKeyConstraint('id')
    )

    op.create_index('ix_hubspot_credential_hub_id', 'hubspot_credential', ['hub_id'], unique=True)


def downgrade():
    op.drop_index('ix_hubspot_credential_hub_id', table_name='hubspot_credential')
    op.drop_table('hubspot_credential')
