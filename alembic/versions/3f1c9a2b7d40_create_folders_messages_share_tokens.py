"""create_folders_messages_share_tokens

Revision ID: 3f1c9a2b7d40
Revises: 
Create Date: 2026-10-16 10:12:44.204187

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c9a2b7d40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'folders',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('password_hash', sa.String(length=128), nullable=False),
        sa.Column('created_at', sa.Integer(), nullable=False),
        sa.Column('expires_at', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_table(
        'messages',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('folder_id', sa.String(length=36), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.Integer(), nullable=False),
        sa.Column('updated_at', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['folder_id'], ['folders.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_messages_folder_id'), 'messages', ['folder_id'], unique=False)
    # folder_id is not a foreign key: tokens are not removed when their folder is swept
    op.create_table(
        'share_tokens',
        sa.Column('token', sa.String(length=64), nullable=False),
        sa.Column('folder_id', sa.String(length=36), nullable=False),
        sa.Column('expires_at', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('token')
    )
    op.create_index(op.f('ix_share_tokens_folder_id'), 'share_tokens', ['folder_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_share_tokens_folder_id'), table_name='share_tokens')
    op.drop_table('share_tokens')
    op.drop_index(op.f('ix_messages_folder_id'), table_name='messages')
    op.drop_table('messages')
    op.drop_table('folders')
