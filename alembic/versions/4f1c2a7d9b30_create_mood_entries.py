"""create mood_entries"""

# revision identifiers, used by Alembic.
revision = '4f1c2a7d9b30'
down_revision = None
branch_labels = None
depends_on = None

from alembic import op
import sqlalchemy as sa

MOOD_VALUES = ('😊', '😢', '😡', '🤩', '😐')


def upgrade() -> None:
    op.create_table(
        'mood_entries',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('mood', sa.Enum(*MOOD_VALUES, name='mood_type'), nullable=False),
        sa.Column('note', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        # One entry per user per day; the upsert conflicts on this constraint
        sa.UniqueConstraint('user_id', 'date', name='uq_mood_entries_user_date'),
    )
    op.create_index('ix_mood_entries_id', 'mood_entries', ['id'])
    op.create_index('idx_mood_entries_user_id', 'mood_entries', ['user_id'])
    op.create_index('idx_mood_entries_date', 'mood_entries', ['date'])


def downgrade() -> None:
    op.drop_index('idx_mood_entries_date', table_name='mood_entries')
    op.drop_index('idx_mood_entries_user_id', table_name='mood_entries')
    op.drop_index('ix_mood_entries_id', table_name='mood_entries')
    op.drop_table('mood_entries')
    # PostgreSQL keeps the enum type around after the table is gone
    sa.Enum(name='mood_type').drop(op.get_bind(), checkfirst=True)
