# db/models.py
from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Enum, Index, UniqueConstraint
from sqlalchemy.sql import func
from moodjournal.core.database import Base
from moodjournal.models.mood import Mood


def _mood_values(enum_cls):
    return [m.value for m in enum_cls]


# Mood journal entries: one row per user per calendar day
class MoodEntry(Base):
    __tablename__ = 'mood_entries'

    id         = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id    = Column(String(255), nullable=False)
    date       = Column(Date, nullable=False)
    mood       = Column(Enum(Mood, name='mood_type', values_callable=_mood_values), nullable=False)
    note       = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Indexes
    __table_args__ = (
        UniqueConstraint('user_id', 'date', name='uq_mood_entries_user_date'),
        Index('idx_mood_entries_user_id', 'user_id'),
        Index('idx_mood_entries_date', 'date'),
    )

    def __repr__(self):
        return f"<MoodEntry id={self.id} user_id={self.user_id!r} date={self.date} mood={self.mood}>"
