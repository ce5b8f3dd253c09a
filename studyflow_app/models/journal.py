"""Personal desk items: sticky notes and mood journal entries. Never shared."""

from datetime import datetime, timezone

from ..core.extensions import db
from ..utils.time_utils import isoformat


class StickyNote(db.Model):
    __tablename__ = 'sticky_notes'

    DEFAULT_COLOR = '#8B5CF6'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False, index=True
    )
    content = db.Column(db.Text, nullable=False)
    color = db.Column(db.String(20), default=DEFAULT_COLOR, nullable=False)
    # Board position and size in pixels
    x = db.Column(db.Integer, default=0, nullable=False)
    y = db.Column(db.Integer, default=0, nullable=False)
    width = db.Column(db.Integer, default=200, nullable=False)
    height = db.Column(db.Integer, default=200, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'content': self.content,
            'color': self.color,
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'height': self.height,
            'created_at': isoformat(self.created_at),
        }


class JournalEntry(db.Model):
    __tablename__ = 'journal_entries'

    MOODS = ('great', 'good', 'okay', 'bad', 'terrible')

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False, index=True
    )
    date = db.Column(db.Date, nullable=False)
    mood = db.Column(db.String(20), nullable=False)
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'date': self.date.isoformat() if self.date else None,
            'mood': self.mood,
            'content': self.content,
            'created_at': isoformat(self.created_at),
        }
