from datetime import datetime, timezone

from ..core.extensions import db
from ..utils.time_utils import isoformat


class Flashcard(db.Model):
    """Leitner flashcard. ``box`` ranges 1..5; see modules/flashcard/logics/leitner.py."""

    __tablename__ = 'flashcards'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False, index=True
    )
    subject_id = db.Column(db.Integer, db.ForeignKey('subjects.id', ondelete='SET NULL'), nullable=True)
    front = db.Column(db.Text, nullable=False)
    back = db.Column(db.Text, nullable=False)
    box = db.Column(db.Integer, default=1, nullable=False)
    next_review_date = db.Column(
        db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=False
    )
    last_review_date = db.Column(db.DateTime(timezone=True), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'subject_id': self.subject_id,
            'front': self.front,
            'back': self.back,
            'box': self.box,
            'next_review_date': isoformat(self.next_review_date),
            'last_review_date': isoformat(self.last_review_date),
            'created_at': isoformat(self.created_at),
        }
