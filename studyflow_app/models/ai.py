from datetime import datetime, timezone

from ..core.extensions import db
from ..utils.time_utils import isoformat


class AIMessage(db.Model):
    """One entry of a user's assistant conversation log."""

    __tablename__ = 'ai_messages'

    ROLE_USER = 'user'
    ROLE_ASSISTANT = 'assistant'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False, index=True
    )
    role = db.Column(db.String(20), nullable=False)
    content = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    def to_dict(self):
        return {
            'id': self.id,
            'role': self.role,
            'content': self.content,
            'created_at': isoformat(self.created_at),
        }
