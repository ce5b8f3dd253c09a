from datetime import datetime, timezone

from ..core.extensions import db
from ..utils.time_utils import isoformat


class Notification(db.Model):
    """Stores user notifications."""
    __tablename__ = 'notifications'

    TYPE_SHARE = 'share'
    TYPE_REMINDER = 'reminder'
    TYPE_TASK_DUE = 'task_due'
    TYPE_EVENT = 'event'
    TYPE_ACHIEVEMENT = 'achievement'
    TYPE_SYSTEM = 'system'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False, index=True
    )

    type = db.Column(db.String(50), default=TYPE_SYSTEM, nullable=False)
    title = db.Column(db.String(255), nullable=False)
    message = db.Column(db.Text, nullable=False)

    # Origin resource, e.g. ('note', 12)
    reference_id = db.Column(db.Integer, nullable=True)
    reference_type = db.Column(db.String(50), nullable=True)

    is_read = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    def to_dict(self):
        return {
            'id': self.id,
            'type': self.type,
            'title': self.title,
            'message': self.message,
            'reference_id': self.reference_id,
            'reference_type': self.reference_type,
            'is_read': self.is_read,
            'created_at': isoformat(self.created_at),
        }
