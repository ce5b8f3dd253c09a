from sqlalchemy.sql import func

from ..core.extensions import db
from ..utils.time_utils import isoformat


class Reward(db.Model):
    """User-defined reward unlocked after completing ``target_tasks`` tasks."""

    __tablename__ = 'rewards'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False, index=True
    )
    target_tasks = db.Column(db.Integer, nullable=False)
    reward = db.Column(db.String(255), nullable=False)
    current_progress = db.Column(db.Integer, default=0, nullable=False)
    is_completed = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'target_tasks': self.target_tasks,
            'reward': self.reward,
            'current_progress': self.current_progress,
            'is_completed': self.is_completed,
            'created_at': isoformat(self.created_at),
        }
