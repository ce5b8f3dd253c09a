from datetime import datetime, timezone

from sqlalchemy.types import JSON

from ..core.extensions import db
from ..utils.time_utils import isoformat


class Quiz(db.Model):
    """
    A self-made quiz. ``questions`` is a list of
    ``{question, options, correct_answer, type}`` where ``correct_answer`` is
    an index into ``options``. ``score`` is the percentage of the last attempt.
    """

    __tablename__ = 'quizzes'

    TYPE_MCQ = 'mcq'
    TYPE_TRUE_FALSE = 'true_false'
    TYPES = (TYPE_MCQ, TYPE_TRUE_FALSE)

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False, index=True
    )
    subject_id = db.Column(db.Integer, db.ForeignKey('subjects.id', ondelete='SET NULL'), nullable=True)
    title = db.Column(db.String(255), nullable=False)
    questions = db.Column(JSON, nullable=False, default=list)
    score = db.Column(db.Integer, nullable=True)
    completed_at = db.Column(db.DateTime(timezone=True), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'subject_id': self.subject_id,
            'title': self.title,
            'questions': list(self.questions or []),
            'score': self.score,
            'completed_at': isoformat(self.completed_at),
            'created_at': isoformat(self.created_at),
        }
