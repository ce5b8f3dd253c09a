"""Subjects, exams and tasks: resources owned by exactly one user."""

from sqlalchemy.sql import func
from sqlalchemy.types import JSON

from ..core.extensions import db
from ..utils.time_utils import isoformat


class Subject(db.Model):
    __tablename__ = 'subjects'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False, index=True
    )
    name = db.Column(db.String(200), nullable=False)
    color = db.Column(db.String(20), nullable=False)
    total_topics = db.Column(db.Integer, default=0, nullable=False)
    covered_topics = db.Column(db.Integer, default=0, nullable=False)
    google_drive_url = db.Column(db.String(500), nullable=True)
    study_hours = db.Column(db.Integer, default=0, nullable=False)
    weak_areas = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'name': self.name,
            'color': self.color,
            'total_topics': self.total_topics,
            'covered_topics': self.covered_topics,
            'google_drive_url': self.google_drive_url,
            'study_hours': self.study_hours,
            'weak_areas': self.weak_areas,
            'created_at': isoformat(self.created_at),
        }


class Exam(db.Model):
    __tablename__ = 'exams'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False, index=True
    )
    subject_id = db.Column(db.Integer, db.ForeignKey('subjects.id', ondelete='SET NULL'), nullable=True)
    name = db.Column(db.String(200), nullable=False)
    date = db.Column(db.DateTime(timezone=True), nullable=False)
    confidence = db.Column(db.Integer, default=50, nullable=False)
    weight = db.Column(db.Integer, default=100, nullable=False)
    google_drive_url = db.Column(db.String(500), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'subject_id': self.subject_id,
            'name': self.name,
            'date': isoformat(self.date),
            'confidence': self.confidence,
            'weight': self.weight,
            'google_drive_url': self.google_drive_url,
            'created_at': isoformat(self.created_at),
        }


class Task(db.Model):
    __tablename__ = 'tasks'

    PRIORITIES = ('critical', 'high', 'medium', 'low')
    STATUS_PENDING = 'pending'
    STATUS_IN_PROGRESS = 'in_progress'
    STATUS_COMPLETED = 'completed'
    STATUSES = (STATUS_PENDING, STATUS_IN_PROGRESS, STATUS_COMPLETED)

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False, index=True
    )
    subject_id = db.Column(db.Integer, db.ForeignKey('subjects.id', ondelete='SET NULL'), nullable=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    priority = db.Column(db.String(20), default='medium', nullable=False)
    status = db.Column(db.String(20), default=STATUS_PENDING, nullable=False)
    due_date = db.Column(db.DateTime(timezone=True), nullable=True)
    estimated_minutes = db.Column(db.Integer, nullable=True)
    tags = db.Column(JSON, default=list)
    order = db.Column(db.Integer, default=0, nullable=False)
    completed_at = db.Column(db.DateTime(timezone=True), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'subject_id': self.subject_id,
            'title': self.title,
            'description': self.description,
            'priority': self.priority,
            'status': self.status,
            'due_date': isoformat(self.due_date),
            'estimated_minutes': self.estimated_minutes,
            'tags': list(self.tags or []),
            'order': self.order,
            'completed_at': isoformat(self.completed_at),
            'created_at': isoformat(self.created_at),
        }


class Reminder(db.Model):
    __tablename__ = 'reminders'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False, index=True
    )
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    reminder_time = db.Column(db.DateTime(timezone=True), nullable=False)
    # Reminders attached to an event or task go away with it.
    event_id = db.Column(db.Integer, db.ForeignKey('calendar_events.id', ondelete='CASCADE'), nullable=True)
    task_id = db.Column(db.Integer, db.ForeignKey('tasks.id', ondelete='CASCADE'), nullable=True)
    is_read = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'title': self.title,
            'description': self.description,
            'reminder_time': isoformat(self.reminder_time),
            'event_id': self.event_id,
            'task_id': self.task_id,
            'is_read': self.is_read,
            'created_at': isoformat(self.created_at),
        }
