"""Calendar events and their (role-less) shares."""

from datetime import datetime, timezone

from ..core.extensions import db
from ..utils.time_utils import isoformat


class CalendarEvent(db.Model):
    __tablename__ = 'calendar_events'

    TYPES = ('event', 'task', 'reminder')

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False, index=True
    )
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    type = db.Column(db.String(20), default='event', nullable=False)
    start_time = db.Column(db.DateTime(timezone=True), nullable=False)
    end_time = db.Column(db.DateTime(timezone=True), nullable=True)
    all_day = db.Column(db.Boolean, default=False, nullable=False)
    color = db.Column(db.String(20), default='#8B5CF6')
    subject_id = db.Column(db.Integer, db.ForeignKey('subjects.id', ondelete='SET NULL'), nullable=True)
    recurrence = db.Column(db.String(255), nullable=True)
    reminder_minutes = db.Column(db.Integer, nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    shares = db.relationship(
        'EventShare', backref='event', lazy=True, cascade='all, delete-orphan'
    )

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'title': self.title,
            'description': self.description,
            'type': self.type,
            'start_time': isoformat(self.start_time),
            'end_time': isoformat(self.end_time),
            'all_day': self.all_day,
            'color': self.color,
            'subject_id': self.subject_id,
            'recurrence': self.recurrence,
            'reminder_minutes': self.reminder_minutes,
            'created_at': isoformat(self.created_at),
            'updated_at': isoformat(self.updated_at),
        }


class EventShare(db.Model):
    __tablename__ = 'event_shares'

    id = db.Column(db.Integer, primary_key=True)
    event_id = db.Column(
        db.Integer, db.ForeignKey('calendar_events.id', ondelete='CASCADE'), nullable=False, index=True
    )
    shared_with_email = db.Column(db.String(255), nullable=False)
    shared_with_user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=True, index=True
    )
    status = db.Column(db.String(20), default='pending', nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    def to_dict(self):
        return {
            'id': self.id,
            'event_id': self.event_id,
            'shared_with_email': self.shared_with_email,
            'shared_with_user_id': self.shared_with_user_id,
            'status': self.status,
            'created_at': isoformat(self.created_at),
        }
