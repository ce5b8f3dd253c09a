"""User identity and session models."""

from __future__ import annotations

from flask import current_app
from flask_login import UserMixin
from sqlalchemy.sql import func
from sqlalchemy.types import JSON
from werkzeug.security import check_password_hash, generate_password_hash

from ..core.extensions import db
from ..utils.time_utils import isoformat


class User(UserMixin, db.Model):
    """Application user with cumulative study stats."""

    __tablename__ = 'users'

    user_id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(256), nullable=False)
    is_premium = db.Column(db.Boolean, default=False, nullable=False)
    has_completed_setup = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())

    # Stats
    last_active_date = db.Column(db.DateTime(timezone=True), nullable=True)
    daily_streak = db.Column(db.Integer, default=0, nullable=False)
    total_focus_minutes = db.Column(db.Integer, default=0, nullable=False)
    today_focus_minutes = db.Column(db.Integer, default=0, nullable=False)
    total_tasks_completed = db.Column(db.Integer, default=0, nullable=False)
    badges = db.Column(JSON, default=list)

    sessions = db.relationship('AuthSession', backref='user', lazy=True, cascade='all, delete-orphan')
    subjects = db.relationship('Subject', backref='user', lazy=True, cascade='all, delete-orphan')
    exams = db.relationship('Exam', backref='user', lazy=True, cascade='all, delete-orphan')
    tasks = db.relationship('Task', backref='user', lazy=True, cascade='all, delete-orphan')
    notes = db.relationship('Note', backref='owner', lazy=True, cascade='all, delete-orphan')
    calendar_events = db.relationship('CalendarEvent', backref='owner', lazy=True, cascade='all, delete-orphan')
    flashcards = db.relationship('Flashcard', backref='user', lazy=True, cascade='all, delete-orphan')
    reminders = db.relationship('Reminder', backref='user', lazy=True, cascade='all, delete-orphan')
    sticky_notes = db.relationship('StickyNote', backref='user', lazy=True, cascade='all, delete-orphan')
    journal_entries = db.relationship('JournalEntry', backref='user', lazy=True, cascade='all, delete-orphan')
    quizzes = db.relationship('Quiz', backref='user', lazy=True, cascade='all, delete-orphan')
    rewards = db.relationship('Reward', backref='user', lazy=True, cascade='all, delete-orphan')
    notifications = db.relationship('Notification', backref='user', lazy=True, cascade='all, delete-orphan')
    ai_messages = db.relationship('AIMessage', backref='user', lazy=True, cascade='all, delete-orphan')
    pomodoro_settings = db.relationship(
        'PomodoroSettings', uselist=False, backref='user', cascade='all, delete-orphan'
    )
    app_preferences = db.relationship(
        'AppPreferences', uselist=False, backref='user', cascade='all, delete-orphan'
    )

    # Transient: set by the request loader to the session that authenticated this request.
    active_session_id = None

    def get_id(self):
        return str(self.user_id)

    def set_password(self, password: str) -> None:
        method = current_app.config.get('PASSWORD_HASH_METHOD', 'scrypt')
        self.password_hash = generate_password_hash(password, method=method)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    def to_dict(self) -> dict:
        return {
            'id': self.user_id,
            'name': self.name,
            'email': self.email,
            'is_premium': self.is_premium,
            'has_completed_setup': self.has_completed_setup,
            'created_at': isoformat(self.created_at),
            'last_active_date': isoformat(self.last_active_date),
            'daily_streak': self.daily_streak or 0,
            'total_focus_minutes': self.total_focus_minutes or 0,
            'today_focus_minutes': self.today_focus_minutes or 0,
            'total_tasks_completed': self.total_tasks_completed or 0,
            'badges': list(self.badges or []),
        }


class AuthSession(db.Model):
    """Opaque bearer token mapped to a user and an expiry."""

    __tablename__ = 'sessions'

    id = db.Column(db.String(128), primary_key=True)
    user_id = db.Column(
        db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False, index=True
    )
    expires_at = db.Column(db.DateTime(timezone=True), nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())
