"""Per-user singleton settings rows (primary key is the user id)."""

from ..core.extensions import db


class PomodoroSettings(db.Model):
    __tablename__ = 'pomodoro_settings'

    DEFAULTS = {
        'work_duration': 25,
        'short_break_duration': 5,
        'long_break_duration': 15,
        'sessions_until_long_break': 4,
        'auto_start_next': True,
        'sound_enabled': True,
        'notifications_enabled': True,
    }

    user_id = db.Column(db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), primary_key=True)
    work_duration = db.Column(db.Integer, default=25, nullable=False)
    short_break_duration = db.Column(db.Integer, default=5, nullable=False)
    long_break_duration = db.Column(db.Integer, default=15, nullable=False)
    sessions_until_long_break = db.Column(db.Integer, default=4, nullable=False)
    auto_start_next = db.Column(db.Boolean, default=True, nullable=False)
    sound_enabled = db.Column(db.Boolean, default=True, nullable=False)
    notifications_enabled = db.Column(db.Boolean, default=True, nullable=False)

    def to_dict(self):
        data = {key: getattr(self, key) for key in self.DEFAULTS}
        data['user_id'] = self.user_id
        return data


class AppPreferences(db.Model):
    __tablename__ = 'app_preferences'

    DEFAULTS = {
        'theme': 'light',
        'has_seen_tour': False,
        'health_reminders_enabled': True,
        'focus_music_volume': 50,
    }

    user_id = db.Column(db.Integer, db.ForeignKey('users.user_id', ondelete='CASCADE'), primary_key=True)
    theme = db.Column(db.String(10), default='light', nullable=False)
    has_seen_tour = db.Column(db.Boolean, default=False, nullable=False)
    health_reminders_enabled = db.Column(db.Boolean, default=True, nullable=False)
    focus_music_volume = db.Column(db.Integer, default=50, nullable=False)

    def to_dict(self):
        data = {key: getattr(self, key) for key in self.DEFAULTS}
        data['user_id'] = self.user_id
        return data
