"""
Settings Service - per-user singleton rows keyed by user id.

Reads fall back to defaults without writing; saves upsert.
"""
from flask import current_app
from sqlalchemy.exc import IntegrityError

from ....core.extensions import db
from ....models import AppPreferences, PomodoroSettings
from ...auth.schemas import Actor


class SettingsService:

    @staticmethod
    def _get(model, actor: Actor) -> dict:
        row = db.session.get(model, actor.user_id)
        if row is None:
            return dict(model.DEFAULTS, user_id=actor.user_id)
        return row.to_dict()

    @staticmethod
    def _upsert(model, actor: Actor, changes: dict) -> dict:
        """Merge ``changes`` into the stored row, creating it from defaults if needed."""
        for attempt in range(2):
            row = db.session.get(model, actor.user_id)
            if row is None:
                row = model(user_id=actor.user_id, **model.DEFAULTS)
                db.session.add(row)
            for key, value in changes.items():
                setattr(row, key, value)
            try:
                db.session.commit()
            except IntegrityError:
                # Another request created the row first; retry once as an update.
                db.session.rollback()
                if attempt:
                    raise
                current_app.logger.debug(f"[Settings] Concurrent insert of {model.__tablename__} for {actor.user_id}")
                continue
            return row.to_dict()

    @staticmethod
    def get_pomodoro_settings(actor: Actor) -> dict:
        return SettingsService._get(PomodoroSettings, actor)

    @staticmethod
    def save_pomodoro_settings(actor: Actor, changes: dict) -> dict:
        return SettingsService._upsert(PomodoroSettings, actor, changes)

    @staticmethod
    def get_app_preferences(actor: Actor) -> dict:
        return SettingsService._get(AppPreferences, actor)

    @staticmethod
    def save_app_preferences(actor: Actor, changes: dict) -> dict:
        return SettingsService._upsert(AppPreferences, actor, changes)
