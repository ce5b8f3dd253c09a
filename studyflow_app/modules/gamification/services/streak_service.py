# File: studyflow_app/modules/gamification/services/streak_service.py
"""
Streak Service
==============
Manages the user's daily streak (consecutive days of activity).
"""

from flask import current_app

from ....core.error_handlers import UnauthenticatedError
from ....core.extensions import db
from ....models import User
from ....utils.time_utils import ensure_utc, utcnow
from ...auth.schemas import Actor
from ..logics.streak_logic import touch_streak
from .badge_service import BadgeService


class StreakService:
    """Service for managing user activity streaks."""

    @staticmethod
    def touch(actor: Actor, now=None) -> dict:
        """
        Record activity for today.

        The user row is locked for the read-modify-write so two touches on the
        same day never both increment.

        Returns:
            dict with 'streak' and 'updated'
        """
        now = ensure_utc(now) if now is not None else utcnow()

        user = db.session.query(User).filter_by(user_id=actor.user_id).with_for_update().first()
        if user is None:
            raise UnauthenticatedError()

        result = touch_streak(user.daily_streak, ensure_utc(user.last_active_date), now)
        if not result.changed:
            db.session.rollback()
            return {'streak': result.streak, 'updated': False}

        user.daily_streak = result.streak
        user.last_active_date = result.last_active_date
        if result.reset_today_focus:
            user.today_focus_minutes = 0
        earned = BadgeService.award_for_user(user)
        db.session.commit()

        current_app.logger.debug(f"[Streak] User {actor.user_id} streak is now {result.streak}")
        if earned:
            try:
                BadgeService.emit(actor.user_id, earned)
            except Exception as e:
                current_app.logger.error(f"[Streak] Error emitting badge signals: {e}")

        return {'streak': result.streak, 'updated': True}
