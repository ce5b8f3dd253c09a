"""
Badge Service
Awards catalogue badges (stored on ``User.badges``) when thresholds are met.
"""
from typing import List

from flask import current_app

from ....core.extensions import db
from ....core.signals import badge_earned
from ....models import User
from ..logics.badge_logic import badge_name, new_badges


class BadgeService:
    """Check a user's stats and append newly earned badge ids."""

    @staticmethod
    def award_for_user(user: User) -> List[str]:
        """
        Append newly earned badges to ``user`` (already loaded, ideally locked).
        Does not commit.
        """
        earned = new_badges(user.badges, user.daily_streak, user.total_tasks_completed)
        if earned:
            # Reassign so the JSON column is flagged dirty.
            user.badges = list(user.badges or []) + earned
        return earned

    @staticmethod
    def emit(user_id: int, badge_ids: List[str]) -> None:
        for badge_id in badge_ids:
            badge_earned.send(
                current_app._get_current_object(),
                user_id=user_id,
                badge_id=badge_id,
                badge_name=badge_name(badge_id),
            )

    @staticmethod
    def check_and_award(user_id: int) -> List[str]:
        """Lock the user row, award what is due and commit. Best-effort caller side."""
        user = db.session.query(User).filter_by(user_id=user_id).with_for_update().first()
        if user is None:
            return []
        earned = BadgeService.award_for_user(user)
        db.session.commit()
        if earned:
            current_app.logger.info(f"[Badges] User {user_id} earned {earned}")
            BadgeService.emit(user_id, earned)
        return earned
