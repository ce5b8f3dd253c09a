"""Read and increment the cumulative study stats kept on the user row."""

from ....core.error_handlers import UnauthenticatedError
from ....core.extensions import db
from ....models import User
from ....utils.time_utils import isoformat
from ...auth.schemas import Actor


class StatsService:

    @staticmethod
    def get_stats(actor: Actor) -> dict:
        user = db.session.get(User, actor.user_id)
        if user is None:
            raise UnauthenticatedError()
        return {
            'daily_streak': user.daily_streak or 0,
            'total_focus_minutes': user.total_focus_minutes or 0,
            'today_focus_minutes': user.today_focus_minutes or 0,
            'total_tasks_completed': user.total_tasks_completed or 0,
            'last_active_date': isoformat(user.last_active_date),
            'badges': list(user.badges or []),
        }

    @staticmethod
    def add_focus_minutes(actor: Actor, minutes: int) -> dict:
        """Add ``minutes`` to both focus counters in one UPDATE statement."""
        User.query.filter_by(user_id=actor.user_id).update(
            {
                User.total_focus_minutes: User.total_focus_minutes + minutes,
                User.today_focus_minutes: User.today_focus_minutes + minutes,
            },
            synchronize_session=False,
        )
        db.session.commit()
        return StatsService.get_stats(actor)
