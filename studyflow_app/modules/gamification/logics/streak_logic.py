"""
Streak Logic - Pure functions for streak calculation.

This module contains ONLY pure Python logic.
NO database, NO Flask, NO model dependencies allowed.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class StreakUpdate:
    """Result of one streak touch."""

    streak: int
    last_active_date: Optional[datetime]
    reset_today_focus: bool
    changed: bool


def days_since(last_active: datetime, now: datetime) -> int:
    """
    Whole days elapsed between two instants: ``floor((now - last_active) / 1 day)``.

    Examples:
        >>> from datetime import datetime
        >>> days_since(datetime(2024, 1, 1, 20), datetime(2024, 1, 2, 21))
        1
        >>> days_since(datetime(2024, 1, 1, 20), datetime(2024, 1, 2, 8))
        0
    """
    return (now - last_active) // ONE_DAY


def touch_streak(current_streak: int, last_active: Optional[datetime], now: datetime) -> StreakUpdate:
    """
    Apply one activity "touch" to a streak.

    - no previous activity: streak becomes 1
    - one day later: streak + 1
    - more than one day later: streak restarts at 1
    - same day: nothing changes (``last_active`` is kept as well)

    ``today_focus_minutes`` must be reset only when the day rolled over.
    """
    if last_active is None:
        return StreakUpdate(streak=1, last_active_date=now, reset_today_focus=True, changed=True)

    delta = days_since(last_active, now)

    # Same day, or a clock that went backwards.
    if delta <= 0:
        return StreakUpdate(
            streak=current_streak or 0,
            last_active_date=last_active,
            reset_today_focus=False,
            changed=False,
        )

    streak = (current_streak or 0) + 1 if delta == 1 else 1
    return StreakUpdate(streak=streak, last_active_date=now, reset_today_focus=True, changed=True)
