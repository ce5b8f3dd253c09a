"""
Badge Logic - Badge catalogue and award rules.

Pure functions only. Badges are stored on the user as a list of ids.
"""
from typing import Dict, Iterable, List

BADGE_PERFECT_WEEK = 'perfect_week'
BADGE_STREAK_14 = 'streak_14'
BADGE_STREAK_30 = 'streak_30'
BADGE_CENTURION = 'centurion'

BADGES: Dict[str, Dict] = {
    BADGE_PERFECT_WEEK: {'name': 'Perfect Week', 'description': '7-day streak', 'icon': 'Calendar',
                         'streak': 7},
    BADGE_STREAK_14: {'name': 'Two Week Warrior', 'description': '14-day streak', 'icon': 'Flame',
                      'streak': 14},
    BADGE_STREAK_30: {'name': 'Monthly Master', 'description': '30-day streak', 'icon': 'Crown',
                      'streak': 30},
    BADGE_CENTURION: {'name': 'Centurion', 'description': 'Complete 100 tasks', 'icon': 'Trophy',
                      'tasks': 100},
}


def badges_earned(streak: int, total_tasks: int) -> List[str]:
    """All badge ids whose threshold is met by the given stats, in catalogue order."""
    earned = []
    for badge_id, badge in BADGES.items():
        if 'streak' in badge and (streak or 0) >= badge['streak']:
            earned.append(badge_id)
        elif 'tasks' in badge and (total_tasks or 0) >= badge['tasks']:
            earned.append(badge_id)
    return earned


def new_badges(existing: Iterable[str], streak: int, total_tasks: int) -> List[str]:
    """Badges earned now that the user does not hold yet."""
    held = set(existing or [])
    return [badge_id for badge_id in badges_earned(streak, total_tasks) if badge_id not in held]


def badge_name(badge_id: str) -> str:
    return BADGES.get(badge_id, {}).get('name', badge_id)
