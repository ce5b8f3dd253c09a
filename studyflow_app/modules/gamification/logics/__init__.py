from .badge_logic import BADGES, badge_name, badges_earned, new_badges
from .streak_logic import StreakUpdate, days_since, touch_streak
