from .badge_service import BadgeService
from .reward_service import RewardService
from .stats_service import StatsService
from .streak_service import StreakService
