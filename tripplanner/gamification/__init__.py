"""
Gamification: points, levels, streaks and the achievement catalog.
"""

from .achievements import (
    ACHIEVEMENTS,
    Achievement,
    AchievementCategory,
    AchievementCondition,
    AchievementRarity,
    ConditionType,
    get_achievement_by_id,
    get_achievements_by_category,
    get_achievements_by_rarity,
)
from .levels import (
    LEVELS,
    Level,
    get_level_by_number,
    get_level_by_points,
    get_next_level,
    get_progress_to_next_level,
)
from .models import AchievementProgress, GamificationStats, UnlockedAchievement
from .engine import COUNTERS, GamificationEngine

__all__ = [
    "ACHIEVEMENTS",
    "Achievement",
    "AchievementCategory",
    "AchievementCondition",
    "AchievementRarity",
    "ConditionType",
    "get_achievement_by_id",
    "get_achievements_by_category",
    "get_achievements_by_rarity",
    "LEVELS",
    "Level",
    "get_level_by_number",
    "get_level_by_points",
    "get_next_level",
    "get_progress_to_next_level",
    "AchievementProgress",
    "GamificationStats",
    "UnlockedAchievement",
    "COUNTERS",
    "GamificationEngine",
]
