from typing import Dict, List, Optional

from tripplanner.gamification import Achievement, GamificationStats, Level
from tripplanner.models.base import PlannerModel
from tripplanner.services.ui_state import Toast


class LevelRead(PlannerModel):
    level: int
    title: str
    min_points: int
    max_points: Optional[int] = None
    icon: str

    @classmethod
    def from_level(cls, level: Level) -> "LevelRead":
        return cls(
            level=level.level,
            title=level.title,
            min_points=level.min_points,
            max_points=level.max_points,
            icon=level.icon,
        )


class AchievementRead(PlannerModel):
    id: str
    title: str
    description: str
    icon: str
    category: str
    rarity: str
    points: int
    condition_type: str
    threshold: int
    unlocked: bool = False

    @classmethod
    def from_achievement(cls, achievement: Achievement, unlocked: bool = False) -> "AchievementRead":
        return cls(
            id=achievement.id,
            title=achievement.title,
            description=achievement.description,
            icon=achievement.icon,
            category=achievement.category.value,
            rarity=achievement.rarity.value,
            points=achievement.points,
            condition_type=achievement.condition.type.value,
            threshold=achievement.condition.threshold,
            unlocked=unlocked,
        )


class GamificationSummary(PlannerModel):
    stats: GamificationStats
    level: LevelRead
    level_progress: Dict[str, int]
    unlocked: int
    total: int
    percentage: int


class AchievementList(PlannerModel):
    achievements: List[AchievementRead]


class Notifications(PlannerModel):
    """Toasts and unlocked achievements not yet shown to the user"""
    toasts: List[Toast]
    achievements: List[AchievementRead]
