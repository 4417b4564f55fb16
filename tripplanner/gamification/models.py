import datetime as dt
from typing import List, Optional

from pydantic import Field

from tripplanner.models.base import PlannerModel


class UnlockedAchievement(PlannerModel):
    achievement_id: str
    unlocked_at: dt.datetime


class GamificationStats(PlannerModel):
    """Entire engine state; persisted as one document"""
    total_points: int = Field(0, ge=0)
    current_level: int = 1
    current_streak: int = Field(0, ge=0)
    longest_streak: int = Field(0, ge=0)
    last_activity_date: Optional[dt.date] = None
    unlocked_achievements: List[UnlockedAchievement] = Field(default_factory=list)
    pending_achievements: List[str] = Field(default_factory=list)
    trips_completed: int = Field(0, ge=0)
    items_packed: int = Field(0, ge=0)
    budget_entries: int = Field(0, ge=0)
    itinerary_items: int = Field(0, ge=0)


class AchievementProgress(PlannerModel):
    unlocked: int
    total: int
    percentage: int
