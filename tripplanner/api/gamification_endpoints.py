"""
Gamification API endpoints
"""
from fastapi import APIRouter, Depends

from tripplanner.core.dependencies import get_planner
from tripplanner.schemas.base import Envelope
from tripplanner.schemas.gamification import (
    AchievementList,
    AchievementRead,
    GamificationSummary,
    LevelRead,
    Notifications,
)
from tripplanner.services.planner import Planner

router = APIRouter(prefix="/gamification", tags=["gamification"])


def _summary(planner: Planner) -> GamificationSummary:
    engine = planner.gamification
    progress = engine.get_progress()
    return GamificationSummary(
        stats=engine.stats,
        level=LevelRead.from_level(engine.level),
        level_progress=engine.get_level_progress(),
        unlocked=progress.unlocked,
        total=progress.total,
        percentage=progress.percentage,
    )


@router.get("", response_model=Envelope[GamificationSummary])
def get_gamification(planner: Planner = Depends(get_planner)):
    return Envelope.ok(_summary(planner))


@router.get("/achievements", response_model=Envelope[AchievementList])
def list_achievements(planner: Planner = Depends(get_planner)):
    engine = planner.gamification
    achievements = [
        AchievementRead.from_achievement(a, engine.is_achievement_unlocked(a.id))
        for a in engine.catalog
    ]
    return Envelope.ok(AchievementList(achievements=achievements))


@router.post("/reset", response_model=Envelope[GamificationSummary])
def reset_gamification(planner: Planner = Depends(get_planner)):
    """
    Reset points, streaks, counters and unlocked achievements
    """
    planner.gamification.reset_stats()
    return Envelope.ok(_summary(planner))


@router.post("/notifications/pop", response_model=Envelope[Notifications])
def pop_notifications(planner: Planner = Depends(get_planner)):
    """
    Return queued toasts and newly unlocked achievements, then clear both queues
    """
    toasts, achievements = planner.pop_notifications()
    return Envelope.ok(Notifications(
        toasts=toasts,
        achievements=[AchievementRead.from_achievement(a, True) for a in achievements],
    ))
