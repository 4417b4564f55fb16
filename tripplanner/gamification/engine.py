"""
Gamification Engine - points, levels, streaks and achievement unlocking
"""
import logging
import threading
from typing import Dict, List, Mapping, Optional, Union

from tripplanner.core.clock import Clock, utc_now
from tripplanner.core.storage import StorageBackend
from tripplanner.gamification import rules
from tripplanner.gamification.achievements import ACHIEVEMENTS, Achievement, ConditionType
from tripplanner.gamification.levels import LEVELS, Level, get_level_by_points, get_progress_to_next_level
from tripplanner.gamification.models import AchievementProgress, GamificationStats, UnlockedAchievement

logger = logging.getLogger(__name__)

COUNTERS = ("trips_completed", "items_packed", "budget_entries", "itinerary_items")


class GamificationEngine:
    """
    Monotone accumulator over ``GamificationStats``.

    ``total_points`` only grows until ``reset_stats``; ``current_streak`` is
    the single field that can drop (back to 1 after a missed day). Every
    mutation is written to storage under ``storage_key``.
    """

    storage_key = "gamification"

    def __init__(
        self,
        storage: StorageBackend,
        clock: Clock = utc_now,
        catalog: Optional[List[Achievement]] = None,
        levels: Optional[List[Level]] = None,
    ):
        self._storage = storage
        self._clock = clock
        self._catalog = list(catalog if catalog is not None else ACHIEVEMENTS)
        self._catalog_by_id: Dict[str, Achievement] = {a.id: a for a in self._catalog}
        self._levels = list(levels if levels is not None else LEVELS)
        self._lock = threading.RLock()
        raw = storage.load(self.storage_key)
        self._stats = GamificationStats.model_validate(raw) if raw else GamificationStats()

    @property
    def stats(self) -> GamificationStats:
        return self._stats.model_copy(deep=True)

    @property
    def catalog(self) -> List[Achievement]:
        return list(self._catalog)

    @property
    def level(self) -> Level:
        return get_level_by_points(self._stats.total_points, self._levels)

    def _persist(self) -> None:
        self._storage.save(self.storage_key, self._stats.to_json_dict())

    # ------------------------------------------------------------------ #
    # points & level
    # ------------------------------------------------------------------ #

    def _award(self, amount: int) -> None:
        stats = self._stats
        before = stats.current_level
        stats.total_points += max(0, amount)
        stats.current_level = get_level_by_points(stats.total_points, self._levels).level
        if stats.current_level != before:
            logger.info("Level changed", extra={"level": stats.current_level, "points": stats.total_points})

    def add_points(self, amount: int, source: Optional[str] = None) -> int:
        """
        Add points and recompute the level

        Args:
            amount: points to add; negative values are treated as 0
            source: free-form label for logging

        Returns:
            The new point total
        """
        with self._lock:
            if amount < 0:
                logger.warning("Ignoring negative point amount", extra={"amount": amount, "source": source})
            self._award(amount)
            logger.debug("Points added", extra={"amount": amount, "source": source})
            self._persist()
            return self._stats.total_points

    def get_level_progress(self) -> Dict[str, int]:
        return get_progress_to_next_level(self._stats.total_points, self._levels)

    # ------------------------------------------------------------------ #
    # streaks
    # ------------------------------------------------------------------ #

    def update_streak(self) -> int:
        """Record a qualifying activity today; returns the current streak"""
        with self._lock:
            stats = self._stats
            today = self._clock().date()
            last = stats.last_activity_date
            if last is not None and (today - last).days == 0:
                return stats.current_streak
            if last is not None and (today - last).days == 1:
                stats.current_streak += 1
            else:
                # first activity ever, a gap of more than one day, or a clock
                # that went backwards
                stats.current_streak = 1
            stats.longest_streak = max(stats.longest_streak, stats.current_streak)
            stats.last_activity_date = today
            self._persist()
            return stats.current_streak

    # ------------------------------------------------------------------ #
    # counters
    # ------------------------------------------------------------------ #

    def increment_stat(self, name: str, amount: int = 1) -> int:
        if name not in COUNTERS:
            raise ValueError(f"Unknown counter '{name}', expected one of {COUNTERS}")
        with self._lock:
            value = getattr(self._stats, name) + max(0, amount)
            setattr(self._stats, name, value)
            self._persist()
            return value

    # ------------------------------------------------------------------ #
    # achievements
    # ------------------------------------------------------------------ #

    def get_achievement_by_id(self, achievement_id: str) -> Optional[Achievement]:
        return self._catalog_by_id.get(achievement_id)

    def is_achievement_unlocked(self, achievement_id: str) -> bool:
        return self.get_unlocked_achievement(achievement_id) is not None

    def get_unlocked_achievement(self, achievement_id: str) -> Optional[UnlockedAchievement]:
        for unlocked in self._stats.unlocked_achievements:
            if unlocked.achievement_id == achievement_id:
                return unlocked.model_copy()
        return None

    def _unlock(self, achievement: Achievement) -> None:
        self._stats.unlocked_achievements.append(
            UnlockedAchievement(achievement_id=achievement.id, unlocked_at=self._clock())
        )
        self._stats.pending_achievements.append(achievement.id)
        self._award(achievement.points)
        logger.info(
            "Achievement unlocked",
            extra={"achievement_id": achievement.id, "points": achievement.points},
        )

    def unlock_achievement(self, achievement_id: str) -> Optional[Achievement]:
        """
        Unlock one achievement and grant its points

        Returns:
            The achievement when it was newly unlocked, otherwise None
            (already unlocked or not in the catalog)
        """
        with self._lock:
            achievement = self._catalog_by_id.get(achievement_id)
            if achievement is None or self.is_achievement_unlocked(achievement_id):
                return None
            self._unlock(achievement)
            self._persist()
            return achievement

    def check_achievements(
        self, context: Optional[Mapping[Union[str, ConditionType], float]] = None
    ) -> List[Achievement]:
        """
        Evaluate every locked catalog entry

        Args:
            context: store-derived metrics keyed by condition type

        Returns:
            Achievements unlocked by this call, in catalog order
        """
        with self._lock:
            metrics = rules.collect_metrics(self._stats, context)
            unlocked = []
            for achievement in self._catalog:
                if self.is_achievement_unlocked(achievement.id):
                    continue
                if rules.is_met(achievement.condition, metrics):
                    self._unlock(achievement)
                    unlocked.append(achievement)
            if unlocked:
                self._persist()
            return unlocked

    def pop_pending_achievement(self) -> Optional[Achievement]:
        """Next unlocked achievement not yet shown to the user"""
        with self._lock:
            if not self._stats.pending_achievements:
                return None
            achievement_id = self._stats.pending_achievements.pop(0)
            self._persist()
            return self._catalog_by_id.get(achievement_id)

    def get_progress(self) -> AchievementProgress:
        total = len(self._catalog)
        unlocked = sum(1 for a in self._catalog if self.is_achievement_unlocked(a.id))
        percentage = round(unlocked / total * 100) if total else 0
        return AchievementProgress(unlocked=unlocked, total=total, percentage=percentage)

    def reset_stats(self) -> None:
        with self._lock:
            self._stats = GamificationStats()
            logger.info("Gamification stats reset")
            self._persist()
