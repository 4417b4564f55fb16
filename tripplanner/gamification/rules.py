"""
Generic evaluation of catalog conditions against a metric table.

Metrics come from two places: counters the engine accumulates itself and a
context of store-derived values supplied by the caller (trips created,
countries visited, ...). Where both provide a value the larger one wins, so
a counter reset by an import never hides progress visible in the stores.
"""
from typing import Dict, Mapping, Optional, Union

from tripplanner.gamification.achievements import AchievementCondition, ConditionType
from tripplanner.gamification.models import GamificationStats

MetricTable = Dict[ConditionType, float]


def counter_metrics(stats: GamificationStats) -> MetricTable:
    return {
        ConditionType.EXPENSES_TRACKED: stats.budget_entries,
        ConditionType.ACTIVITIES_PLANNED: stats.itinerary_items,
        ConditionType.STREAK_DAYS: stats.current_streak,
        ConditionType.TRIPS_COMPLETED: stats.trips_completed,
        ConditionType.ITEMS_PACKED: stats.items_packed,
    }


def collect_metrics(
    stats: GamificationStats,
    context: Optional[Mapping[Union[str, ConditionType], float]] = None,
) -> MetricTable:
    metrics: MetricTable = {ConditionType(k): v for k, v in (context or {}).items()}
    for key, value in counter_metrics(stats).items():
        metrics[key] = max(value, metrics.get(key, 0))
    return metrics


def is_met(condition: AchievementCondition, metrics: MetricTable) -> bool:
    return metrics.get(condition.type, 0) >= condition.threshold
