"""
Statistics aggregator.

``compute_statistics`` is a pure projection over a ``PlannerSnapshot``: it
never touches the stores, and identical snapshots yield identical reports
regardless of record order (sums use ``math.fsum`` and name sets are sorted).
"""
import math
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel

from tripplanner.models import (
    Accommodation,
    DayPlan,
    Expense,
    PackingList,
    Task,
    Transport,
    Trip,
    TripDocument,
    TripStatus,
)


@dataclass(frozen=True)
class PlannerSnapshot:
    """Immutable copies of every collection at one point in time"""
    trips: Tuple[Trip, ...] = ()
    day_plans: Tuple[DayPlan, ...] = ()
    accommodations: Tuple[Accommodation, ...] = ()
    expenses: Tuple[Expense, ...] = ()
    packing_lists: Tuple[PackingList, ...] = ()
    transports: Tuple[Transport, ...] = ()
    tasks: Tuple[Task, ...] = ()
    documents: Tuple[TripDocument, ...] = ()

    def for_trip(self, trip_id: str) -> "PlannerSnapshot":
        def keep(records):
            return tuple(r for r in records if r.trip_id == trip_id)

        return PlannerSnapshot(
            trips=tuple(t for t in self.trips if t.id == trip_id),
            day_plans=keep(self.day_plans),
            accommodations=keep(self.accommodations),
            expenses=keep(self.expenses),
            packing_lists=keep(self.packing_lists),
            transports=keep(self.transports),
            tasks=keep(self.tasks),
            documents=keep(self.documents),
        )


class TripStatistics(BaseModel):
    total_trips: int
    completed_trips: int
    upcoming_trips: int
    ongoing_trips: int
    planning_trips: int
    total_days: int
    unique_countries: List[str]
    unique_destinations: List[str]


class BudgetStatistics(BaseModel):
    total_spent: float
    total_budget: float
    budget_utilization: float
    average_per_trip: float
    average_per_day: float
    by_category: Dict[str, float]
    average_by_category: Dict[str, float]
    by_currency: Dict[str, float]


class ActivityStatistics(BaseModel):
    total_activities: int
    completed_activities: int
    by_category: Dict[str, int]


class AccommodationStatistics(BaseModel):
    total_accommodations: int
    total_nights: int
    total_spent: float
    average_per_night: float
    by_type: Dict[str, int]


class TransportStatistics(BaseModel):
    total_transports: int
    total_spent: float
    by_mode: Dict[str, int]


class StatisticsReport(BaseModel):
    trip_id: Optional[str] = None
    trips: TripStatistics
    budget: BudgetStatistics
    activities: ActivityStatistics
    accommodations: AccommodationStatistics
    transports: TransportStatistics


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator > 0 else 0.0


def _count_by(keys: Iterable[str]) -> Dict[str, int]:
    counts: Dict[str, int] = defaultdict(int)
    for key in keys:
        counts[key] += 1
    return dict(sorted(counts.items()))


def _sum_by(pairs: Iterable[Tuple[str, float]]) -> Dict[str, float]:
    grouped: Dict[str, List[float]] = defaultdict(list)
    for key, value in pairs:
        grouped[key].append(value)
    return {key: math.fsum(values) for key, values in sorted(grouped.items())}


def _trip_statistics(trips: Tuple[Trip, ...]) -> TripStatistics:
    statuses = [t.status for t in trips]
    destinations = [d for t in trips for d in t.destinations]
    return TripStatistics(
        total_trips=len(trips),
        completed_trips=statuses.count(TripStatus.COMPLETED),
        upcoming_trips=statuses.count(TripStatus.UPCOMING),
        ongoing_trips=statuses.count(TripStatus.ONGOING),
        planning_trips=statuses.count(TripStatus.PLANNING),
        total_days=sum(t.duration_days for t in trips),
        unique_countries=sorted({d.country for d in destinations if d.country}),
        unique_destinations=sorted({d.name for d in destinations}),
    )


def _budget_statistics(
    trips: Tuple[Trip, ...], expenses: Tuple[Expense, ...], total_days: int
) -> BudgetStatistics:
    total_spent = math.fsum(e.amount for e in expenses)
    total_budget = math.fsum(t.total_budget for t in trips)
    by_category = _sum_by((e.category.value, e.amount) for e in expenses)
    counts = _count_by(e.category.value for e in expenses)
    return BudgetStatistics(
        total_spent=total_spent,
        total_budget=total_budget,
        budget_utilization=_ratio(total_spent, total_budget) * 100,
        average_per_trip=_ratio(total_spent, len(trips)),
        average_per_day=_ratio(total_spent, total_days),
        by_category=by_category,
        average_by_category={k: by_category[k] / counts[k] for k in by_category},
        by_currency=_sum_by((e.currency, e.amount) for e in expenses),
    )


def _activity_statistics(day_plans: Tuple[DayPlan, ...]) -> ActivityStatistics:
    activities = [a for plan in day_plans for a in plan.activities]
    return ActivityStatistics(
        total_activities=len(activities),
        completed_activities=sum(1 for a in activities if a.is_completed),
        by_category=_count_by(a.category.value for a in activities),
    )


def _accommodation_statistics(accommodations: Tuple[Accommodation, ...]) -> AccommodationStatistics:
    total_spent = math.fsum(a.price for a in accommodations)
    total_nights = sum(a.nights for a in accommodations)
    return AccommodationStatistics(
        total_accommodations=len(accommodations),
        total_nights=total_nights,
        total_spent=total_spent,
        average_per_night=_ratio(total_spent, total_nights),
        by_type=_count_by(a.type.value for a in accommodations),
    )


def _transport_statistics(transports: Tuple[Transport, ...]) -> TransportStatistics:
    return TransportStatistics(
        total_transports=len(transports),
        total_spent=math.fsum(t.price or 0 for t in transports),
        by_mode=_count_by(t.mode.value for t in transports),
    )


def compute_statistics(snapshot: PlannerSnapshot, trip_id: Optional[str] = None) -> StatisticsReport:
    """
    Summarize one trip or, with ``trip_id=None``, everything

    Args:
        snapshot: collections to read from
        trip_id: restrict every section to one trip

    Returns:
        StatisticsReport; an unknown trip id yields an all-zero report
    """
    scoped = snapshot.for_trip(trip_id) if trip_id is not None else snapshot
    trip_stats = _trip_statistics(scoped.trips)
    return StatisticsReport(
        trip_id=trip_id,
        trips=trip_stats,
        budget=_budget_statistics(scoped.trips, scoped.expenses, trip_stats.total_days),
        activities=_activity_statistics(scoped.day_plans),
        accommodations=_accommodation_statistics(scoped.accommodations),
        transports=_transport_statistics(scoped.transports),
    )
