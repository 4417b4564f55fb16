"""
Static achievement catalog.

Each entry is a rule: a condition (metric + threshold) and a point reward.
The engine evaluates the table generically, see ``rules.py``.
"""
import enum
from dataclasses import dataclass
from typing import Dict, List, Optional


class AchievementCategory(str, enum.Enum):
    TRIPS = "trips"
    BUDGET = "budget"
    PLANNING = "planning"
    EXPLORATION = "exploration"


class AchievementRarity(str, enum.Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


class ConditionType(str, enum.Enum):
    TRIPS_CREATED = "trips_created"
    TRIPS_COMPLETED = "trips_completed"
    COUNTRIES_VISITED = "countries_visited"
    DAYS_ADVANCE = "days_advance"
    PACKING_LISTS_COMPLETE = "packing_lists_complete"
    ITEMS_PACKED = "items_packed"
    STREAK_DAYS = "streak_days"
    ACTIVITIES_PLANNED = "activities_planned"
    EXPENSES_TRACKED = "expenses_tracked"
    ACCOMMODATIONS_BOOKED = "accommodations_booked"
    TRIPS_UNDER_BUDGET = "trips_under_budget"


@dataclass(frozen=True)
class AchievementCondition:
    type: ConditionType
    threshold: int


@dataclass(frozen=True)
class Achievement:
    id: str
    title: str
    description: str
    icon: str
    category: AchievementCategory
    rarity: AchievementRarity
    points: int
    condition: AchievementCondition


def _achievement(id, title, description, icon, category, rarity, points, condition, threshold):
    return Achievement(
        id=id,
        title=title,
        description=description,
        icon=icon,
        category=AchievementCategory(category),
        rarity=AchievementRarity(rarity),
        points=points,
        condition=AchievementCondition(ConditionType(condition), threshold),
    )


ACHIEVEMENTS: List[Achievement] = [
    # trips
    _achievement("first_trip", "First Steps", "Create your first trip", "Plane",
                 "trips", "common", 100, "trips_created", 1),
    _achievement("explorer", "Explorer", "Create 5 trips", "Map",
                 "trips", "common", 200, "trips_created", 5),
    _achievement("globetrotter", "Globetrotter", "Create 20 trips", "Globe",
                 "trips", "rare", 750, "trips_created", 20),
    _achievement("world_traveler", "World Traveler", "Visit 10 different countries", "Earth",
                 "exploration", "epic", 1000, "countries_visited", 10),
    # budget
    _achievement("budget_tracker", "Budget Tracker", "Track 20 expenses", "Receipt",
                 "budget", "common", 200, "expenses_tracked", 20),
    _achievement("money_manager", "Money Manager", "Track 50 expenses", "PiggyBank",
                 "budget", "uncommon", 400, "expenses_tracked", 50),
    _achievement("budget_master", "Budget Master", "Finish 3 trips under budget", "TrendingDown",
                 "budget", "rare", 500, "trips_under_budget", 3),
    # planning
    _achievement("early_planner", "Early Planner", "Plan a trip 30+ days in advance", "CalendarCheck",
                 "planning", "uncommon", 250, "days_advance", 30),
    _achievement("packing_pro", "Packing Pro", "Complete 5 packing lists", "CheckSquare",
                 "planning", "uncommon", 300, "packing_lists_complete", 5),
    _achievement("activity_king", "Activity King", "Plan 50 activities", "ListTodo",
                 "planning", "uncommon", 300, "activities_planned", 50),
    _achievement("detail_oriented", "Detail Oriented", "Plan 100 activities", "ClipboardList",
                 "planning", "rare", 600, "activities_planned", 100),
    # streaks and lodging
    _achievement("streak_starter", "Streak Starter", "Reach a 3-day streak", "Flame",
                 "exploration", "common", 150, "streak_days", 3),
    _achievement("dedicated_planner", "Dedicated Planner", "Reach a 7-day streak", "Zap",
                 "exploration", "uncommon", 400, "streak_days", 7),
    _achievement("first_accommodation", "First Stay", "Book your first accommodation", "Home",
                 "planning", "common", 100, "accommodations_booked", 1),
    _achievement("hotel_hopper", "Hotel Hopper", "Book 10 accommodations", "Building2",
                 "planning", "uncommon", 350, "accommodations_booked", 10),
]

_BY_ID: Dict[str, Achievement] = {a.id: a for a in ACHIEVEMENTS}


def get_achievement_by_id(achievement_id: str) -> Optional[Achievement]:
    return _BY_ID.get(achievement_id)


def get_achievements_by_category(category: AchievementCategory) -> List[Achievement]:
    return [a for a in ACHIEVEMENTS if a.category == category]


def get_achievements_by_rarity(rarity: AchievementRarity) -> List[Achievement]:
    return [a for a in ACHIEVEMENTS if a.rarity == rarity]
