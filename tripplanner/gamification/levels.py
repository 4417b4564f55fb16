"""
Level tiers. Each tier covers the half-open point range [min_points, max_points);
the last tier is open ended.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Level:
    level: int
    title: str
    min_points: int
    max_points: Optional[int]
    icon: str

    def contains(self, points: int) -> bool:
        return points >= self.min_points and (self.max_points is None or points < self.max_points)


LEVELS: List[Level] = [
    Level(1, "Beginner", 0, 500, "Sprout"),
    Level(2, "Explorer", 500, 1500, "Compass"),
    Level(3, "Adventurer", 1500, 4000, "Mountain"),
    Level(4, "Globetrotter", 4000, 10000, "Globe"),
    Level(5, "Travel Master", 10000, None, "Crown"),
]


def get_level_by_points(points: int, levels: List[Level] = LEVELS) -> Level:
    for level in levels:
        if level.contains(points):
            return level
    return levels[0]


def get_level_by_number(number: int, levels: List[Level] = LEVELS) -> Optional[Level]:
    for level in levels:
        if level.level == number:
            return level
    return None


def get_next_level(number: int, levels: List[Level] = LEVELS) -> Optional[Level]:
    return get_level_by_number(number + 1, levels)


def get_progress_to_next_level(points: int, levels: List[Level] = LEVELS) -> Dict[str, int]:
    """Points earned inside the current tier against the width of the tier"""
    current = get_level_by_points(points, levels)
    following = get_next_level(current.level, levels)
    if following is None:
        return {"current": points - current.min_points, "required": 0, "percentage": 100}
    earned = points - current.min_points
    required = following.min_points - current.min_points
    return {
        "current": earned,
        "required": required,
        "percentage": min(100, round(earned / required * 100)),
    }
