"""
Helpers for embedded child lists that carry a 0-based contiguous ``order``
(destinations, packing categories and items, itinerary activities).

Every helper returns a fresh list sorted by position with ``order``
renumbered 0..n-1.
"""
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


def by_position(children: Iterable[T]) -> List[T]:
    return sorted(children, key=lambda c: c.order)


def renumber(children: Sequence[T]) -> List[T]:
    result = list(children)
    for index, child in enumerate(result):
        child.order = index
    return result


def append(children: Sequence[T], child: T) -> List[T]:
    return renumber(by_position(children) + [child])


def insert_at(children: Sequence[T], child: T, position: int) -> List[T]:
    ordered = by_position(children)
    position = max(0, min(position, len(ordered)))
    ordered.insert(position, child)
    return renumber(ordered)


def remove(children: Sequence[T], child_id: str) -> Tuple[List[T], Optional[T]]:
    removed = None
    kept = []
    for child in by_position(children):
        if child.id == child_id and removed is None:
            removed = child
        else:
            kept.append(child)
    return renumber(kept), removed


def reorder(children: Sequence[T], ordered_ids: Sequence[str]) -> List[T]:
    """
    Put the children named in ``ordered_ids`` first, in that order.

    Unknown ids are ignored and children that are not named keep their
    relative order after the named ones.
    """
    by_id = {child.id: child for child in children}
    picked = [by_id[i] for i in dict.fromkeys(ordered_ids) if i in by_id]
    picked_ids = {child.id for child in picked}
    rest = [child for child in by_position(children) if child.id not in picked_ids]
    return renumber(picked + rest)
