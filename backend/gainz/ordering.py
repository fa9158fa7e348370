# gainz/ordering.py
"""
Sibling ``order`` maintenance for workouts and sets.

Every entity handled here has an integer ``order`` (0-based, scoped to its
parent) and an integer ``id`` that grows with insertion. Sorting is always by
``(order, id)`` so duplicate orders still come back in a stable sequence.
"""
from __future__ import annotations
from typing import Iterable, Protocol, Sequence, TypeVar

from gainz.errors import InvalidMoveError


class Ordered(Protocol):
    id: int
    order: int


T = TypeVar("T", bound=Ordered)


def sort_key(entity: Ordered) -> tuple[int, int]:
    return (entity.order, entity.id)


def sorted_by_order(items: Iterable[T]) -> list[T]:
    return sorted(items, key=sort_key)


def move(items: Sequence[T], source: int, destination: int) -> list[T]:
    """
    Return a new list with the element at ``source`` removed and reinserted so it
    ends up at index ``destination``.

    Both indices address the list as it is *before* the move.
    """
    size = len(items)
    if not (0 <= source < size and 0 <= destination < size):
        raise InvalidMoveError(source, destination, size)
    out = list(items)
    moved = out.pop(source)
    out.insert(destination, moved)
    return out


def renumber(items: Iterable[Ordered]) -> int:
    """Set ``order = position``. Returns how many entities actually changed."""
    changed = 0
    for position, entity in enumerate(items):
        if entity.order != position:
            entity.order = position
            changed += 1
    return changed


def close_gap(siblings: Iterable[Ordered], removed_order: int) -> int:
    """Shift everything after a removed position down by one."""
    shifted = 0
    for entity in siblings:
        if entity.order > removed_order:
            entity.order -= 1
            shifted += 1
    return shifted
