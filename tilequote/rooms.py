"""
Room list helpers for callers that own the job document.

Rooms are plain RoomSpec values; these helpers never mutate the list they
are given and always return a fresh one.
"""

import re
from typing import List

from .schemas import RoomSpec

_AUTO_NAME = re.compile(r"^Room \d+$")


def new_room(rooms: List[RoomSpec]) -> RoomSpec:
    """A room with the standard defaults, named after its position in the list."""
    return RoomSpec(name=f"Room {len(rooms) + 1}")


def add_room(rooms: List[RoomSpec]) -> List[RoomSpec]:
    return [r.model_copy(deep=True) for r in rooms] + [new_room(rooms)]


def remove_room(rooms: List[RoomSpec], index: int) -> List[RoomSpec]:
    """
    Remove the room at `index`. Rooms still carrying an automatic name
    ("Room N") are renumbered to their new position; renamed rooms keep their name.
    Out-of-range indexes leave the list unchanged.
    """
    remaining = [r.model_copy(deep=True) for i, r in enumerate(rooms) if i != index]
    for position, room in enumerate(remaining, start=1):
        if _AUTO_NAME.match(room.name):
            room.name = f"Room {position}"
    return remaining
