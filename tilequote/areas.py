"""
Area aggregation — floor and wall m² per room and across the job.

The per-room functions are the single source of truth: job totals and the
per-room cost calculations both call them, so they cannot drift apart.
"""

from typing import List

from .schemas import AreaTotals, RoomSpec, WallSegment


def wall_segment_area(wall: WallSegment) -> float:
    """length × height minus openings, never below zero."""
    return max(0.0, wall.length * wall.height - wall.deduct)


def room_floor_area(room: RoomSpec) -> float:
    return sum(area.length * area.width for area in room.floor_areas)


def room_wall_area(room: RoomSpec) -> float:
    if room.use_four_wall_calc:
        perimeter = 2.0 * (room.room_length + room.room_width)
        return max(0.0, perimeter * room.room_height - room.four_wall_deduct)
    return sum(wall_segment_area(w) for w in room.walls)


def compute_areas(rooms: List[RoomSpec]) -> AreaTotals:
    """Total floor and wall area across all rooms."""
    floor = 0.0
    wall = 0.0
    for room in rooms:
        floor += room_floor_area(room)
        wall += room_wall_area(room)
    return AreaTotals(floor_area=floor, wall_area=wall)
