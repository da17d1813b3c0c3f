"""
Wall Snap Module
=================
Locates the closest point on any room boundary to a canvas position and
computes flush placements for columns against that wall.

Snap points are kept away from room corners: the projection parameter
along each wall is clamped to DEFAULT_T_RANGE.
"""

import math
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple
from dataclasses import dataclass
from enum import Enum

from .floor_plan_analyzer import RoomRect


DEFAULT_SNAP_DISTANCE = 14.0       # canvas px
DEFAULT_T_RANGE = (0.05, 0.95)     # fraction of wall length


class WallAxis(Enum):
    """Direction a wall runs on the canvas."""
    HORIZONTAL = "h"   # top / bottom side of a room
    VERTICAL = "v"     # left / right side of a room


class WallSegment(NamedTuple):
    """One side of a room rectangle."""
    x1: float
    y1: float
    x2: float
    y2: float
    axis: WallAxis

    @property
    def length(self) -> float:
        return math.hypot(self.x2 - self.x1, self.y2 - self.y1)


@dataclass(frozen=True)
class WallHit:
    """A snap point on a wall; carries no reference to its room."""
    canvas_x: float
    canvas_y: float
    wall_axis: WallAxis
    distance: float = 0.0


def room_segments(room: RoomRect) -> List[WallSegment]:
    """Top, bottom, left and right walls of a room, in that order."""
    return [
        WallSegment(room.x, room.y, room.right, room.y, WallAxis.HORIZONTAL),
        WallSegment(room.x, room.bottom, room.right, room.bottom, WallAxis.HORIZONTAL),
        WallSegment(room.x, room.y, room.x, room.bottom, WallAxis.VERTICAL),
        WallSegment(room.right, room.y, room.right, room.bottom, WallAxis.VERTICAL),
    ]


def closest_point_on_segment(
    seg: WallSegment,
    px: float,
    py: float,
    t_range: Tuple[float, float] = DEFAULT_T_RANGE
) -> Optional[Tuple[float, float]]:
    """
    Closest point on seg to (px, py) with the parameter clamped to t_range.

    Returns None for zero-length segments.
    """
    dx = seg.x2 - seg.x1
    dy = seg.y2 - seg.y1
    len_sq = dx * dx + dy * dy
    if len_sq == 0:
        return None

    t_min, t_max = t_range
    t = ((px - seg.x1) * dx + (py - seg.y1) * dy) / len_sq
    t = max(t_min, min(t_max, t))
    return seg.x1 + t * dx, seg.y1 + t * dy


def find_nearest_wall(
    rooms: Iterable[RoomRect],
    x: float,
    y: float,
    max_distance: float = DEFAULT_SNAP_DISTANCE,
    t_range: Tuple[float, float] = DEFAULT_T_RANGE
) -> Optional[WallHit]:
    """
    Nearest snap point on any room wall within max_distance.

    A candidate must be strictly closer than max_distance and than the
    current best, so on exact ties the first room / wall scanned wins.
    Pass math.inf to always get the nearest wall.

    Returns:
        WallHit, or None when no wall is in range
    """
    best = None
    best_dist = max_distance

    for room in rooms:
        for seg in room_segments(room):
            point = closest_point_on_segment(seg, x, y, t_range)
            if point is None:
                continue
            sx, sy = point
            dist = math.hypot(x - sx, y - sy)
            if dist < best_dist:
                best_dist = dist
                best = WallHit(sx, sy, seg.axis, dist)

    return best


def column_edge_center(
    cursor: Sequence[float],
    wall: WallHit,
    depth_px: float
) -> Tuple[float, float]:
    """
    Center of a column sitting flush against a wall on the cursor's side.

    Args:
        cursor: (x, y) canvas position of the pointer
        wall: Snap result from find_nearest_wall
        depth_px: Column extent perpendicular to the wall

    Returns:
        (x, y) canvas center, offset depth_px / 2 off the wall line
    """
    cx, cy = cursor
    half = depth_px / 2

    if wall.wall_axis is WallAxis.HORIZONTAL:
        offset = half if cy >= wall.canvas_y else -half
        return wall.canvas_x, wall.canvas_y + offset

    offset = half if cx >= wall.canvas_x else -half
    return wall.canvas_x + offset, wall.canvas_y
