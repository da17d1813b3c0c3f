"""
Openings Module
================
Doors, windows and columns attached to room walls.

Openings are positioned by wall snap and keep only their canvas position
and wall axis; the room they sit on is recovered by proximity, not by id.
"""

import uuid
from typing import Iterable, List, Optional
from dataclasses import dataclass, field, replace
from enum import Enum
import logging

from .floor_plan_analyzer import RoomRect
from .wall_snap import (
    DEFAULT_SNAP_DISTANCE,
    WallAxis,
    column_edge_center,
    find_nearest_wall,
)

logger = logging.getLogger(__name__)


class OpeningKind(Enum):
    DOOR = "door"
    WINDOW = "window"
    COLUMN = "column"


@dataclass
class Opening:
    """An opening on a wall; sizes along the wall in canvas px, heights in metres."""
    kind: OpeningKind
    canvas_x: float
    canvas_y: float
    wall_axis: WallAxis
    width_px: float
    height: float
    sill_height: float = 0.0
    depth_px: Optional[float] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self):
        return {
            'id': self.id,
            'kind': self.kind.value,
            'canvasX': self.canvas_x,
            'canvasY': self.canvas_y,
            'wallAxis': self.wall_axis.value,
            'widthPx': self.width_px,
            'depthPx': self.depth_px,
            'height': self.height,
            'sillHeight': self.sill_height,
        }


# Defaults for newly placed openings (20 px = 1 m)
OPENING_DEFAULTS = {
    OpeningKind.DOOR: {'width_px': 20.0, 'height': 2.0, 'sill_height': 0.0},
    OpeningKind.WINDOW: {'width_px': 28.0, 'height': 1.1, 'sill_height': 0.9},
    OpeningKind.COLUMN: {'width_px': 8.0, 'depth_px': 8.0, 'height': 2.4, 'sill_height': 0.0},
}


def place_opening(
    kind: OpeningKind,
    rooms: Iterable[RoomRect],
    x: float,
    y: float,
    snap_distance: float = DEFAULT_SNAP_DISTANCE,
    **overrides
) -> Optional[Opening]:
    """
    Create an opening snapped to the wall nearest (x, y).

    Doors and windows are centered on the wall line. Columns are pushed
    half their depth off the wall, toward the side the cursor is on.

    Args:
        kind: Type of opening
        rooms: Rooms whose walls can receive the opening
        x, y: Cursor position on the canvas
        snap_distance: Maximum cursor distance to a wall
        **overrides: Replacements for OPENING_DEFAULTS fields

    Returns:
        New Opening, or None when no wall is within snap_distance
    """
    wall = find_nearest_wall(rooms, x, y, max_distance=snap_distance)
    if wall is None:
        return None

    params = dict(OPENING_DEFAULTS[kind])
    params.update(overrides)

    cx, cy = wall.canvas_x, wall.canvas_y
    if kind is OpeningKind.COLUMN:
        depth = params.get('depth_px') or params['width_px']
        cx, cy = column_edge_center((x, y), wall, depth)

    opening = Opening(kind=kind, canvas_x=cx, canvas_y=cy, wall_axis=wall.wall_axis, **params)
    logger.debug(f"Placed {kind.value} at ({cx:.1f}, {cy:.1f}) on {wall.wall_axis.value} wall")
    return opening


def move_opening(
    opening: Opening,
    rooms: Iterable[RoomRect],
    x: float,
    y: float,
    snap_distance: float = DEFAULT_SNAP_DISTANCE
) -> Opening:
    """
    Re-snap an existing opening while it is dragged to (x, y).

    Returns a moved copy, or the opening unchanged when no wall is in range.
    """
    wall = find_nearest_wall(rooms, x, y, max_distance=snap_distance)
    if wall is None:
        return opening

    cx, cy = wall.canvas_x, wall.canvas_y
    if opening.kind is OpeningKind.COLUMN:
        cx, cy = column_edge_center((x, y), wall, opening.depth_px or opening.width_px)

    return replace(opening, canvas_x=cx, canvas_y=cy, wall_axis=wall.wall_axis)


def opening_at(
    openings: List[Opening],
    x: float,
    y: float,
    tolerance: float = 8.0
) -> Optional[Opening]:
    """First opening whose wall-line footprint contains (x, y)."""
    for op in openings:
        half = op.width_px / 2
        if op.wall_axis is WallAxis.HORIZONTAL:
            if abs(op.canvas_y - y) < tolerance and op.canvas_x - half <= x <= op.canvas_x + half:
                return op
        elif abs(op.canvas_x - x) < tolerance and op.canvas_y - half <= y <= op.canvas_y + half:
            return op
    return None
