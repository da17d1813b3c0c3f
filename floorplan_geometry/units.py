"""Canvas pixel / world metre conversions and point-to-point measurement."""

import math
from typing import Sequence, Tuple
from dataclasses import dataclass

from .floor_plan_analyzer import RoomRect

PX_TO_M = 0.05          # 1 canvas px = 0.05 m
PX_PER_M = 1 / PX_TO_M  # 20 px = 1 m
WORLD_OFFSET = 7.0      # world = canvas * PX_TO_M - WORLD_OFFSET


def px_to_m(px: float) -> float:
    return px * PX_TO_M


def m_to_px(m: float) -> float:
    return m / PX_TO_M


def canvas_to_world(x: float, y: float) -> Tuple[float, float]:
    """Canvas (x, y) to world (x, z); canvas y runs along world z."""
    return x * PX_TO_M - WORLD_OFFSET, y * PX_TO_M - WORLD_OFFSET


def world_to_canvas(wx: float, wz: float) -> Tuple[float, float]:
    return (wx + WORLD_OFFSET) / PX_TO_M, (wz + WORLD_OFFSET) / PX_TO_M


def room_to_world_box(room: RoomRect) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """
    World footprint of a room.

    Returns:
        ((center_x, center_z), (width_m, depth_m))
    """
    cx, cy = room.center
    return canvas_to_world(cx, cy), (px_to_m(room.width), px_to_m(room.height))


@dataclass(frozen=True)
class Measurement:
    """Distances between two measured points, in metres."""
    horizontal: float   # along the floor
    vertical: float     # absolute height difference
    total: float        # straight 3D line


def measure(
    p1: Sequence[float],
    p2: Sequence[float],
    h1: float = 0.0,
    h2: float = 0.0
) -> Measurement:
    """
    Distances between two floor points (x, z) raised to heights h1 and h2.
    """
    dx = p2[0] - p1[0]
    dz = p2[1] - p1[1]
    dh = h2 - h1
    return Measurement(
        horizontal=math.hypot(dx, dz),
        vertical=abs(dh),
        total=math.sqrt(dx * dx + dh * dh + dz * dz),
    )
