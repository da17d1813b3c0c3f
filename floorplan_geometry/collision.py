"""
Furniture Collision Module
===========================
Binary overlap test between yaw-rotated furniture boxes:
1. Vertical gate on [elevation, elevation + height)
2. Plan-view footprint projection (x, z plane)
3. Separating Axis Theorem on the two footprints

Boxes that only touch (shared face, zero gap) do not collide.
"""

import math
import numpy as np
from typing import Hashable, Iterable, Iterator, List, Set, Tuple
from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)


# Local (x, z) corners of a unit footprint, scaled by half extents
_UNIT_CORNERS = np.array([
    [-1.0, -1.0],
    [ 1.0, -1.0],
    [ 1.0,  1.0],
    [-1.0,  1.0],
])


@dataclass
class Furniture:
    """A furniture box in world space (metres)."""
    id: Hashable
    position: Tuple[float, float, float]
    size: Tuple[float, float, float]   # width (x), height (y), depth (z)
    rotation: float = 0.0              # yaw around +y, radians
    elevation: float = 0.0             # bottom face above floor
    name: str = ""
    color: str = ""

    @property
    def bottom(self) -> float:
        return self.elevation

    @property
    def top(self) -> float:
        return self.elevation + self.size[1]

    def resting_position(self) -> Tuple[float, float, float]:
        """Position with y derived from elevation so the box sits on it."""
        x, _, z = self.position
        return (x, self.elevation + self.size[1] / 2, z)


def footprint(item: Furniture) -> np.ndarray:
    """
    World (x, z) corners of the rotated footprint, shape (4, 2).
    """
    w, _, d = item.size
    px, _, pz = item.position
    c = math.cos(item.rotation)
    s = math.sin(item.rotation)
    rot = np.array([[c, -s], [s, c]])

    local = _UNIT_CORNERS * (w / 2, d / 2)
    return local @ rot.T + (px, pz)


def project(points: np.ndarray, axis: np.ndarray) -> Tuple[float, float]:
    """Scalar range of points projected onto axis (not normalized)."""
    dots = points @ axis
    return float(dots.min()), float(dots.max())


def sat_2d(a: np.ndarray, b: np.ndarray) -> bool:
    """
    Separating Axis Theorem for two convex polygons.

    Every edge normal of both polygons is a candidate axis. Ranges that
    merely touch (max == min) count as separated.
    """
    for poly in (a, b):
        edges = np.roll(poly, -1, axis=0) - poly
        normals = np.column_stack((-edges[:, 1], edges[:, 0]))
        for axis in normals:
            min_a, max_a = project(a, axis)
            min_b, max_b = project(b, axis)
            if max_a <= min_b or max_b <= min_a:
                return False
    return True


def check_collision(a: Furniture, b: Furniture) -> bool:
    """
    Whether two furniture boxes interpenetrate.

    Vertical ranges must overlap strictly before the plan-view test runs.
    """
    if a.bottom >= b.top or b.bottom >= a.top:
        return False
    return sat_2d(footprint(a), footprint(b))


def colliding_pairs(items: List[Furniture]) -> Iterator[Tuple[Hashable, Hashable]]:
    """Yield (id_a, id_b) for every colliding pair, in scan order."""
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            if check_collision(items[i], items[j]):
                yield items[i].id, items[j].id


def get_colliding_ids(items: Iterable[Furniture]) -> Set[Hashable]:
    """
    Ids of every item involved in at least one collision.

    Brute-force all-pairs scan, O(n^2) in the number of items.
    """
    items = list(items)
    ids = set()
    for id_a, id_b in colliding_pairs(items):
        ids.add(id_a)
        ids.add(id_b)

    if ids:
        logger.debug(f"{len(ids)} of {len(items)} items colliding")
    return ids
