"""
Room Detection Module
======================
Region-based room detection on a binarized floor plan:
1. Wall dilation to close door openings
2. Exterior flood fill from the image border
3. Connected component extraction with area filtering

Labelling uses OpenCV's non-recursive connected components (4-connected),
so grid size never affects stack depth.
"""

import cv2
import numpy as np
from typing import List, Tuple
from dataclasses import dataclass
from enum import IntEnum
import logging

logger = logging.getLogger(__name__)


class CellState(IntEnum):
    """Occupancy grid cell states."""
    WALL = 0
    OPEN = 1
    EXTERIOR = 2


@dataclass
class Component:
    """A 4-connected region of open cells, in grid coordinates."""
    min_x: int
    min_y: int
    max_x: int
    max_y: int
    area: int

    @property
    def bounding_box(self) -> Tuple[int, int, int, int]:
        """x, y, w, h measured between extreme pixel indices."""
        return (self.min_x, self.min_y, self.max_x - self.min_x, self.max_y - self.min_y)


def label_open_regions(grid: np.ndarray) -> Tuple[int, np.ndarray, np.ndarray]:
    """
    4-connected labelling of OPEN cells.

    Returns:
        (num_labels, labels, stats) from cv2.connectedComponentsWithStats;
        label 0 is every non-OPEN cell
    """
    mask = (grid == CellState.OPEN).astype(np.uint8)
    num_labels, labels, stats, _ = cv2.connectedComponentsWithStats(mask, connectivity=4)
    return num_labels, labels, stats


def dilate_walls(grid: np.ndarray, radius: int) -> np.ndarray:
    """
    Grow WALL cells by radius with a square structuring element.

    Cells outside the image never count as walls. Returns a new grid;
    non-wall cells keep their state unless a wall grows over them.
    """
    if radius <= 0:
        return grid.copy()

    walls = (grid == CellState.WALL).astype(np.uint8)
    kernel = np.ones((2 * radius + 1, 2 * radius + 1), np.uint8)
    grown = cv2.dilate(walls, kernel, iterations=1)

    dilated = grid.copy()
    dilated[grown > 0] = CellState.WALL
    return dilated


def flood_fill_exterior(grid: np.ndarray) -> np.ndarray:
    """
    Relabel every OPEN cell reachable from the border as EXTERIOR.

    Any open region touching the first or last row or column is outside
    the building.
    """
    _, labels, _ = label_open_regions(grid)

    border = np.concatenate([labels[0, :], labels[-1, :], labels[:, 0], labels[:, -1]])
    outside = np.unique(border)
    outside = outside[outside > 0]

    labeled = grid.copy()
    labeled[np.isin(labels, outside)] = CellState.EXTERIOR
    logger.debug(f"Exterior cells: {int(np.count_nonzero(labeled == CellState.EXTERIOR))}")
    return labeled


def find_components(grid: np.ndarray, min_area: float = 0) -> List[Component]:
    """
    Find 4-connected regions of OPEN cells.

    Components are returned in row-major order of their first cell.
    Regions with fewer than min_area cells are dropped.
    """
    num_labels, labels, stats = label_open_regions(grid)
    if num_labels <= 1:
        return []

    # first raster index of each label fixes the output order
    ids, first = np.unique(labels.ravel(), return_index=True)
    order = [int(i) for i in ids[np.argsort(first)] if i > 0]

    components = []
    discarded = 0
    for i in order:
        left = int(stats[i, cv2.CC_STAT_LEFT])
        top = int(stats[i, cv2.CC_STAT_TOP])
        area = int(stats[i, cv2.CC_STAT_AREA])
        if area < min_area:
            discarded += 1
            continue

        components.append(Component(
            min_x=left,
            min_y=top,
            max_x=left + int(stats[i, cv2.CC_STAT_WIDTH]) - 1,
            max_y=top + int(stats[i, cv2.CC_STAT_HEIGHT]) - 1,
            area=area
        ))

    logger.debug(f"Found {len(components)} components, discarded {discarded} below {min_area:.0f} px")
    return components


def detect_room_components(
    grid: np.ndarray,
    dilate_radius: int = 6,
    min_area_ratio: float = 0.008
) -> List[Component]:
    """
    Dilate, remove exterior and extract room-sized components.

    Args:
        grid: OPEN / WALL occupancy grid
        dilate_radius: Wall growth in cells
        min_area_ratio: Minimum component area as a fraction of all cells

    Returns:
        Candidate room components in grid coordinates
    """
    dilated = dilate_walls(grid, dilate_radius)
    labeled = flood_fill_exterior(dilated)
    return find_components(labeled, min_area=grid.size * min_area_ratio)
