"""
Floor Plan Analyzer
====================
Detects rectangular rooms in a raster floor plan and maps them onto the
editor canvas.

The image is downscaled, binarized, its walls are thickened to seal door
gaps, everything connected to the border is discarded as outside the
building, and each remaining open region becomes one axis-aligned room.
"""

import uuid
import numpy as np
from typing import Any, Dict, List, Optional, Tuple
from dataclasses import dataclass, field
import logging

from .preprocessing import FloorPlanPreprocessor
from .room_detection import detect_room_components

logger = logging.getLogger(__name__)


# Display palette, assigned to detected rooms in order
ROOM_COLORS = [
    '#4a90d9', '#7ed321', '#f5a623', '#d0021b',
    '#9013fe', '#50e3c2', '#b8e986', '#f8e71c',
]


@dataclass
class AnalyzerConfig:
    """Tunables for raster room detection."""
    max_size: int = 400           # longest working side, pixels
    wall_threshold: float = 200   # luma >= threshold is open floor
    dilate_radius: int = 6        # wall growth, pixels (closes door gaps)
    min_area_ratio: float = 0.008  # of all working pixels
    polarity_ratio: float = 0.3   # below this open fraction the grid is inverted


@dataclass
class RoomRect:
    """An axis-aligned room on the editor canvas (pixel units)."""
    x: float
    y: float
    width: float
    height: float
    name: str = ""
    color: str = ROOM_COLORS[0]
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def area(self) -> float:
        return self.width * self.height

    def contains(self, px: float, py: float) -> bool:
        """Whether a canvas point lies inside or on the boundary."""
        return self.x <= px <= self.right and self.y <= py <= self.bottom

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'height': self.height,
            'color': self.color,
        }


class FloorPlanAnalyzer:
    """
    Raster floor plan analysis producing canvas room rectangles.
    """

    def __init__(self, config: Optional[AnalyzerConfig] = None):
        """
        Initialize the analyzer.

        Args:
            config: Detection tunables (defaults used when omitted)
        """
        self.config = config or AnalyzerConfig()
        self.preprocessor = FloorPlanPreprocessor(
            max_size=self.config.max_size,
            wall_threshold=self.config.wall_threshold,
            polarity_ratio=self.config.polarity_ratio
        )

    def analyze(
        self,
        image: np.ndarray,
        canvas_width: float,
        canvas_height: float
    ) -> List[RoomRect]:
        """
        Detect rooms in a decoded floor plan image.

        Args:
            image: Pixel buffer (gray, RGB or RGBA, uint8)
            canvas_width: Width of the target canvas
            canvas_height: Height of the target canvas

        Returns:
            Rooms in canvas coordinates, possibly empty
        """
        if canvas_width <= 0 or canvas_height <= 0:
            raise ValueError(f"Canvas size must be positive, got {canvas_width}x{canvas_height}")

        grid = self.preprocessor.to_occupancy_grid(image)
        h, w = grid.shape

        components = detect_room_components(
            grid,
            dilate_radius=self.config.dilate_radius,
            min_area_ratio=self.config.min_area_ratio
        )

        scale_x = canvas_width / w
        scale_y = canvas_height / h

        rooms = []
        for comp in components:
            gx, gy, gw, gh = comp.bounding_box
            if gw <= 0 or gh <= 0:
                logger.debug(f"Skipping degenerate component at ({gx}, {gy}), area {comp.area}")
                continue

            rooms.append(RoomRect(
                x=gx * scale_x,
                y=gy * scale_y,
                width=gw * scale_x,
                height=gh * scale_y,
                name=f"Room {len(rooms) + 1}",
                color=ROOM_COLORS[len(rooms) % len(ROOM_COLORS)],
            ))

        if rooms:
            logger.info(f"Detected {len(rooms)} rooms on {w}x{h} grid")
        else:
            logger.warning(f"No rooms detected on {w}x{h} grid")

        return rooms


def analyze_floor_plan(
    image: np.ndarray,
    canvas_width: float,
    canvas_height: float,
    config: Optional[AnalyzerConfig] = None
) -> List[RoomRect]:
    """
    Convenience function for floor plan room detection.

    Returns:
        List of RoomRect in canvas coordinates
    """
    analyzer = FloorPlanAnalyzer(config)
    return analyzer.analyze(image, canvas_width, canvas_height)
