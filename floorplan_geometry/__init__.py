# Floor Plan Geometry Package
# Room detection, furniture collision and wall snapping for the layout editor

__version__ = "1.0.0"

from .room_detection import CellState, Component, dilate_walls, flood_fill_exterior, find_components
from .preprocessing import FloorPlanPreprocessor, load_image
from .floor_plan_analyzer import (
    AnalyzerConfig,
    FloorPlanAnalyzer,
    RoomRect,
    ROOM_COLORS,
    analyze_floor_plan,
)
from .collision import Furniture, footprint, check_collision, colliding_pairs, get_colliding_ids
from .wall_snap import (
    WallAxis,
    WallSegment,
    WallHit,
    room_segments,
    find_nearest_wall,
    column_edge_center,
)
from .openings import OpeningKind, Opening, OPENING_DEFAULTS, place_opening, move_opening, opening_at
from .units import (
    PX_TO_M,
    PX_PER_M,
    WORLD_OFFSET,
    px_to_m,
    m_to_px,
    canvas_to_world,
    world_to_canvas,
    room_to_world_box,
    Measurement,
    measure,
)

__all__ = [
    'CellState',
    'Component',
    'dilate_walls',
    'flood_fill_exterior',
    'find_components',
    'FloorPlanPreprocessor',
    'load_image',
    'AnalyzerConfig',
    'FloorPlanAnalyzer',
    'RoomRect',
    'ROOM_COLORS',
    'analyze_floor_plan',
    'Furniture',
    'footprint',
    'check_collision',
    'colliding_pairs',
    'get_colliding_ids',
    'WallAxis',
    'WallSegment',
    'WallHit',
    'room_segments',
    'find_nearest_wall',
    'column_edge_center',
    'OpeningKind',
    'Opening',
    'OPENING_DEFAULTS',
    'place_opening',
    'move_opening',
    'opening_at',
    'PX_TO_M',
    'PX_PER_M',
    'WORLD_OFFSET',
    'px_to_m',
    'm_to_px',
    'canvas_to_world',
    'world_to_canvas',
    'room_to_world_box',
    'Measurement',
    'measure',
]
