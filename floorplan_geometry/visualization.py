"""
Debug overlay of detected rooms drawn over the source floor plan.
"""

import cv2
import numpy as np
from typing import List, Tuple

from .floor_plan_analyzer import RoomRect


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    color = color.lstrip('#')
    return tuple(int(color[i:i + 2], 16) for i in (0, 2, 4))


def rooms_to_image(
    image: np.ndarray,
    rooms: List[RoomRect],
    canvas_width: float,
    canvas_height: float,
    alpha: float = 0.45
) -> np.ndarray:
    """
    Draw rooms on a copy of an RGB image for visual inspection.

    Rooms are given in canvas coordinates and mapped back onto the image.
    """
    if image.ndim == 2:
        base = cv2.cvtColor(image, cv2.COLOR_GRAY2RGB)
    else:
        base = np.ascontiguousarray(image[..., :3])

    h, w = base.shape[:2]
    sx = w / canvas_width
    sy = h / canvas_height

    overlay = base.copy()
    boxes = []
    for room in rooms:
        p1 = (int(round(room.x * sx)), int(round(room.y * sy)))
        p2 = (int(round(room.right * sx)), int(round(room.bottom * sy)))
        boxes.append((room, p1, p2))
        cv2.rectangle(overlay, p1, p2, hex_to_rgb(room.color), -1)

    result = cv2.addWeighted(base, 1 - alpha, overlay, alpha, 0)

    for room, p1, p2 in boxes:
        cv2.rectangle(result, p1, p2, (0, 0, 0), 1)
        cv2.putText(
            result, room.name,
            (p1[0] + 3, p1[1] + 12),
            cv2.FONT_HERSHEY_SIMPLEX, 0.35, (0, 0, 0), 1
        )

    return result


def save_visualization(path: str, image: np.ndarray) -> None:
    """Write an RGB image to disk."""
    if not cv2.imwrite(path, cv2.cvtColor(image, cv2.COLOR_RGB2BGR)):
        raise ValueError(f"Failed to write image: {path}")
