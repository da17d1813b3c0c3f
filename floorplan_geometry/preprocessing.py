"""
Floor Plan Preprocessing Module
================================
Turns a decoded floor plan image into a two-state occupancy grid:
1. Downscales the image to a bounded working size
2. Converts to perceptual luma
3. Thresholds into open (bright) and wall (dark) cells
4. Auto-detects polarity so light-on-dark plans work too
"""

import cv2
import numpy as np
from typing import Tuple
import logging

from .room_detection import CellState

logger = logging.getLogger(__name__)


# ITU-R BT.601 luma weights, RGB order
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def load_image(image_path: str) -> np.ndarray:
    """
    Decode an image file into an RGB array.

    Raises:
        ValueError: if the file cannot be decoded
    """
    img = cv2.imread(image_path, cv2.IMREAD_COLOR)
    if img is None:
        raise ValueError(f"Failed to load image: {image_path}")

    logger.info(f"Loaded image: {image_path}, {img.shape[1]}x{img.shape[0]}")
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)


class FloorPlanPreprocessor:
    """
    Binarizes floor plan rasters for room detection.
    """

    def __init__(
        self,
        max_size: int = 400,
        wall_threshold: float = 200,
        polarity_ratio: float = 0.3
    ):
        """
        Initialize the preprocessor.

        Args:
            max_size: Maximum size of the longest dimension (never upscaled)
            wall_threshold: Luma at or above which a pixel is open floor
            polarity_ratio: Minimum open fraction before the grid is inverted
        """
        self.max_size = max_size
        self.wall_threshold = wall_threshold
        self.polarity_ratio = polarity_ratio

    @staticmethod
    def validate(image: np.ndarray) -> np.ndarray:
        """Check the buffer is a non-empty gray, RGB or RGBA raster."""
        img = np.ascontiguousarray(image)
        if img.ndim not in (2, 3) or img.size == 0:
            raise ValueError(f"Expected a 2D or 3D pixel array, got shape {img.shape}")
        if img.ndim == 3 and img.shape[2] not in (3, 4):
            raise ValueError(f"Expected 3 or 4 channels, got {img.shape[2]}")
        if img.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {img.dtype}")
        return img

    def resize_to_max(self, img: np.ndarray) -> Tuple[np.ndarray, float]:
        """
        Resize image so its longest side is at most max_size, keeping aspect ratio.

        Returns:
            Tuple of (resized image, scale factor)
        """
        h, w = img.shape[:2]
        scale = min(self.max_size / w, self.max_size / h, 1.0)

        if scale < 1:
            new_w = max(1, int(round(w * scale)))
            new_h = max(1, int(round(h * scale)))
            img = cv2.resize(img, (new_w, new_h), interpolation=cv2.INTER_AREA)

        logger.debug(f"Working size: {img.shape[1]}x{img.shape[0]} (scale {scale:.3f})")
        return img, scale

    @staticmethod
    def to_luma(img: np.ndarray) -> np.ndarray:
        """Perceptual brightness as float64, alpha ignored."""
        if img.ndim == 2:
            return img.astype(np.float64)

        rgb = img[..., :3].astype(np.float64)
        r_w, g_w, b_w = LUMA_WEIGHTS
        return r_w * rgb[..., 0] + g_w * rgb[..., 1] + b_w * rgb[..., 2]

    def binarize(self, luma: np.ndarray) -> np.ndarray:
        """Bright pixels become OPEN, everything else WALL."""
        return np.where(
            luma >= self.wall_threshold, CellState.OPEN, CellState.WALL
        ).astype(np.uint8)

    def normalize_polarity(self, grid: np.ndarray) -> np.ndarray:
        """
        Invert the grid when too few pixels are open.

        Plans drawn with light walls on a dark background come out mostly
        WALL after thresholding; swapping the two states makes them look
        like an ordinary dark-on-light plan.
        """
        open_count = int(np.count_nonzero(grid == CellState.OPEN))
        if open_count < grid.size * self.polarity_ratio:
            logger.debug(f"Inverting polarity ({open_count}/{grid.size} open)")
            return np.where(
                grid == CellState.OPEN, CellState.WALL, CellState.OPEN
            ).astype(np.uint8)
        return grid

    def to_occupancy_grid(self, image: np.ndarray) -> np.ndarray:
        """
        Complete preprocessing pipeline.

        Args:
            image: Decoded pixel buffer (gray, RGB or RGBA, uint8)

        Returns:
            uint8 grid of CellState.OPEN / CellState.WALL at working size
        """
        img = self.validate(image)
        img, _ = self.resize_to_max(img)
        grid = self.binarize(self.to_luma(img))
        return self.normalize_polarity(grid)
