import cv2
import numpy as np
import pytest


WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def _blank(size, color=WHITE):
    w, h = size
    img = np.empty((h, w, 3), dtype=np.uint8)
    img[:] = color
    return img


def _frame(img, thickness, color=BLACK):
    h, w = img.shape[:2]
    img[:thickness, :] = color
    img[h - thickness:, :] = color
    img[:, :thickness] = color
    img[:, w - thickness:] = color
    return img


@pytest.fixture
def door_gap_plan():
    """50x50 white plan, 4px black outer wall with a 10px door in the top wall."""
    img = _frame(_blank((50, 50)), 4)
    img[:4, 20:30] = WHITE
    return img


@pytest.fixture
def two_room_plan():
    """100x100 plan split by a vertical wall at x=48..51 with a 10px door."""
    img = _frame(_blank((100, 100)), 4)
    img[:, 48:52] = BLACK
    img[45:55, 48:52] = WHITE
    return img


@pytest.fixture
def nine_room_plan():
    """300x300 plan, 3x3 grid of rooms separated by 4px walls."""
    img = _blank((300, 300))
    for offset in (0, 98, 198, 296):
        cv2.rectangle(img, (offset, 0), (offset + 3, 299), BLACK, -1)
        cv2.rectangle(img, (0, offset), (299, offset + 3), BLACK, -1)
    return img


@pytest.fixture
def make_plan():
    """Factory for a single framed room of the given size and wall thickness."""
    def _make(width, height, thickness=4):
        return _frame(_blank((width, height)), thickness)
    return _make
