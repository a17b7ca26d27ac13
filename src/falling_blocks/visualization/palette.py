from __future__ import annotations

from typing import Tuple

import numpy as np


PALETTE = {
    0: (20, 20, 26),
    1: (0, 240, 240),  # I cyan
    2: (240, 240, 0),  # O yellow
    3: (160, 0, 240),  # T purple
    4: (0, 240, 0),    # S green
    5: (240, 0, 0),    # Z red
    6: (0, 0, 240),    # J blue
    7: (240, 160, 0),  # L orange
}


def color_for_value(v: int) -> Tuple[int, int, int]:
    # negative values are the falling-piece overlay
    return PALETTE.get(abs(v), (200, 200, 200))


def grid_to_rgb(state: np.ndarray, cell: int = 12) -> np.ndarray:
    """Rasterize a grid of color codes into an RGB image."""
    h, w = state.shape
    img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
    for y in range(h):
        for x in range(w):
            img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(int(state[y, x]))
    return img
