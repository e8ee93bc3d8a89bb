from __future__ import annotations

from typing import Tuple

import numpy as np
from matplotlib import colormaps
from matplotlib import colors as mcolors

from .models import Color

RGBA = Tuple[float, float, float, float]

POINTS_PER_INCH = 72.0


def pick_color(index: int, palette: str = "tab10") -> RGBA:
    """Pick the ``index``-th color of a categorical matplotlib colormap.

    Indices wrap around the palette length.

    Raises:
        ValueError: If the palette name is unknown or the index is negative.
    """
    if index < 0:
        raise ValueError(f"Palette index must be >= 0, got {index}")
    try:
        cmap = colormaps[palette]
    except KeyError as e:
        raise ValueError(f"Unknown palette: '{palette}'") from e

    listed = getattr(cmap, "colors", None)
    if listed is not None and len(listed) > 0:
        return mcolors.to_rgba(listed[index % len(listed)])
    return mcolors.to_rgba(cmap((index % cmap.N) / max(cmap.N - 1, 1)))


def mix(color: Color, alpha: float) -> RGBA:
    """Return ``color`` as RGBA with its opacity set to ``alpha``."""
    return mcolors.to_rgba(color, float(np.clip(alpha, 0.0, 1.0)))


def px_to_points(px: float, dpi: float) -> float:
    """Convert a pixel length to typographic points at ``dpi``."""
    return float(px) * POINTS_PER_INCH / float(dpi)


def to_plot_coords(freqs: np.ndarray, gains: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Cast frequencies and gains to integer plot coordinates.

    Both casts truncate toward zero. Gains saturate at 0, the bottom of the
    unsigned plot range.
    """
    x = np.trunc(np.asarray(freqs, dtype=np.float64)).astype(np.int64)
    y = np.clip(np.trunc(np.asarray(gains, dtype=np.float64)), 0, None).astype(np.int64)
    return x, y
