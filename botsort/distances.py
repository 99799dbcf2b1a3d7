"""Distances between appearance features and overlap between boxes."""

from __future__ import annotations

import numpy as np


def cosine_distance(x, y) -> float:
    """Cosine distance ``1 - cos(x, y)``, stabilised against zero norms."""
    a = np.asarray(x, dtype=float).reshape(-1)
    b = np.asarray(y, dtype=float).reshape(-1)
    return float(1.0 - a.dot(b) / (np.linalg.norm(a) * np.linalg.norm(b) + 1e-5))


def euclidean_distance(x, y) -> float:
    """Euclidean distance between two feature vectors."""
    a = np.asarray(x, dtype=float).reshape(-1)
    b = np.asarray(y, dtype=float).reshape(-1)
    return float(np.linalg.norm(a - b))


def iou(tlwh_a, tlwh_b) -> float:
    """Intersection over union of two ``(left, top, width, height)`` boxes.

    Box extents are counted inclusively in pixels, hence the ``+ 1`` terms.
    """
    ax, ay, aw, ah = (float(v) for v in tlwh_a[:4])
    bx, by, bw, bh = (float(v) for v in tlwh_b[:4])
    left = max(ax, bx)
    top = max(ay, by)
    right = min(ax + aw, bx + bw)
    bottom = min(ay + ah, by + bh)
    area_i = max(right - left + 1, 0.0) * max(bottom - top + 1, 0.0)
    area_a = (aw + 1) * (ah + 1)
    area_b = (bw + 1) * (bh + 1)
    return area_i / (area_a + area_b - area_i)