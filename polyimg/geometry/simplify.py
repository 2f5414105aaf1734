"""Tolerance-bounded polyline simplification (radial distance + Douglas-Peucker).

No point of the input lies farther than `tolerance` from the simplified
polyline. Endpoints are always kept. A tolerance of 0 returns the input
unchanged.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def simplify(points: NDArray[np.float64], tolerance: float, closed: bool = False) -> NDArray[np.float64]:
    """Simplify an Nx2 point run.

    Open runs get a cheap radial-distance pass first. Closed rings are
    simplified including their closing edge; a duplicated closing point
    survives as the ring's last point.
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if tolerance <= 0 or len(pts) < 3:
        return pts

    if not closed:
        return douglas_peucker(radial_distance(pts, tolerance), tolerance)

    already_closed = bool(np.array_equal(pts[0], pts[-1]))
    ring = pts if already_closed else np.vstack([pts, pts[:1]])
    simplified = douglas_peucker(ring, tolerance)
    return simplified if already_closed else simplified[:-1]


def radial_distance(points: NDArray[np.float64], tolerance: float) -> NDArray[np.float64]:
    """Drop points closer than tolerance to the last kept point."""
    sq_tolerance = tolerance * tolerance
    keep = [0]
    last = points[0]
    for i in range(1, len(points) - 1):
        d = points[i] - last
        if d[0] * d[0] + d[1] * d[1] > sq_tolerance:
            keep.append(i)
            last = points[i]
    keep.append(len(points) - 1)
    return points[keep]


def douglas_peucker(points: NDArray[np.float64], tolerance: float) -> NDArray[np.float64]:
    """Iterative Douglas-Peucker; keeps a point when its distance exceeds tolerance."""
    if len(points) < 3:
        return points
    keep = np.zeros(len(points), dtype=bool)
    keep[0] = keep[-1] = True

    stack = [(0, len(points) - 1)]
    while stack:
        start, end = stack.pop()
        if end <= start + 1:
            continue
        dists = _segment_distances(points[start + 1 : end], points[start], points[end])
        idx = int(np.argmax(dists))
        if dists[idx] > tolerance:
            split = start + 1 + idx
            keep[split] = True
            stack.append((start, split))
            stack.append((split, end))

    return points[keep]


def _segment_distances(pts: NDArray[np.float64], a: NDArray[np.float64], b: NDArray[np.float64]) -> NDArray[np.float64]:
    """Distance from each point to the segment a-b (to a itself when a == b)."""
    seg = b - a
    seg_sq = float(seg[0] * seg[0] + seg[1] * seg[1])
    rel = pts - a
    if seg_sq == 0.0:
        return np.hypot(rel[:, 0], rel[:, 1])
    t = np.clip((rel @ seg) / seg_sq, 0.0, 1.0)
    proj = np.outer(t, seg)
    diff = rel - proj
    return np.hypot(diff[:, 0], diff[:, 1])
