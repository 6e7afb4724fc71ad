from __future__ import annotations

from math import comb

import numpy as np


def bernstein_poly(n: int, i: int, t: np.ndarray) -> np.ndarray:
    return comb(n, i) * np.power(t, i) * np.power(1 - t, n - i)


def bernstein_basis(degree: int, t: np.ndarray) -> np.ndarray:
    """Basis weights with shape (len(t), degree + 1)."""
    return np.stack([bernstein_poly(degree, i, t) for i in range(degree + 1)], axis=1)


def bezier_curve(control_points: np.ndarray, t: np.ndarray) -> np.ndarray:
    """Curve points for every parameter in ``t``; rows are points, columns components."""
    control_points = np.asarray(control_points, dtype=float)
    if control_points.ndim != 2 or control_points.shape[0] < 2:
        raise ValueError("control_points must have shape (n_ctrl >= 2, dim)")
    t = np.atleast_1d(np.asarray(t, dtype=float))
    return bernstein_basis(control_points.shape[0] - 1, t) @ control_points
