"""Shared numeric helpers for colorsolve."""

from __future__ import annotations

import numpy as np


def round_half_up(values: float | np.ndarray) -> np.ndarray:
    """Round to the nearest integer, ties towards +infinity.

    Python's ``round`` and ``np.round`` round ties to even, which would shift
    some channels by one compared to the usual ``floor(x + 0.5)`` convention.

    Examples
    --------
    >>> round_half_up(np.array([0.5, 1.5, 2.4, -0.5])).tolist()
    [1, 2, 2, 0]
    """
    return np.floor(np.asarray(values, dtype=np.float64) + 0.5).astype(np.int64)
