"""
Utility functions.
"""

import numpy as np


def check_vector(y, name='y', dtype=np.float64):
    """Validate vector input."""
    y = np.asarray(y, dtype=dtype)
    if y.ndim != 1:
        raise ValueError(f"{name} must be 1-dimensional")
    if not np.all(np.isfinite(y)):
        raise ValueError(f"{name} contains NaN or Inf")
    return y


def frozen_copy(a: np.ndarray) -> np.ndarray:
    """Return a read-only copy of an array."""
    a = np.array(a, dtype=np.float64, copy=True)
    a.flags.writeable = False
    return a
