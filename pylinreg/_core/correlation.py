"""
Covariance and correlation of two samples.

Population (1/n) moments throughout; the normalisation cancels in the
correlation coefficients.
"""

import numpy as np
from scipy.stats import rankdata


def covariance(x: np.ndarray, y: np.ndarray) -> float:
    """Population covariance (1/n) sum (x - xbar)(y - ybar)."""
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    return float(np.mean((x - x.mean()) * (y - y.mean())))


def pearson(x: np.ndarray, y: np.ndarray) -> float:
    """
    Pearson correlation cov(x, y) / (sd(x) sd(y)).

    Uses population standard deviations, matching covariance().
    Returns NaN when either vector is constant.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    denom = np.std(x) * np.std(y)
    if denom == 0:
        return float('nan')
    return covariance(x, y) / float(denom)


def spearman(x: np.ndarray, y: np.ndarray) -> float:
    """
    Spearman rank correlation.

    Values are replaced by their ranks (ties get the average rank) and
    the Pearson correlation of the ranks is returned.
    """
    return pearson(rankdata(x, method='average'), rankdata(y, method='average'))


__all__ = ["covariance", "pearson", "spearman"]
