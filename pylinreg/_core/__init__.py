"""
Core statistics (backend-agnostic).
"""

from .correlation import covariance, pearson, spearman
from .inference import (
    standard_error,
    t_statistic,
    p_value,
    significance,
    SIGNIFICANCE_LEGEND,
)

__all__ = [
    "covariance",
    "pearson",
    "spearman",
    "standard_error",
    "t_statistic",
    "p_value",
    "significance",
    "SIGNIFICANCE_LEGEND",
]
