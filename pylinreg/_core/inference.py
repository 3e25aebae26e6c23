"""
Significance tests for the fitted coefficients.
"""

import numpy as np
from scipy import stats

from ..exceptions import DegenerateInputError


# Upper bounds (inclusive) of each significance band, tightest first
SIGNIFICANCE_LEVELS = (
    (0.001, '***'),
    (0.01, '**'),
    (0.05, '*'),
)

SIGNIFICANCE_LEGEND = (
    "ns = not significant, * = p <= 0.05, ** = p <= 0.01, *** = p <= 0.001"
)


def standard_error(variance: float, name: str = 'coefficient') -> float:
    """Square root of a parameter variance; zero is refused."""
    se = float(np.sqrt(variance))
    if se == 0:
        raise DegenerateInputError(
            f"Standard error of {name} is zero; t-statistic is undefined"
        )
    return se


def t_statistic(estimate: float, se: float) -> float:
    """Estimate divided by its standard error."""
    return estimate / se


def p_value(t: float, df: int) -> float:
    """
    Two-sided p-value of a t-statistic.

    p = 2 P(T <= -|t|) with T ~ Student t(df). The lower tail is used
    so that very large |t| do not round to zero via 1 - cdf.
    """
    return float(2 * stats.t.cdf(-abs(t), df))


def significance(p: float) -> str:
    """
    Significance label for a p-value.

    'ns' if p > 0.05, '*' if 0.01 < p <= 0.05, '**' if 0.001 < p <= 0.01,
    '***' if p <= 0.001. A NaN p-value has no band and gives 'error'.

    >>> significance(0.05)
    '*'
    >>> significance(0.0009)
    '***'
    """
    if p > 0.05:
        return 'ns'
    for bound, label in SIGNIFICANCE_LEVELS:
        if p <= bound:
            return label
    return 'error'


__all__ = [
    "standard_error",
    "t_statistic",
    "p_value",
    "significance",
    "SIGNIFICANCE_LEGEND",
]
