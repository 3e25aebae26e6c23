"""
Bivariate samples.

A Sample is the only input to the diagnostics: two equal-length vectors of
real numbers, x (independent) and y (dependent).
"""

import numpy as np
import pandas as pd
from dataclasses import dataclass, field

from ._utils import check_vector, frozen_copy
from .exceptions import DegenerateInputError, ShapeMismatchError


# Reference dataset (n = 15)
REFERENCE_X = (20, 16, 20, 18, 17, 16, 15, 17, 15, 16, 15, 17, 16, 17, 14)
REFERENCE_Y = (89, 72, 93, 84, 81, 75, 70, 82, 69, 83, 80, 83, 81, 84, 76)


@dataclass(frozen=True, eq=False)
class Sample:
    """
    Immutable pair of equal-length vectors (x, y).

    Parameters
    ----------
    x : array-like, shape (n,)
        Independent variable
    y : array-like, shape (n,)
        Dependent variable

    Raises
    ------
    ValueError
        If either input is not 1-dimensional or contains NaN/Inf
    ShapeMismatchError
        If len(x) != len(y)
    DegenerateInputError
        If n <= 2 (no residual degrees of freedom)

    Examples
    --------
    >>> from pylinreg import Sample
    >>> sample = Sample([1, 2, 3, 4], [2.1, 3.9, 6.2, 7.8])
    >>> sample.n
    4
    """
    x: np.ndarray
    y: np.ndarray
    n: int = field(init=False)

    def __post_init__(self):
        x = check_vector(self.x, name='x')
        y = check_vector(self.y, name='y')

        if len(x) != len(y):
            raise ShapeMismatchError(
                f"x and y must have the same length (got {len(x)} and {len(y)})"
            )
        if len(x) <= 2:
            raise DegenerateInputError(
                f"At least 3 observations required, got {len(x)}"
            )

        object.__setattr__(self, 'x', frozen_copy(x))
        object.__setattr__(self, 'y', frozen_copy(y))
        object.__setattr__(self, 'n', len(x))

    @classmethod
    def from_frame(cls, data: pd.DataFrame, x: str, y: str) -> "Sample":
        """
        Build a sample from two DataFrame columns.

        >>> sample = Sample.from_frame(df, x='height', y='weight')
        """
        return cls(data[x].values, data[y].values)

    def to_frame(self) -> pd.DataFrame:
        """Sample as a DataFrame with columns 'x' and 'y'."""
        return pd.DataFrame({'x': self.x, 'y': self.y})

    def __len__(self):
        return self.n

    def __eq__(self, other):
        if not isinstance(other, Sample):
            return NotImplemented
        return np.array_equal(self.x, other.x) and np.array_equal(self.y, other.y)

    __hash__ = None

    def __repr__(self):
        return f"Sample(n={self.n})"


def reference_sample() -> Sample:
    """The 15-observation dataset reported by ``python -m pylinreg``."""
    return Sample(REFERENCE_X, REFERENCE_Y)


__all__ = ["Sample", "reference_sample", "REFERENCE_X", "REFERENCE_Y"]
