"""
Abstract base classes for backends.

Defines the interface all backends must implement.
"""

from abc import ABC, abstractmethod
import warnings
import numpy as np
from dataclasses import dataclass

from ..exceptions import DegenerateInputError


@dataclass(frozen=True)
class FitResult:
    """Straight-line least-squares fit y = c0 + c1 x."""
    c0: float              # Intercept
    c1: float              # Slope
    cov00: float           # Var(c0)
    cov01: float           # Cov(c0, c1)
    cov11: float           # Var(c1)
    sumsq: float           # Residual sum of squares
    n: int                 # Number of observations
    df_residual: int       # n - 2
    backend: str = ''      # Backend that produced the fit

    @property
    def cov_matrix(self) -> np.ndarray:
        """2x2 covariance matrix of (c0, c1)."""
        return np.array([[self.cov00, self.cov01],
                         [self.cov01, self.cov11]])

    def predict(self, x) -> np.ndarray:
        """Fitted values c0 + c1 x."""
        return self.c0 + self.c1 * np.asarray(x, dtype=np.float64)


# Relative size of Sxx below which x is treated as numerically constant
NEAR_CONSTANT_RTOL = 1e-10


class BackendBase(ABC):
    """Abstract base class for all backends."""

    name = 'base'
    precision = 'fp64'

    @abstractmethod
    def fit_linear(self, x: np.ndarray, y: np.ndarray) -> FitResult:
        """
        Fit y = c0 + c1 x by ordinary least squares.

        Parameters
        ----------
        x : ndarray, shape (n,)
            Independent variable
        y : ndarray, shape (n,)
            Dependent variable

        Returns
        -------
        FitResult
            Coefficients, their covariance matrix and the residual
            sum of squares

        Raises
        ------
        DegenerateInputError
            If n <= 2 or all x values are identical
        """
        pass

    @abstractmethod
    def get_device_info(self) -> dict:
        """Get backend information."""
        pass

    @staticmethod
    def _check_spread(x: np.ndarray, sxx: float) -> None:
        """Refuse constant x, warn on numerically constant x."""
        n = len(x)
        if n <= 2:
            raise DegenerateInputError(
                f"At least 3 observations required, got {n}"
            )
        # Centred sums of identical values need not round to zero
        if np.ptp(x) == 0 or sxx == 0:
            raise DegenerateInputError(
                "All x values are identical; slope is undefined"
            )

        scale = float(np.sum(x ** 2))
        if sxx < NEAR_CONSTANT_RTOL * scale:
            warnings.warn(
                f"x is nearly constant (Sxx = {sxx:.3g}); "
                f"slope and its standard error are numerically unreliable.",
                UserWarning
            )
