"""
CPU backend using closed-form NumPy sums.

This is the reference implementation; it evaluates the textbook
centred-sum formulas in double precision.
"""

import numpy as np

from .base import BackendBase, FitResult


class CPUBackendFP64(BackendBase):
    """
    Closed-form OLS for one predictor plus intercept.

    Always uses FP64 precision.
    """

    def __init__(self):
        self.name = "cpu_fp64"
        self.precision = "fp64"

    def fit_linear(self, x: np.ndarray, y: np.ndarray) -> FitResult:
        """
        Fit y = c0 + c1 x with centred sums.

        c1 = Sxy / Sxx, c0 = ybar - c1 xbar, and the parameter covariance
        uses the residual variance s2 = sumsq / (n - 2).
        """
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        n = len(x)

        x_mean = np.mean(x)
        y_mean = np.mean(y)
        dx = x - x_mean
        dy = y - y_mean

        sxx = float(np.sum(dx * dx))
        self._check_spread(x, sxx)
        sxy = float(np.sum(dx * dy))

        c1 = sxy / sxx
        c0 = y_mean - c1 * x_mean

        resid = y - (c0 + c1 * x)
        sumsq = float(np.sum(resid * resid))

        df = n - 2
        s2 = sumsq / df

        return FitResult(
            c0=float(c0),
            c1=float(c1),
            cov00=float(s2 * (1.0 / n + x_mean * x_mean / sxx)),
            cov01=float(-s2 * x_mean / sxx),
            cov11=float(s2 / sxx),
            sumsq=sumsq,
            n=n,
            df_residual=df,
            backend=self.name,
        )

    def get_device_info(self) -> dict:
        """Get backend information."""
        return {
            'backend': 'cpu',
            'precision': 'fp64',
            'method': 'closed-form',
            'library': f'NumPy {np.__version__}',
        }
