"""
CPU backend using a QR factorisation (NumPy + SciPy).

Solves the same straight-line problem as the closed-form backend through
the design matrix [1, x]. Used to cross-check the closed form.
"""

import numpy as np
from scipy.linalg import qr, solve_triangular

from .base import BackendBase, FitResult


class QRBackendFP64(BackendBase):
    """
    OLS via Householder QR of the n x 2 design matrix.

    Always uses FP64 precision.
    """

    def __init__(self):
        self.name = "qr_fp64"
        self.precision = "fp64"

    def fit_linear(self, x: np.ndarray, y: np.ndarray) -> FitResult:
        """
        Fit y = c0 + c1 x by solving R beta = Q'y.

        The covariance matrix is s2 (R'R)^-1 with s2 = sumsq / (n - 2).
        """
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        n = len(x)

        dx = x - np.mean(x)
        self._check_spread(x, float(np.sum(dx * dx)))

        X = np.column_stack([np.ones(n), x])

        # Economic QR: Q is (n, 2), R is (2, 2)
        Q, R = qr(X, mode='economic')
        qty = Q.T @ y
        coef = solve_triangular(R, qty, lower=False)

        resid = y - X @ coef
        sumsq = float(np.sum(resid * resid))

        df = n - 2
        s2 = sumsq / df

        # (X'X)^-1 = R^-1 R^-T
        R_inv = solve_triangular(R, np.eye(2), lower=False)
        vcov = (R_inv @ R_inv.T) * s2

        return FitResult(
            c0=float(coef[0]),
            c1=float(coef[1]),
            cov00=float(vcov[0, 0]),
            cov01=float(vcov[0, 1]),
            cov11=float(vcov[1, 1]),
            sumsq=sumsq,
            n=n,
            df_residual=df,
            backend=self.name,
        )

    def get_device_info(self) -> dict:
        """Get backend information."""
        import scipy
        return {
            'backend': 'cpu',
            'precision': 'fp64',
            'method': 'qr',
            'library': f'NumPy {np.__version__}, SciPy {scipy.__version__}',
        }
