"""
Simple linear regression diagnostics.

This is the user-facing API: fit a straight line, test its coefficients,
and describe the association between x and y.
"""

import numpy as np
import pandas as pd
from typing import Optional, Union
from dataclasses import dataclass

from ._backends import get_backend, BackendBase, FitResult
from ._core import (
    covariance,
    pearson,
    spearman,
    standard_error,
    t_statistic,
    p_value,
    significance,
)
from .exceptions import ShapeMismatchError
from .report import render, print_report
from .sample import Sample


@dataclass(frozen=True, eq=False)
class DiagnosticsReport:
    """Everything derived from a Sample and its FitResult."""
    sample: Sample
    fit: FitResult

    se_c0: float           # Standard errors
    se_c1: float
    t_c0: float            # t-statistics
    t_c1: float
    p_c0: float            # Two-sided p-values, df = n - 2
    p_c1: float
    sig_c0: str            # Significance labels
    sig_c1: str

    cov: float             # Population covariance of x and y
    r: float               # Pearson correlation
    r_squared: float       # r * r
    spearman: float        # Spearman rank correlation

    fitted: np.ndarray     # c0 + c1 x
    residuals: np.ndarray  # fitted - observed

    def table(self) -> pd.DataFrame:
        """Per-observation x, y, fitted value and residual, in input order."""
        return pd.DataFrame({
            'x': self.sample.x,
            'y': self.sample.y,
            'yp': self.fitted,
            'residual': self.residuals,
        })

    def coef_table(self) -> pd.DataFrame:
        """Estimates, standard errors, t-values, p-values and labels."""
        return pd.DataFrame({
            'estimate': [self.fit.c0, self.fit.c1],
            'std_error': [self.se_c0, self.se_c1],
            't_value': [self.t_c0, self.t_c1],
            'p_value': [self.p_c0, self.p_c1],
            'significance': [self.sig_c0, self.sig_c1],
        }, index=['c0', 'c1'])


def fit(sample: Sample, backend: Union[str, BackendBase] = 'auto') -> FitResult:
    """
    Least-squares straight line through a sample.

    Parameters
    ----------
    sample : Sample
        Observations (x, y)
    backend : str or BackendBase
        'auto', 'cpu' or 'qr'

    Returns
    -------
    FitResult
        c0, c1, parameter covariance matrix and residual sum of squares

    Raises
    ------
    DegenerateInputError
        If all x values are identical
    """
    return get_backend(backend).fit_linear(sample.x, sample.y)


def diagnose(sample: Sample, fit_result: Optional[FitResult] = None) -> DiagnosticsReport:
    """
    Compute the diagnostics report for a sample.

    Parameters
    ----------
    sample : Sample
        Observations (x, y)
    fit_result : FitResult, optional
        Fit of this sample; computed with the default backend if omitted

    Returns
    -------
    DiagnosticsReport

    Raises
    ------
    DegenerateInputError
        If either standard error is zero (e.g. a perfect fit)
    ShapeMismatchError
        If fit_result was computed from a sample of a different size
    """
    if fit_result is None:
        fit_result = fit(sample)
    elif fit_result.n != sample.n:
        raise ShapeMismatchError(
            f"Fit has {fit_result.n} observations, sample has {sample.n}"
        )

    df = fit_result.df_residual

    se_c0 = standard_error(fit_result.cov00, name='c0')
    se_c1 = standard_error(fit_result.cov11, name='c1')

    t_c0 = t_statistic(fit_result.c0, se_c0)
    t_c1 = t_statistic(fit_result.c1, se_c1)

    p_c0 = p_value(t_c0, df)
    p_c1 = p_value(t_c1, df)

    r = pearson(sample.x, sample.y)

    fitted = fit_result.predict(sample.x)
    residuals = fitted - sample.y
    fitted.flags.writeable = False
    residuals.flags.writeable = False

    return DiagnosticsReport(
        sample=sample,
        fit=fit_result,
        se_c0=se_c0,
        se_c1=se_c1,
        t_c0=t_c0,
        t_c1=t_c1,
        p_c0=p_c0,
        p_c1=p_c1,
        sig_c0=significance(p_c0),
        sig_c1=significance(p_c1),
        cov=covariance(sample.x, sample.y),
        r=r,
        r_squared=r * r,
        spearman=spearman(sample.x, sample.y),
        fitted=fitted,
        residuals=residuals,
    )


def extrapolate(fit_result: FitResult, x_range) -> pd.DataFrame:
    """
    Fitted line with one-standard-error bands over arbitrary x.

    The error of the mean prediction at x is
    sqrt(cov00 + x (2 cov01 + cov11 x)).

    Parameters
    ----------
    fit_result : FitResult
        Fitted line
    x_range : array-like
        Points at which to evaluate the line

    Returns
    -------
    DataFrame
        Columns 'x', 'y_fit', 'y_hi', 'y_lo'
    """
    x = np.asarray(x_range, dtype=np.float64)
    y_fit = fit_result.predict(x)
    y_err = np.sqrt(fit_result.cov00 + x * (2 * fit_result.cov01 + fit_result.cov11 * x))

    return pd.DataFrame({
        'x': x,
        'y_fit': y_fit,
        'y_hi': y_fit + y_err,
        'y_lo': y_fit - y_err,
    })


def default_extrapolation_range(sample: Sample) -> np.ndarray:
    """
    Sweep from 30% before the first observation to 30% past the last.

    x0 + (i / 100) (x_last - x0) for i = -30 .. 129, where x0 and x_last
    are the first and last x values in input order.
    """
    x0 = sample.x[0]
    x_last = sample.x[-1]
    i = np.arange(-30, 130)
    return x0 + (i / 100.0) * (x_last - x0)


class RegressionDiagnostics:
    """
    Fit and diagnose a straight line (like R's lm(y ~ x) plus cor()).

    Examples
    --------
    >>> from pylinreg import RegressionDiagnostics, reference_sample
    >>> model = RegressionDiagnostics(reference_sample())
    >>> model.summary()           # Prints the full report
    >>> model.report.p_c1         # P-value of the slope
    >>> model.report.table()      # Fitted values and residuals
    >>> model.extrapolate()       # Line with error bands
    """

    def __init__(self, sample: Sample, backend: Union[str, BackendBase] = 'auto'):
        """
        Parameters
        ----------
        sample : Sample
            Observations (x, y)
        backend : str or BackendBase
            Computational backend: 'auto', 'cpu', 'qr'
        """
        self.sample = sample
        self.backend = get_backend(backend)
        self.fit_result = fit(sample, backend=self.backend)
        self.report = diagnose(sample, self.fit_result)

    def render(self) -> str:
        """Report as text."""
        return render(self.report)

    def summary(self, file=None):
        """Print the report."""
        print_report(self.report, file=file)

    def predict(self, x) -> np.ndarray:
        """Fitted values at new x."""
        return self.fit_result.predict(x)

    def extrapolate(self, x_range=None) -> pd.DataFrame:
        """Fitted line with error bands; defaults to a sweep around the data."""
        if x_range is None:
            x_range = default_extrapolation_range(self.sample)
        return extrapolate(self.fit_result, x_range)

    def __repr__(self):
        return (f"RegressionDiagnostics(n={self.sample.n}, "
                f"slope={self.fit_result.c1:.4g}, r²={self.report.r_squared:.3f})")


__all__ = [
    "DiagnosticsReport",
    "RegressionDiagnostics",
    "fit",
    "diagnose",
    "extrapolate",
    "default_extrapolation_range",
]
