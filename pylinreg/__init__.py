"""
pylinreg: simple linear regression diagnostics.

Copyright (C) 2024 T.P. Leão
Licensed under GPL-3.0
"""

__version__ = "1.0.0"

# Import main user-facing API
from .sample import Sample, reference_sample
from .diagnostics import (
    RegressionDiagnostics,
    DiagnosticsReport,
    fit,
    diagnose,
    extrapolate,
    default_extrapolation_range,
)
from .report import render, print_report
from ._core import significance
from .exceptions import DegenerateInputError, ShapeMismatchError

# Import backend utilities (for advanced users)
from ._backends import FitResult, get_backend, list_available_backends

__all__ = [
    'Sample',
    'reference_sample',
    'RegressionDiagnostics',
    'DiagnosticsReport',
    'FitResult',
    'fit',
    'diagnose',
    'extrapolate',
    'default_extrapolation_range',
    'render',
    'print_report',
    'significance',
    'DegenerateInputError',
    'ShapeMismatchError',
    'get_backend',
    'list_available_backends',
]
