"""
Print the regression diagnostics report for the reference dataset.

Usage: python -m pylinreg
"""

from .diagnostics import RegressionDiagnostics
from .sample import reference_sample


def main():
    RegressionDiagnostics(reference_sample()).summary()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
