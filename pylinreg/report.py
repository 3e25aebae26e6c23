"""
Plain-text rendering of a diagnostics report.

Numbers are printed with C-style %g formatting.
"""

import sys

from ._core import SIGNIFICANCE_LEGEND


HEADER = "###################### REGRESSION DIAGNOSTICS ##########################"
DATASET = "############################ DATASET ######################################"
END = "############################ END ######################################"


def render(report) -> str:
    """
    Format a DiagnosticsReport as text.

    Parameters
    ----------
    report : DiagnosticsReport

    Returns
    -------
    str
        Header, coefficient tests, covariance matrix, correlation block,
        then one "x y yp residual" row per observation.
    """
    f = report.fit
    lines = [
        HEADER,
        "# Model: y = c0 + c1 x",
        "# Best fit: y = %g + %g x" % (f.c0, f.c1),
        "# Sum of squares of residuals:  %g" % f.sumsq,
        "# Standard error of estimates: c0 = %g, c1 = %g" % (report.se_c0, report.se_c1),
        "# t-value of estimates: c0 = %g, c1 = %g" % (report.t_c0, report.t_c1),
        "# Associated probability values: c0 = %g, c1 = %g" % (report.p_c0, report.p_c1),
        "# Associated significance values: c0 = %s,  c1 = %s" % (report.sig_c0, report.sig_c1),
        "# Interpretation: " + SIGNIFICANCE_LEGEND,
        "# Covariance matrix:",
        "# [ %g, %g" % (f.cov00, f.cov01),
        "#   %g, %g]" % (f.cov01, f.cov11),
        "# Covariance COV:  %.2g" % report.cov,
        "# Correlation r: %.2g" % report.r,
        "# Coefficient of determination r2: %.2g" % report.r_squared,
        "# Spearman correlation:  %.2g" % report.spearman,
        DATASET,
        "# Dataset:",
        "x  y  yp residuals",
    ]

    for xi, yi, ypi, ri in zip(report.sample.x, report.sample.y,
                               report.fitted, report.residuals):
        lines.append("%g %g %g %g" % (xi, yi, ypi, ri))

    lines.append("")
    lines.append(END)
    return "\n".join(lines) + "\n"


def print_report(report, file=None):
    """Write the rendered report to ``file`` (stdout by default)."""
    if file is None:
        file = sys.stdout
    file.write(render(report))
