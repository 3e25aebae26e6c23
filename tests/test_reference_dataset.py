"""
End-to-end check on the reference dataset.

Validates the diagnostics of the 15-observation dataset against values
computed from exact sums.
"""

import pytest
import numpy as np
import json
from pathlib import Path

from pylinreg import RegressionDiagnostics, Sample, reference_sample


# Tolerance levels
COEF_TOL = 1e-8       # Coefficient tolerance
STAT_TOL = 1e-5       # Statistics tolerance (r, etc.)


def load_fixture(name):
    """Load a test fixture from JSON."""
    fixture_path = Path(__file__).parent / "fixtures" / f"{name}.json"
    with open(fixture_path, 'r') as f:
        return json.load(f)


@pytest.fixture(scope="module")
def fixture():
    return load_fixture("reference_dataset")


@pytest.fixture(scope="module")
def model():
    return RegressionDiagnostics(reference_sample())


def test_reference_sample_matches_fixture(fixture):
    sample = reference_sample()
    assert sample == Sample(fixture["x"], fixture["y"])
    assert sample.n == fixture["n"]


def test_coefficients(model, fixture):
    fit = model.fit_result
    np.testing.assert_allclose(fit.c1, fixture["c1"], rtol=COEF_TOL,
                               err_msg="Slope doesn't match exact sums")
    np.testing.assert_allclose(fit.c0, fixture["c0"], rtol=COEF_TOL,
                               err_msg="Intercept doesn't match exact sums")
    np.testing.assert_allclose(fit.sumsq, fixture["sumsq"], rtol=COEF_TOL)
    np.testing.assert_allclose(fit.cov11, fixture["cov11"], rtol=STAT_TOL)
    assert fit.df_residual == fixture["df_residual"]


def test_association(model, fixture):
    report = model.report
    np.testing.assert_allclose(report.cov, fixture["covariance"], rtol=STAT_TOL)
    np.testing.assert_allclose(report.r, fixture["r"], rtol=STAT_TOL)
    assert report.r > 0.6
    assert report.spearman > 0


def test_slope_is_significant(model, fixture):
    assert model.fit_result.c1 > 0
    assert model.report.sig_c1 == fixture["significance_c1"]
    assert model.report.sig_c1 in ('*', '**', '***')


def test_residuals_in_input_order(model, fixture):
    table = model.report.table()
    assert list(table.columns) == ['x', 'y', 'yp', 'residual']
    np.testing.assert_array_equal(table['x'].values, fixture["x"])
    np.testing.assert_array_equal(table['y'].values, fixture["y"])


def test_main_prints_report(capsys):
    from pylinreg.__main__ import main

    assert main() == 0
    out = capsys.readouterr().out
    assert "REGRESSION DIAGNOSTICS" in out
    assert "# Best fit: y = 26.742 + 3.21635 x" in out
