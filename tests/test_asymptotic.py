import math

import numpy as np
import numpy.testing as npt
import pytest
import torch
from scipy.special import kv, kve

from besselk_torch import FLOAT32, FLOAT64, besselk
from besselk_torch.asymptotic import besselk_large_orders, besselk_large_orders_scaled, debye_cutoff


def _t(x, dtype=torch.float64):
    return torch.tensor(x, dtype=dtype)


@pytest.mark.parametrize(
    "prec,nu,x,expected",
    [
        (FLOAT64, 25.5, 1.0, True),
        (FLOAT64, 25.0, 35.0, False),
        (FLOAT64, 1.0, 35.1, True),
        (FLOAT32, 15.5, 1.0, True),
        (FLOAT32, 10.0, 20.5, True),
        (FLOAT32, 10.0, 19.0, False),
    ],
)
def test_cutoff(prec, nu, x, expected):
    assert debye_cutoff(nu, x, prec) is expected


@pytest.mark.parametrize(
    "nu,x", [(30.3, 5.0), (50.7, 100.0), (0.3, 40.0), (100.0, 1.0), (26.0, 26.0), (2.0, 300.0)]
)
def test_against_scipy(nu, x):
    npt.assert_allclose(besselk_large_orders(nu, _t(x), FLOAT64).item(), kv(nu, x), rtol=1e-12)


@pytest.mark.parametrize("nu,x", [(30.3, 500.0), (0.7, 1e4), (40.0, 36.0)])
def test_scaled_against_scipy(nu, x):
    npt.assert_allclose(besselk_large_orders_scaled(nu, _t(x), FLOAT64).item(), kve(nu, x), rtol=1e-12)


def test_scaled_huge_argument():
    x = 1e20
    out = besselk_large_orders_scaled(0.7, _t(x), FLOAT64).item()
    npt.assert_allclose(out, math.sqrt(math.pi / (2 * x)), rtol=1e-12)


def test_unscaled_underflows_to_zero():
    assert besselk_large_orders(0.7, _t(1000.0), FLOAT64).item() == 0.0


def test_float32_result_dtype():
    out = besselk_large_orders(16.5, _t(3.0, torch.float32), FLOAT32)
    assert out.dtype == torch.float32
    npt.assert_allclose(out.item(), kv(16.5, 3.0), rtol=1e-6)


def test_continuous_across_order_cutoff():
    # 25 uses the recurrence, just above it the expansion
    npt.assert_allclose(besselk(25.0, 10.0).item(), besselk(25.0 + 1e-14, 10.0).item(), rtol=1e-12)


def test_continuous_across_argument_cutoff():
    above = float(np.nextafter(35.0, 36.0))
    npt.assert_allclose(besselk(3.3, 35.0).item(), besselk(3.3, above).item(), rtol=1e-12)


def test_continuous_across_order_cutoff_float32():
    x = _t(5.0, torch.float32)
    npt.assert_allclose(besselk(15.0, x).item(), besselk(15.000001, x).item(), rtol=5e-5)
