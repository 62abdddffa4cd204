import math

import numpy as np
import numpy.testing as npt
import pytest
import torch
from scipy.special import k0, k0e, k1, k1e

from besselk_torch import DomainError, FLOAT64, besselk0, besselk0x, besselk1, besselk1x
from besselk_torch import kernels

SMALL = np.geomspace(1e-6, 1.0, 40)
LARGE = np.linspace(1.0, 600.0, 80)[1:]


def _eval(f, xs, dtype=torch.float64):
    return np.array([f(torch.tensor(x, dtype=dtype)).item() for x in xs])


def test_known_values():
    npt.assert_allclose(besselk0(1.0).item(), 0.4210244382407083, rtol=1e-14)
    npt.assert_allclose(besselk1(1.0).item(), 0.6019072301972346, rtol=1e-14)


@pytest.mark.parametrize("f,ref", [(besselk0, k0), (besselk1, k1)])
@pytest.mark.parametrize("xs", [SMALL, LARGE], ids=["small", "large"])
def test_against_scipy_float64(f, ref, xs):
    npt.assert_allclose(_eval(f, xs), ref(xs), rtol=1e-13)


@pytest.mark.parametrize("f,ref", [(besselk0x, k0e), (besselk1x, k1e)])
def test_scaled_against_scipy(f, ref):
    xs = np.concatenate([SMALL, LARGE, [1e3, 1e4, 1e6]])
    npt.assert_allclose(_eval(f, xs), ref(xs), rtol=1e-13)


@pytest.mark.parametrize("f,ref", [(besselk0, k0), (besselk1, k1), (besselk0x, k0e), (besselk1x, k1e)])
def test_float32(f, ref):
    xs = np.concatenate([np.geomspace(1e-3, 1.0, 20), np.linspace(1.5, 80.0, 40)]).astype(np.float32)
    got = np.array([f(torch.tensor(x)).item() for x in xs])
    assert f(torch.tensor(xs[0])).dtype == torch.float32
    npt.assert_allclose(got, ref(xs.astype(np.float64)), rtol=1e-5)


@pytest.mark.parametrize("f", [besselk0, besselk1])
def test_positive_and_decreasing(f):
    values = _eval(f, np.geomspace(1e-3, 50.0, 200))
    assert np.all(values > 0)
    assert np.all(np.diff(values) < 0)


@pytest.mark.parametrize("f", [besselk0, besselk1, besselk0x, besselk1x])
def test_continuous_at_branch_point(f):
    below = f(float(np.nextafter(1.0, 0.0))).item()
    above = f(float(np.nextafter(1.0, 2.0))).item()
    npt.assert_allclose(below, above, rtol=1e-14)


@pytest.mark.parametrize("scaled,unscaled", [(besselk0x, besselk0), (besselk1x, besselk1)])
def test_scaled_matches_unscaled(scaled, unscaled):
    xs = np.geomspace(1e-4, 300.0, 60)
    npt.assert_allclose(_eval(scaled, xs), _eval(unscaled, xs) * np.exp(xs), rtol=1e-13)


@pytest.mark.parametrize("f", [besselk0, besselk1, besselk0x, besselk1x])
@pytest.mark.parametrize("x", [0.0, -1.0])
def test_domain_error(f, x):
    with pytest.raises(DomainError):
        f(x)


def test_domain_error_is_value_error():
    with pytest.raises(ValueError, match="must be positive"):
        kernels.besselk0(torch.tensor(0.0, dtype=torch.float64), FLOAT64)


def test_infinity_and_underflow():
    assert besselk0(math.inf).item() == 0.0
    assert besselk1x(math.inf).item() == 0.0
    # e^-800 underflows, the scaled form does not
    assert besselk0(800.0).item() == 0.0
    npt.assert_allclose(besselk0x(800.0).item(), k0e(800.0), rtol=1e-13)


def test_nan_propagates():
    assert math.isnan(besselk0(math.nan).item())
    assert math.isnan(besselk1x(math.nan).item())


def test_float16_is_demoted():
    out = besselk0(torch.tensor(0.5, dtype=torch.float16))
    assert out.dtype == torch.float16
    npt.assert_allclose(out.item(), k0(0.5), rtol=2e-3)
