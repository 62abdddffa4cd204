import logging

import numpy.testing as npt
import pytest
import torch
from scipy.special import iv, kv

from besselk_torch import FLOAT32, FLOAT64
from besselk_torch.series import (
    MAX_ITER,
    PAIRED_MAX_ITER,
    besseli_power_series_inu_inum1,
    besselk_power_series,
    power_series_cutoff,
)


def _t(x, dtype=torch.float64):
    return torch.tensor(x, dtype=dtype)


@pytest.mark.parametrize(
    "prec,nu,x,expected",
    [
        (FLOAT64, 0.3, 1.0, True),
        (FLOAT64, 0.3, 5.0, False),
        (FLOAT64, 10.3, 5.0, True),
        (FLOAT32, 0.3, 9.0, True),
        (FLOAT32, 0.3, 12.0, False),
        (FLOAT32, 12.3, 12.0, True),
    ],
)
def test_cutoff(prec, nu, x, expected):
    assert power_series_cutoff(nu, x, prec) is expected


@pytest.mark.parametrize("x", [0.01, 0.5, 1.5])
@pytest.mark.parametrize("nu", [0.3, 1.7, 4.2, 10.6, 24.9])
def test_k_series_against_scipy(nu, x):
    npt.assert_allclose(besselk_power_series(nu, _t(x), FLOAT64).item(), kv(nu, x), rtol=1e-13)


@pytest.mark.parametrize("nu,x", [(12.5, 5.0), (18.3, 9.0)])
def test_k_series_large_order(nu, x):
    npt.assert_allclose(besselk_power_series(nu, _t(x), FLOAT64).item(), kv(nu, x), rtol=1e-12)


def test_k_series_float32():
    out = besselk_power_series(1.3, _t(1.0, torch.float32), FLOAT32)
    assert out.dtype == torch.float32
    npt.assert_allclose(out.item(), kv(1.3, 1.0), rtol=1e-6)


@pytest.mark.parametrize("x", [0.5, 3.0, 20.0])
@pytest.mark.parametrize("nu", [0.4, 1.3, 7.8])
def test_paired_i_series(nu, x):
    inu, inum1 = besseli_power_series_inu_inum1(nu, _t(x), FLOAT64)
    npt.assert_allclose(inu.item(), iv(nu, x), rtol=1e-13)
    npt.assert_allclose(inum1.item(), iv(nu - 1, x), rtol=1e-13)


def test_k_series_returns_partial_sum_at_iteration_cap(caplog):
    with caplog.at_level(logging.DEBUG, logger="besselk_torch.series"):
        out = besselk_power_series(0.3, _t(2000.0), FLOAT64)
    assert MAX_ITER == 1000
    assert out.shape == () and out.dtype == torch.float64
    assert f"K power series not converged after {MAX_ITER} terms" in caplog.text


def test_paired_series_returns_partial_sums_at_iteration_cap(caplog):
    with caplog.at_level(logging.DEBUG, logger="besselk_torch.series"):
        inu, inum1 = besseli_power_series_inu_inum1(0.3, _t(5000.0), FLOAT64)
    assert PAIRED_MAX_ITER == 3000
    assert inu.dtype == inum1.dtype == torch.float64
    assert f"paired I series not converged after {PAIRED_MAX_ITER} terms" in caplog.text
