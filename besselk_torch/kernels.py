"""
Modified Bessel functions of the second kind of order zero and one,
K0(x), K1(x), and their scaled forms K0(x) e^x, K1(x) e^x, for x > 0.

Two branches:
  * x <= 1: K0 = -log(x) I0(x) + P(x^2),  K1 = 1/x + log(x) I1(x) + x P(x^2)
  * x > 1:  x^{1/2} e^x K(x) ~ P(1/x) / Q(1/x)

For x > 1 the factor e^{-x} is applied as exp(-x/2) twice, so the result does
not underflow before the true K(x) does. The scaled forms drop it analytically.
"""
import torch

from .errors import DomainError
from .polynomial import horner
from .precision import Precision


def _check_positive(x: torch.Tensor):
    if x <= 0:
        raise DomainError(x.item(), "`x` must be positive")


# -------- x <= 1 --------
def _k0_small(x: torch.Tensor, prec: Precision) -> torch.Tensor:
    a = x * x / 4
    i0 = 1 + a * (prec.k0_small_y + a * horner(prec.k0_small_r, a))
    return horner(prec.k0_small_p, x * x) - i0 * torch.log(x)


def _k1_small(x: torch.Tensor, prec: Precision) -> torch.Tensor:
    a = x * x / 4
    i1 = x / 2 * (1 + a / 2 + a * a * (prec.k1_small_y + a * horner(prec.k1_small_r, a)))
    return 1 / x + i1 * torch.log(x) + x * horner(prec.k1_small_p, x * x)


# -------- x > 1 --------
def _rational(p, q, x: torch.Tensor) -> torch.Tensor:
    u = 1 / x
    return horner(p, u) / horner(q, u)


def besselk0(x: torch.Tensor, prec: Precision) -> torch.Tensor:
    _check_positive(x)
    if x <= 1:
        return _k0_small(x, prec)
    s = torch.exp(-x / 2)
    a = _rational(prec.k0_large_p, prec.k0_large_q, x) * s / torch.sqrt(x)
    return a * s


def besselk0x(x: torch.Tensor, prec: Precision) -> torch.Tensor:
    _check_positive(x)
    if x <= 1:
        return _k0_small(x, prec) * torch.exp(x)
    return _rational(prec.k0_large_p, prec.k0_large_q, x) / torch.sqrt(x)


def besselk1(x: torch.Tensor, prec: Precision) -> torch.Tensor:
    _check_positive(x)
    if x <= 1:
        return _k1_small(x, prec)
    s = torch.exp(-x / 2)
    a = _rational(prec.k1_large_p, prec.k1_large_q, x) * s / torch.sqrt(x)
    return a * s


def besselk1x(x: torch.Tensor, prec: Precision) -> torch.Tensor:
    _check_positive(x)
    if x <= 1:
        return _k1_small(x, prec) * torch.exp(x)
    return _rational(prec.k1_large_p, prec.k1_large_q, x) / torch.sqrt(x)
