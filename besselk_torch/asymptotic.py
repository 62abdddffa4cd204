"""
Uniform (Debye) asymptotic expansion of K_nu(x) for large nu and/or large x
(DLMF 10.41.4, A&S 9.7.8):

    K_nu(nu z) ~ sqrt(pi / (2 nu)) exp(-nu eta) / sqrt(zs) * sum_k (-1)^k U_k(p) / nu^k

    zs = sqrt(1 + z^2),  eta = zs + log(z) - log(1 + zs),  p = 1 / zs

Everything is written in terms of h = nu zs = hypot(nu, x) so that neither a
tiny order nor a huge argument loses precision:

    nu eta          = h - nu log1p((1 + nu / (h + x)) nu / x)
    x - nu eta      = -nu^2 / (h + x) + nu log1p((1 + nu / (h + x)) nu / x)
    U_k(p) / nu^k   = h^-k V_k(p^2)         (U_k(p) = p^k V_k(p^2))
"""
import logging
import math

import torch

from .polynomial import horner
from .precision import Precision

logger = logging.getLogger(__name__)

SQRT_PI_OVER_2 = math.sqrt(math.pi / 2)


def debye_cutoff(nu: float, x: float, prec: Precision) -> bool:
    return nu > prec.debye_order or x > prec.debye_argument


def _uk_sum(v: float, h: torch.Tensor, prec: Precision) -> torch.Tensor:
    # stops at the first term below eps relative to the sum, or at the end of the table
    p2 = (v / h) ** 2
    hinv = 1 / h
    hk = torch.ones_like(h)
    out = torch.zeros_like(h)
    for k, poly in enumerate(prec.u_polynomials):
        term = hk * horner(poly, p2)
        if k % 2:
            term = -term
        out = out + term
        if k > 0 and abs(term) < prec.eps * abs(out):
            break
        hk = hk * hinv
    else:
        logger.debug("Debye sum used all %d correction terms (nu=%s)", len(prec.u_polynomials), v)
    return out


def _debye(v: float, x: torch.Tensor, prec: Precision, scaled: bool) -> torch.Tensor:
    x = x.to(torch.float64)
    h = torch.hypot(x.new_tensor(v), x)
    t = v * torch.log1p((1 + v / (h + x)) * v / x)
    if scaled:
        exponent = t - v * v / (h + x)
    else:
        exponent = t - h
    coef = SQRT_PI_OVER_2 * torch.exp(exponent) / torch.sqrt(h)
    return (coef * _uk_sum(v, h, prec)).to(prec.dtype)


def besselk_large_orders(v: float, x: torch.Tensor, prec: Precision) -> torch.Tensor:
    """K_v(x) for v or x beyond the Debye cutoff."""
    return _debye(v, x, prec, scaled=False)


def besselk_large_orders_scaled(v: float, x: torch.Tensor, prec: Precision) -> torch.Tensor:
    """K_v(x) e^x; the e^x is folded into the exponent."""
    return _debye(v, x, prec, scaled=True)
