"""
Power series for K_nu(x) (non-integer nu) and a paired series producing
I_nu(x) and I_{nu-1}(x) in one pass.

The K series is the form of Eq. 3.2 in Geoga et al., "Fitting Matern smoothness
parameters using automatic differentiation" (2022), with the gamma factors
carried from term to term instead of re-evaluated. It is accurate for small x
or nu > x and singular at integer nu; callers must not use it there.
"""
import logging
import math

import torch
from scipy.special import gamma

from .precision import Precision

logger = logging.getLogger(__name__)

MAX_ITER = 1000
PAIRED_MAX_ITER = 3000


def power_series_cutoff(nu: float, x: float, prec: Precision) -> bool:
    return x < prec.series_argument or nu > prec.series_slope * x - prec.series_offset


def _sinpi(v: float) -> float:
    return math.sin(math.pi * math.fmod(v, 2.0))


def besselk_power_series(v: float, x: torch.Tensor, prec: Precision) -> torch.Tensor:
    """
    K_v(x) for non-integer v > 0. Evaluated in float64, rounded to ``prec.dtype``.
    Returns the partial sum if MAX_ITER terms do not reach ``prec.eps``.

    The two halves of the sum nearly cancel when v is close to an integer and
    accuracy is lost there. Below x = 2 the dispatcher still routes such orders
    here: besselk(1e-6, 1.9) is only good to about 1e-3.
    """
    x = x.to(torch.float64)
    z = x / 2
    zz = z * z
    xd2_v = torch.exp(v * torch.log(z))
    xd2_nv = 1 / xd2_v

    # gamma(-v) from the reflection formula, gamma(1+v) = v gamma(v)
    gam_v = float(gamma(v))
    gam_nv = math.pi / (_sinpi(v + 1) * gam_v * v)
    gam_1mv = -gam_nv * v
    gam_1mnv = gam_v * v

    _t1 = gam_v * xd2_nv * gam_1mv
    _t2 = gam_nv * xd2_v * gam_1mnv
    xd2_pow = torch.ones_like(x)
    fact_k = 1.0
    out = torch.zeros_like(x)
    for k in range(MAX_ITER + 1):
        tmp = (_t1 * gam_1mnv + _t2 * gam_1mv) / (gam_1mv * gam_1mnv * fact_k)
        term = xd2_pow * 0.5 * tmp
        out = out + term
        if abs(term / out) < prec.eps:
            break
        gam_1mnv *= 1 + v + k
        gam_1mv *= 1 - v + k
        xd2_pow = xd2_pow * zz
        fact_k *= k + 1
    else:
        logger.debug("K power series not converged after %d terms (nu=%s)", MAX_ITER, v)
    return out.to(prec.dtype)


def besseli_power_series_inu_inum1(v: float, x: torch.Tensor, prec: Precision):
    """
    (I_v(x), I_{v-1}(x)) from one loop: both series share the powers of x/2 and
    differ only in the leading gamma factor and the denominator recurrence.
    """
    x2 = x / 2
    xs = x2 ** v
    gmx = xs / float(gamma(v))
    a = gmx / v
    b = gmx / x2
    t2 = x2 * x2
    out = torch.zeros_like(x)
    out2 = torch.zeros_like(x)
    for i in range(PAIRED_MAX_ITER + 1):
        out = out + a
        out2 = out2 + b
        if abs(a) < prec.eps * abs(out):
            break
        a = a * t2 / ((v + i + 1) * (i + 1))
        b = b * t2 / ((v + i) * (i + 1))
    else:
        logger.debug("paired I series not converged after %d terms (nu=%s)", PAIRED_MAX_ITER, v)
    return out, out2
