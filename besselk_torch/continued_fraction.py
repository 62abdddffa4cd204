"""
K_nu(x) from the continued fraction for K_{nu+1}/K_nu (modified Lentz) and the
Wronskian I_{nu-1} K_nu + I_nu K_{nu-1} = 1/x (DLMF 10.28.2).

The continued fraction follows Cuyt et al., "Handbook of continued fractions
for special functions" (2008); it converges slowly for small x, which the
dispatcher routes to the power series instead.
"""
import logging

import torch

from .precision import Precision
from .series import besseli_power_series_inu_inum1

logger = logging.getLogger(__name__)

MAX_ITER = 1000


def besselk_ratio_knu_knup1(v: float, x: torch.Tensor, prec: Precision) -> torch.Tensor:
    """K_{v+1}(x) / K_v(x)."""
    hn = x.new_tensor(prec.lentz_tiny)
    dn = torch.zeros_like(x)
    cn = x.new_tensor(prec.lentz_tiny)
    vv = v * v
    for j in range(1, MAX_ITER + 1):
        an = vv - (2 * j - 1) ** 2 * 0.25
        bn = 2 * (x + j)
        cn = an / cn + bn
        dn = 1 / (an * dn + bn)
        delta = dn * cn
        hn = hn * delta
        if abs(delta - 1) < prec.eps:
            break
    else:
        logger.debug("K ratio continued fraction not converged after %d steps (nu=%s)", MAX_ITER, v)
    return (v + x + 0.5) / x + hn / x


def besselk_continued_fraction(v: float, x: torch.Tensor, prec: Precision) -> torch.Tensor:
    inu, inum1 = besseli_power_series_inu_inum1(v, x, prec)
    h_knu = besselk_ratio_knu_knup1(v - 1, x, prec)
    return 1 / (x * (inum1 + inu / h_knu))
