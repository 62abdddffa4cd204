"""
Modified Bessel function of the second kind K_nu(x) and its scaled form
K_nu(x) e^x for real nu >= 0 and x >= 0.

No single method is accurate over the whole (nu, x) plane. ``select_regime``
picks one, checking in this order (several regions overlap, first match wins):

    1. x == 0                         -> +inf
    2. x == +inf                      -> 0
    3. nu == 0                        -> K0 kernel
    4. nu half-integer, not Debye     -> recurrence from K_{1/2}
    5. Debye cutoff                   -> uniform asymptotic expansion
    6. nu integer                     -> upward recurrence from K0, K1
    7. power series cutoff            -> K power series
    8. otherwise                      -> continued fraction + Wronskian

Negative arguments would need the reflection identity
    K_nu(-x) = exp(-i pi nu) K_nu(x) - i pi I_nu(x)
which is complex valued. Neither it nor the reflection to negative orders is
implemented; both raise ``UnsupportedError``.
"""
import enum
import logging
import math

import torch

from .asymptotic import besselk_large_orders, besselk_large_orders_scaled, debye_cutoff
from .continued_fraction import besselk_continued_fraction
from .errors import UnsupportedError
from .kernels import besselk0 as _k0, besselk0x as _k0x, besselk1 as _k1, besselk1x as _k1x
from .precision import FLOAT32, FLOAT64, Precision, as_order, as_scalar, precision_for
from .recurrence import besselk_half_integer, besselk_up_recurrence
from .series import besselk_power_series, power_series_cutoff

logger = logging.getLogger(__name__)


class Regime(enum.Enum):
    ORIGIN = "origin"
    INFINITY = "infinity"
    ORDER_ZERO = "order_zero"
    HALF_INTEGER = "half_integer"
    DEBYE = "debye"
    RECURRENCE = "recurrence"
    POWER_SERIES = "power_series"
    CONTINUED_FRACTION = "continued_fraction"


def select_regime(nu: float, x: float, prec: Precision) -> Regime:
    """Method used for K_nu(x) (and K_nu(x) e^x) with nu, x >= 0."""
    nu = float(nu)
    if x == 0:
        return Regime.ORIGIN
    if math.isinf(x):
        return Regime.INFINITY
    if nu == 0:
        return Regime.ORDER_ZERO
    debye = debye_cutoff(nu, x, prec)
    if (nu - 0.5).is_integer() and not debye:
        return Regime.HALF_INTEGER
    if debye:
        return Regime.DEBYE
    if nu.is_integer():
        return Regime.RECURRENCE
    if power_series_cutoff(nu, x, prec):
        return Regime.POWER_SERIES
    return Regime.CONTINUED_FRACTION


def _check_args(nu: float, x: torch.Tensor):
    if nu < 0:
        raise UnsupportedError(nu, "negative orders are not supported")
    if x < 0:
        raise UnsupportedError(
            x.item(), "complex result returned for real arguments; complex arguments are not supported"
        )


def _besselk(nu: float, x: torch.Tensor, prec: Precision) -> torch.Tensor:
    regime = select_regime(nu, x.item(), prec)
    logger.debug("K_%s(%s) in %s via %s", nu, x.item(), prec.name, regime.value)

    if regime is Regime.ORIGIN:
        return torch.full_like(x, math.inf)
    if regime is Regime.INFINITY:
        return torch.zeros_like(x)
    if regime is Regime.ORDER_ZERO:
        return _k0(x, prec)
    if regime is Regime.HALF_INTEGER:
        return besselk_half_integer(int(nu - 0.5), x)
    if regime is Regime.DEBYE:
        return besselk_large_orders(nu, x, prec)
    if regime is Regime.RECURRENCE:
        return besselk_up_recurrence(x, _k1(x, prec), _k0(x, prec), 1, int(nu))[0]
    if regime is Regime.POWER_SERIES:
        return besselk_power_series(nu, x, prec)
    return besselk_continued_fraction(nu, x, prec)


def _besselkx(nu: float, x: torch.Tensor, prec: Precision) -> torch.Tensor:
    regime = select_regime(nu, x.item(), prec)
    logger.debug("K_%s(%s) e^x in %s via %s", nu, x.item(), prec.name, regime.value)

    if regime is Regime.ORIGIN:
        return torch.full_like(x, math.inf)
    if regime is Regime.INFINITY:
        return torch.zeros_like(x)
    if regime is Regime.ORDER_ZERO:
        return _k0x(x, prec)
    if regime is Regime.HALF_INTEGER:
        return besselk_half_integer(int(nu - 0.5), x, scaled=True)
    if regime is Regime.DEBYE:
        return besselk_large_orders_scaled(nu, x, prec)
    if regime is Regime.RECURRENCE:
        return besselk_up_recurrence(x, _k1x(x, prec), _k0x(x, prec), 1, int(nu))[0]
    # both results are of moderate size below their cutoffs
    if regime is Regime.POWER_SERIES:
        return besselk_power_series(nu, x, prec) * torch.exp(x)
    return besselk_continued_fraction(nu, x, prec) * torch.exp(x)


class BesselK:
    """
    Modified Bessel functions of the second kind in one working precision:
      - k0(x), k1(x) and the scaled k0x(x) = k0(x) e^x, k1x(x) = k1(x) e^x
      - kv(nu, x) for real nu >= 0, kve(nu, x) = kv(nu, x) e^x
      - kn(n, x) for integer n >= 0

    Parameters
    ----------
    dtype : torch.dtype
        torch.float64 or torch.float32. float16 / bfloat16 select the float32
        engine; the module level functions demote the result again.

    Notes
    -----
    * Arguments are Python numbers or one-element tensors and are cast to the
      engine dtype; results are 0-d tensors of that dtype.
    * k0, k1, k0x, k1x require x > 0 and raise ``DomainError`` otherwise.
    * kv, kve accept x >= 0; kv(nu, 0) = +inf and kv(nu, +inf) = 0.
      Negative x or nu raise ``UnsupportedError``. NaN propagates.
    """

    def __init__(self, dtype: torch.dtype = torch.float64):
        self.precision = precision_for(dtype)

    def _cast(self, x) -> torch.Tensor:
        return as_scalar(x).to(self.precision.dtype)

    # -------- order zero and one --------
    def k0(self, x) -> torch.Tensor:
        return _k0(self._cast(x), self.precision)

    def k1(self, x) -> torch.Tensor:
        return _k1(self._cast(x), self.precision)

    def k0x(self, x) -> torch.Tensor:
        return _k0x(self._cast(x), self.precision)

    def k1x(self, x) -> torch.Tensor:
        return _k1x(self._cast(x), self.precision)

    # -------- arbitrary order --------
    def kv(self, nu, x) -> torch.Tensor:
        nu = as_order(nu)
        x = self._cast(x)
        _check_args(nu, x)
        if math.isnan(nu) or torch.isnan(x):
            return torch.full_like(x, math.nan)
        return _besselk(nu, x, self.precision)

    def kve(self, nu, x) -> torch.Tensor:
        nu = as_order(nu)
        x = self._cast(x)
        _check_args(nu, x)
        if math.isnan(nu) or torch.isnan(x):
            return torch.full_like(x, math.nan)
        return _besselkx(nu, x, self.precision)

    def kn(self, n: int, x) -> torch.Tensor:
        if int(n) != n:
            raise ValueError("n must be an integer.")
        return self.kv(int(n), x)


_ENGINES = {
    FLOAT64.name: BesselK(FLOAT64.dtype),
    FLOAT32.name: BesselK(FLOAT32.dtype),
}


def _engine_for(x):
    x = as_scalar(x)
    return _ENGINES[precision_for(x.dtype).name], x


def besselk0(x) -> torch.Tensor:
    """K0(x) for x > 0, in the dtype of ``x`` (float64 for Python numbers)."""
    engine, x = _engine_for(x)
    return engine.k0(x).to(x.dtype)


def besselk1(x) -> torch.Tensor:
    """K1(x) for x > 0."""
    engine, x = _engine_for(x)
    return engine.k1(x).to(x.dtype)


def besselk0x(x) -> torch.Tensor:
    """Scaled K0(x) e^x for x > 0."""
    engine, x = _engine_for(x)
    return engine.k0x(x).to(x.dtype)


def besselk1x(x) -> torch.Tensor:
    """Scaled K1(x) e^x for x > 0."""
    engine, x = _engine_for(x)
    return engine.k1x(x).to(x.dtype)


def besselk(nu, x) -> torch.Tensor:
    """
    Modified Bessel function of the second kind K_nu(x), nu >= 0, x >= 0.

    The working precision follows the dtype of ``x``: float64 (also for Python
    numbers), float32, or float16/bfloat16 computed in float32.
    """
    engine, x = _engine_for(x)
    return engine.kv(nu, x).to(x.dtype)


def besselkx(nu, x) -> torch.Tensor:
    """Scaled modified Bessel function of the second kind K_nu(x) e^x."""
    engine, x = _engine_for(x)
    return engine.kve(nu, x).to(x.dtype)
