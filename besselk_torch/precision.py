"""
Per-width numeric configuration.

Every cutoff, tolerance and coefficient table that depends on the floating
point width lives in one ``Precision`` record. The record is chosen once from
the dtype of the argument and handed to every routine explicitly.
"""
from dataclasses import dataclass

import torch

from . import coefficients as coef
from .errors import UnsupportedError
from .upolynomials import U_POLYNOMIALS, U_POLYNOMIALS_F32


@dataclass(frozen=True)
class Precision:
    """
    Numeric settings of one floating point width.

    Attributes
    ----------
    name : str
    dtype : torch.dtype
        Working dtype of the kernels, recurrence, paired I series and
        continued fraction. The K power series and the Debye expansion are
        always evaluated in float64 and rounded to ``dtype``.
    eps : float
        Termination tolerance of every series / continued fraction.
    lentz_tiny : float
        Regulariser that replaces zero in the first Lentz step.
    debye_order, debye_argument : float
        Uniform asymptotic expansion is used when nu > debye_order or
        x > debye_argument.
    series_argument, series_slope, series_offset : float
        K power series is used when x < series_argument or
        nu > series_slope * x - series_offset.
    """
    name: str
    dtype: torch.dtype
    eps: float
    lentz_tiny: float

    debye_order: float
    debye_argument: float
    series_argument: float
    series_slope: float
    series_offset: float

    k0_small_y: float
    k0_small_r: tuple
    k0_small_p: tuple
    k1_small_y: float
    k1_small_r: tuple
    k1_small_p: tuple
    k0_large_p: tuple
    k0_large_q: tuple
    k1_large_p: tuple
    k1_large_q: tuple

    u_polynomials: tuple


FLOAT64 = Precision(
    name="float64",
    dtype=torch.float64,
    eps=torch.finfo(torch.float64).eps,
    lentz_tiny=1e-50,
    debye_order=25.0,
    debye_argument=35.0,
    series_argument=2.0,
    series_slope=1.6,
    series_offset=1.0,
    k0_small_y=coef.K0_SMALL_Y,
    k0_small_r=coef.K0_SMALL_R,
    k0_small_p=coef.K0_SMALL_P,
    k1_small_y=coef.K1_SMALL_Y,
    k1_small_r=coef.K1_SMALL_R,
    k1_small_p=coef.K1_SMALL_P,
    k0_large_p=coef.K0_LARGE_P,
    k0_large_q=coef.K0_LARGE_Q,
    k1_large_p=coef.K1_LARGE_P,
    k1_large_q=coef.K1_LARGE_Q,
    u_polynomials=U_POLYNOMIALS,
)

FLOAT32 = Precision(
    name="float32",
    dtype=torch.float32,
    eps=torch.finfo(torch.float32).eps,
    # 1e-50 flushes to zero in binary32
    lentz_tiny=1e-30,
    debye_order=15.0,
    debye_argument=20.0,
    series_argument=10.0,
    series_slope=1.65,
    series_offset=8.0,
    k0_small_y=coef.K0_SMALL_Y,
    k0_small_r=coef.K0_SMALL_R_F32,
    k0_small_p=coef.K0_SMALL_P_F32,
    k1_small_y=coef.K1_SMALL_Y,
    k1_small_r=coef.K1_SMALL_R_F32,
    k1_small_p=coef.K1_SMALL_P_F32,
    k0_large_p=coef.K0_LARGE_P,
    k0_large_q=coef.K0_LARGE_Q,
    k1_large_p=coef.K1_LARGE_P,
    k1_large_q=coef.K1_LARGE_Q,
    u_polynomials=U_POLYNOMIALS_F32,
)

# served by promoting to float32 and demoting the result
NARROW_DTYPES = (torch.float16, torch.bfloat16)


def precision_for(dtype: torch.dtype) -> Precision:
    if dtype == torch.float64:
        return FLOAT64
    if dtype == torch.float32 or dtype in NARROW_DTYPES:
        return FLOAT32
    raise TypeError(f"unsupported dtype {dtype}; expected a real floating point dtype")


def as_scalar(value, name: str = "x") -> torch.Tensor:
    """
    Python numbers become float64 0-d tensors; one-element tensors are reshaped
    to 0-d, integer tensors promoted to float64.
    """
    if not isinstance(value, torch.Tensor):
        if isinstance(value, complex):
            raise UnsupportedError(value, f"`{name}` must be real")
        return torch.tensor(float(value), dtype=torch.float64)
    if value.numel() != 1:
        raise ValueError(f"`{name}` must be a scalar, got shape {tuple(value.shape)}")
    if value.is_complex():
        raise UnsupportedError(value.item(), f"`{name}` must be real")
    value = value.reshape(())
    if not value.is_floating_point():
        value = value.to(torch.float64)
    return value


def as_order(nu) -> float:
    return as_scalar(nu, name="nu").item()
