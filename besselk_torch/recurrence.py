"""
Upward recurrence for K and the half-integer (spherical) reduction.

    K_{nu+1}(x) = (2 nu / x) K_nu(x) + K_{nu-1}(x)

Forward recurrence is stable for K, which grows with the order. The companion
family I decays with the order and must be recurred downward instead.
"""
import math

import torch

HALF_PI = math.pi / 2


def besselk_up_recurrence(x: torch.Tensor, k_nu, k_num1, nu_start, nu_end):
    """
    Given K_{nu_start} and K_{nu_start - 1}, return (K_{nu_end}, K_{nu_end - 1}).
    nu_end - nu_start must be a non-negative integer; that many steps are taken.
    """
    x2 = 2 / x
    for _ in range(round(nu_end - nu_start)):
        k_nu, k_num1 = k_nu * (nu_start * x2) + k_num1, k_nu
        nu_start += 1
    return k_nu, k_num1


def _half_integer_up(n: int, x: torch.Tensor, seed: torch.Tensor) -> torch.Tensor:
    # seed is order 1/2 of a family with f_{3/2} = f_{1/2} (1 + 1/x)
    if n == 0:
        return seed
    return besselk_up_recurrence(x, seed * (1 + 1 / x), seed, 1.5, n + 0.5)[0]


def besselk_half_integer(n: int, x: torch.Tensor, scaled: bool = False) -> torch.Tensor:
    """
    K_{n+1/2}(x) seeded with K_{1/2}(x) = sqrt(pi / (2x)) e^{-x}.

    ``scaled=True`` returns K_{n+1/2}(x) e^x without forming e^{-x}.
    """
    k_half = torch.sqrt(HALF_PI / x)
    if not scaled:
        k_half = k_half * torch.exp(-x)
    return _half_integer_up(n, x, k_half)


def spherical_besselk(n: int, x: torch.Tensor, scaled: bool = False) -> torch.Tensor:
    """
    Modified spherical Bessel function of the second kind (DLMF 10.47.9)

        k_n(x) = sqrt(pi / (2x)) K_{n+1/2}(x),   k_0(x) = (pi/2) e^{-x} / x

    ``scaled=True`` returns k_n(x) e^x without forming e^{-x}.
    """
    k0 = HALF_PI / x
    if not scaled:
        k0 = k0 * torch.exp(-x)
    return _half_integer_up(n, x, k0)
