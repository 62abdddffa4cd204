from .besselk import (
    BesselK,
    Regime,
    besselk,
    besselk0,
    besselk0x,
    besselk1,
    besselk1x,
    besselkx,
    select_regime,
)
from .errors import DomainError, UnsupportedError
from .precision import FLOAT32, FLOAT64, Precision, precision_for

__version__ = "0.1.0"

__all__ = [
    "BesselK",
    "DomainError",
    "FLOAT32",
    "FLOAT64",
    "Precision",
    "Regime",
    "UnsupportedError",
    "besselk",
    "besselk0",
    "besselk0x",
    "besselk1",
    "besselk1x",
    "besselkx",
    "precision_for",
    "select_regime",
]
