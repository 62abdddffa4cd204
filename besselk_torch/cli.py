"""Accuracy report of besselk / besselkx against scipy.special.kv / kve."""
import logging

import click
import numpy as np
import torch
from scipy.special import kv, kve

from .besselk import besselk, besselkx

logger = logging.getLogger(__name__)

DTYPES = {"float64": torch.float64, "float32": torch.float32}


def parse_orders(raw: str) -> list:
    try:
        return [float(item) for item in raw.split(",") if item.strip()]
    except ValueError as exc:
        raise click.BadParameter(f"expected comma separated numbers, got {raw!r}") from exc


def max_relative_error(nu: float, xs: np.ndarray, dtype: torch.dtype, scaled: bool = False) -> float:
    """
    Largest |f - ref| / |ref| over ``xs``, skipping points where the float64
    reference is zero, infinite or outside the normal range of ``dtype``.
    """
    f, ref_f = (besselkx, kve) if scaled else (besselk, kv)
    ref = ref_f(nu, xs)
    finfo = torch.finfo(dtype)
    mask = np.isfinite(ref) & (np.abs(ref) > finfo.tiny) & (np.abs(ref) < finfo.max)
    if not mask.any():
        logger.info("no representable reference values for nu=%s", nu)
        return float("nan")
    got = np.array([f(nu, torch.tensor(x, dtype=dtype)).item() for x in xs[mask]])
    return float(np.max(np.abs((got - ref[mask]) / ref[mask])))


def _format_order(nu: float) -> str:
    return f"{int(nu):d}" if nu.is_integer() else f"{nu:g}"


@click.command()
@click.option("--dtype", type=click.Choice(sorted(DTYPES)), default="float64", show_default=True)
@click.option("--xmin", type=click.FloatRange(min=0.0, min_open=True), default=0.01, show_default=True)
@click.option("--xmax", type=click.FloatRange(min=0.0, min_open=True), default=1e2, show_default=True)
@click.option("--points", type=click.IntRange(min=1), default=1000, show_default=True)
@click.option(
    "--orders",
    type=str,
    default="0,1,2,3,4,5,6,7,8,9",
    show_default=True,
    help="Comma separated non-negative orders.",
)
@click.option("--scaled", is_flag=True, help="Check K_nu(x) e^x instead of K_nu(x).")
@click.option("-v", "--verbose", is_flag=True, help="Log the regime chosen for every evaluation.")
def main(dtype: str, xmin: float, xmax: float, points: int, orders: str, scaled: bool, verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    if xmax < xmin:
        raise click.BadParameter("--xmax must not be smaller than --xmin")

    xs = np.linspace(xmin, xmax, points)
    name = "Kx" if scaled else "K"
    for nu in parse_orders(orders):
        if nu < 0:
            raise click.BadParameter(f"orders must be non-negative, got {nu}")
        error = max_relative_error(nu, xs, DTYPES[dtype], scaled=scaled)
        click.echo("{}{}, max relative error: {:.8e}".format(name, _format_order(nu), error))


if __name__ == "__main__":
    main()
