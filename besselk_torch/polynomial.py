import torch


def horner(p, x: torch.Tensor) -> torch.Tensor:
    """Evaluate sum_i p[i] * x**i (coefficients low-to-high degree)."""
    y = torch.zeros_like(x)
    for c in reversed(p):
        y = y * x + x.new_tensor(c)
    return y
