def test_public_imports() -> None:
    # A lightweight contract test: keep the most common imports stable.
    import besselk_torch

    assert hasattr(besselk_torch, "__version__")

    from besselk_torch import BesselK, besselk, besselkx  # noqa: F401
    from besselk_torch import DomainError, UnsupportedError

    assert issubclass(UnsupportedError, DomainError)
    assert issubclass(DomainError, ValueError)
