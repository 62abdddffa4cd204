class DomainError(ValueError):
    """Argument outside the domain where the function is defined."""

    def __init__(self, value, message: str):
        super().__init__(f"{message} (got {value!r})")
        self.value = value


class UnsupportedError(DomainError):
    """
    The mathematically valid result is complex valued (negative argument or
    negative order); only real results are implemented.
    """
