# helmet/core/exceptions.py

class HelmetError(Exception):
    """Base class for every error raised by helmet."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class HelmetConfigError(HelmetError):
    """Raised at composition time when a configuration cannot be used."""
    pass


class RequestPassedAsConfigError(HelmetConfigError):
    """Raised when a request object reaches ``helmet()`` instead of a config mapping."""
    pass
