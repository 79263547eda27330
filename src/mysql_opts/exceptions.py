"""
MySQL options exceptions.

Custom exception hierarchy for options resolution.
"""


class MySQLOptsError(Exception):
    """Base exception for all mysql_opts errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def _fields(self) -> tuple[object, ...]:
        return (self.message,)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._fields()))


class ConfigurationError(MySQLOptsError):
    """Raised when options cannot be loaded from the environment."""

    pass


class UrlError(MySQLOptsError, ValueError):
    """Base class for connection URL errors."""

    pass


class UrlParseError(UrlError):
    """Raised when the URL itself is malformed (e.g. a non-numeric port)."""

    pass


class UnsupportedSchemeError(UrlError):
    """Raised when the URL scheme is not ``mysql``."""

    def __init__(self, scheme: str):
        self.scheme = scheme
        super().__init__(f"URL scheme `{scheme}' is not supported")

    def _fields(self) -> tuple[object, ...]:
        return (self.scheme,)


class InvalidUrlError(UrlError):
    """Raised when the URL has no host or is not hierarchical."""

    def __init__(self, message: str = "Invalid or incomplete connection URL"):
        super().__init__(message)

    def _fields(self) -> tuple[object, ...]:
        return ()


class UnknownParameterError(UrlError):
    """Raised for a query parameter outside the recognized set."""

    def __init__(self, param: str):
        self.param = param
        super().__init__(f"Unknown connection URL parameter `{param}'")

    def _fields(self) -> tuple[object, ...]:
        return (self.param,)


class InvalidParamValueError(UrlError):
    """Raised when a recognized parameter carries a value that does not parse."""

    def __init__(self, param: str, value: str):
        self.param = param
        self.value = value
        super().__init__(f"Invalid value `{value}' for URL parameter `{param}'")

    def _fields(self) -> tuple[object, ...]:
        return (self.param, self.value)


class InvalidPoolConstraintsError(UrlError):
    """Raised when ``pool_min`` exceeds ``pool_max`` after all parameters are applied."""

    def __init__(self, min: int, max: int):
        self.min = min
        self.max = max
        super().__init__(f"Invalid pool constraints: pool_min ({min}) > pool_max ({max})")

    def _fields(self) -> tuple[object, ...]:
        return (self.min, self.max)
