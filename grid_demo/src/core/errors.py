"""Grid-specific exceptions."""


class GridError(Exception):
    """Base grid error."""


class InvalidArgumentError(GridError, ValueError):
    """Raised when an operation receives an invalid argument such as an inverted range."""


class InvalidStateError(GridError, RuntimeError):
    """Raised when a grid is queried in a state that cannot answer."""
