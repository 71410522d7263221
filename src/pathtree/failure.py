"""Structured failure value returned by tree operations on invalid arguments."""


class Failure:
    """Falsy result describing why a tree operation refused its arguments.

    Tree operations never raise for bad input. They hand back a Failure
    instead, so callers can treat every unsuccessful outcome the same way
    (``if not result``) and still inspect the reason when they need it.

    Attributes:
        operation (str): Name of the operation that refused the call.
        reason (str): Human-readable description of the problem.

    Example:
        >>> failure = Failure("add_file", "path should be a string")
        >>> bool(failure)
        False
        >>> str(failure)
        'add_file: path should be a string'
    """

    __slots__ = ("operation", "reason")

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Failure):
            return NotImplemented
        return (self.operation, self.reason) == (other.operation, other.reason)

    def __hash__(self) -> int:
        return hash((self.operation, self.reason))

    def __repr__(self) -> str:
        return f"Failure(operation={self.operation!r}, reason={self.reason!r})"

    def __str__(self) -> str:
        return f"{self.operation}: {self.reason}"
