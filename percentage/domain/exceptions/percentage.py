from .base import DomainException


class InvalidArgumentError(DomainException, ValueError):
    """Raised when a caller-supplied argument violates a precondition."""

    def __init__(self, argument: str, reason: str):
        self.argument = argument
        self.reason = reason

        super().__init__(f'The argument "{argument}" {reason}')


class InvalidStateError(DomainException, RuntimeError):
    """Raised when an operation is meaningless for the receiver's current value."""

    pass
