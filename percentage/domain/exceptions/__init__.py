from .base import DomainException
from .percentage import InvalidArgumentError, InvalidStateError

__all__ = [
    "DomainException",
    "InvalidArgumentError",
    "InvalidStateError",
]
