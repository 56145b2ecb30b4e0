class DomainException(Exception):
    """Base exception for every error raised by the percentage domain."""

    pass
