"""Exception classes for dequeset."""


class DequeSetError(Exception):
    """Base exception for all dequeset errors."""


class InvalidValueError(DequeSetError):
    """Raised when attempting to store None as a set element."""
