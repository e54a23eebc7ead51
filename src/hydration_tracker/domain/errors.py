"""Errors raised by storage adapters."""


class StorageError(RuntimeError):
    """Raised when the underlying store fails a read or write."""
