# core/exceptions.py

"""
Exception types raised inside the models and storage layers.

`StudentRegistry` catches these at its boundary and converts them into
structured `Response` objects, so the terminal menus never see them directly.
"""


class ValidationError(ValueError):
    """Raised when a form field fails its format rule."""


class PersistenceError(OSError):
    """Raised when the backing key-value store cannot be read or written."""
