"""Custom exceptions for md2html."""


class Md2htmlError(Exception):
    """Base exception for md2html operations."""


class InputError(Md2htmlError):
    """Source text has an unsupported type or cannot be decoded."""
