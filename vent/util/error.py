"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass
