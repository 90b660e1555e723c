"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class DependencyInjectionError(UtilError):
    """No provider implementation matches the requested component."""

    pass
