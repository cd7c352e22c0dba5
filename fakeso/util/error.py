"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings are inconsistent or incomplete."""

    pass


class DependencyInjectionError(UtilError):
    """No provider implementation matches the requested variant."""

    pass
