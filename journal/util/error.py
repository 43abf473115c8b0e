"""Utility layer errors."""


class UtilError(Exception):
    """Base error for configuration and wiring problems."""

    pass


class ConfigurationError(UtilError):
    """Settings cannot be used as given, e.g. placeholder secrets in production."""

    pass


class DependencyInjectionError(UtilError):
    """No provider implementation matches the requested component."""

    pass
