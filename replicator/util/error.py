"""Errors raised while wiring the application together."""


class UtilError(Exception):
    """Base error for configuration and wiring problems."""


class ConfigurationError(UtilError):
    """A setting required by the selected environment is missing or unsafe."""


class DependencyInjectionError(UtilError):
    """No provider implementation matches the requested component."""
