"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings that cannot be used as given."""

    pass


class DependencyInjectionError(UtilError):
    """Provider selection or container wiring failed."""

    pass
