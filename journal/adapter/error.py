"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ContentUnavailableError(AdapterError):
    """The hosted content repository could not be read."""

    pass


class ContentNotConfiguredError(AdapterError):
    """Content repository coordinates are missing from configuration."""

    pass
