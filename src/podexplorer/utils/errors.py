"""Custom exceptions for Podcast Explorer."""


class PodExplorerError(Exception):
    """Base exception for all Podcast Explorer errors.

    Args:
        message: Human-readable error message
        suggestion: Optional hint shown to the user below the message
    """

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        super().__init__(message)
        self.suggestion = suggestion


class ConfigError(PodExplorerError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class NotFoundError(PodExplorerError):
    """A requested resource (genre, season, config key) does not exist."""

    pass


class CatalogError(PodExplorerError):
    """Errors raised while fetching or reading catalog data."""

    pass


class TransportError(CatalogError):
    """Network unreachable, timed out, or non-success HTTP status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        suggestion: str | None = None,
    ) -> None:
        super().__init__(message, suggestion=suggestion)
        self.status_code = status_code


class MalformedDataError(CatalogError):
    """Payload is not valid JSON or is missing required fields."""

    pass
