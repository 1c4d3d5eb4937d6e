"""Custom exceptions for Applecast."""

from pathlib import Path


class ApplecastError(Exception):
    """Base exception for all Applecast errors."""

    pass


class InvalidInputError(ApplecastError):
    """Input failed validation before any I/O was attempted."""

    pass


class ConfigError(ApplecastError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class FetchError(ApplecastError):
    """Fetching a remote resource failed."""

    pass


class NetworkError(FetchError):
    """Transport-level failure (DNS, connection, timeout)."""

    pass


class HttpStatusError(FetchError):
    """Server answered with a non-success status code."""

    def __init__(self, status_code: int, url: str = "", reason: str = "") -> None:
        self.status_code = status_code
        self.url = url
        self.reason = reason
        message = f"HTTP request failed with status: {status_code}"
        if reason:
            message += f" {reason}"
        super().__init__(message)


class WriteError(ApplecastError):
    """Persisting an artifact to disk failed."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)
