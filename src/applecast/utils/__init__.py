"""Utility functions and helpers for Applecast."""

from applecast.utils.errors import (
    ApplecastError,
    ConfigError,
    FetchError,
    HttpStatusError,
    InvalidConfigError,
    InvalidInputError,
    NetworkError,
    WriteError,
)
from applecast.utils.urls import validate_url

__all__ = [
    # Errors
    "ApplecastError",
    "InvalidInputError",
    "ConfigError",
    "InvalidConfigError",
    "FetchError",
    "NetworkError",
    "HttpStatusError",
    "WriteError",
    # URLs
    "validate_url",
]
