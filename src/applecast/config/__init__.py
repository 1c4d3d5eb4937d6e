"""Configuration for Applecast runs."""

from applecast.config.manager import load_config
from applecast.config.schema import AcquisitionConfig

__all__ = ["AcquisitionConfig", "load_config"]
