"""Configuration loading for Applecast."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from applecast.config.schema import AcquisitionConfig
from applecast.utils.errors import InvalidConfigError


def load_config(
    config_file: Path | None = None, **overrides: Any
) -> AcquisitionConfig:
    """Load and validate run configuration.

    Values come from the optional YAML file first; keyword overrides that
    are not None replace them.

    Args:
        config_file: Optional path to a YAML config file
        **overrides: Field values taken from the command line

    Returns:
        Validated AcquisitionConfig instance

    Raises:
        InvalidConfigError: If the file cannot be read or the values are invalid
    """
    data: dict[str, Any] = {}

    if config_file is not None:
        try:
            with open(config_file, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise InvalidConfigError(
                f"Could not read configuration from {config_file}: {e}"
            ) from e

        if not isinstance(data, dict):
            raise InvalidConfigError(
                f"Invalid configuration in {config_file}: expected a mapping"
            )

    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return AcquisitionConfig(**data)
    except ValidationError as e:
        source = config_file or "command line"
        raise InvalidConfigError(f"Invalid configuration in {source}: {e}") from e
