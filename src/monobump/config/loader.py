"""Load monobump.yaml from a workspace root."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from monobump.config.schema import ReleaseConfig
from monobump.errors import ConfigurationError

CONFIG_FILENAME = "monobump.yaml"


def load_config(root: Path) -> ReleaseConfig:
    """Load the release configuration for a workspace.

    A missing config file is not an error: defaults are used.

    Args:
        root: Workspace root directory.

    Returns:
        Parsed configuration.

    Raises:
        ConfigurationError: If the file is not valid YAML or does not match the schema.
    """
    path = root / CONFIG_FILENAME
    if not path.is_file():
        return ReleaseConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML: {e}", path=path) from e

    if data is None:
        return ReleaseConfig()
    if not isinstance(data, dict):
        raise ConfigurationError("Expected a mapping at the top level", path=path)

    try:
        return ReleaseConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", path=path) from e
