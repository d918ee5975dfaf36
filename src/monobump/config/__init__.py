"""Configuration loading and schema."""

from monobump.config.loader import CONFIG_FILENAME, load_config
from monobump.config.schema import ReleaseConfig

__all__ = ["CONFIG_FILENAME", "ReleaseConfig", "load_config"]
