"""Configuration module for bravesearch."""

from bravesearch.config.loader import get_config_path, load_config
from bravesearch.config.schema import Config

__all__ = ["Config", "load_config", "get_config_path"]
