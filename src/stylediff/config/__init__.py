"""Configuration management."""

from stylediff.config.loader import load_config
from stylediff.config.settings import Settings

__all__ = ["Settings", "load_config"]
