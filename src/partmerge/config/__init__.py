"""Configuration loading for partmerge."""

from partmerge.config.loader import load_settings
from partmerge.config.settings import MergeSettings

__all__ = ["MergeSettings", "load_settings"]
