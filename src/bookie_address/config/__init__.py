"""Configuration: JSON file loading with environment overrides."""

from bookie_address.config.config_manager import load_config

__all__ = ["load_config"]
