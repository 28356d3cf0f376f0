"""Configuration adapters."""

from which_platform.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
