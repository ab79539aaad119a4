"""Configuration for the Planets networking core."""

from .provider import ConfigProvider, EnvConfigProvider, NetworkConfig

__all__ = ["ConfigProvider", "EnvConfigProvider", "NetworkConfig"]
