"""Configuration provider following Black Box Design principles."""
import math
import os
from dataclasses import dataclass
from typing import Optional, Protocol

DEFAULT_REQUEST_TIMEOUT = 15.0
DEFAULT_RESOURCE_TIMEOUT = 20.0


@dataclass(frozen=True)
class NetworkConfig:
    """Transport configuration applied to every request."""
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    resource_timeout: float = DEFAULT_RESOURCE_TIMEOUT
    follow_redirects: bool = True

    def __post_init__(self):
        for name in ("request_timeout", "resource_timeout"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be a finite number of seconds, got {value}")
        if self.request_timeout <= 0:
            raise ValueError(f"request_timeout must be positive, got {self.request_timeout}")
        if self.resource_timeout < self.request_timeout:
            raise ValueError(
                f"resource_timeout ({self.resource_timeout}) must not be below "
                f"request_timeout ({self.request_timeout})"
            )


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_network_config(self) -> NetworkConfig:
        """Get network configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_network_config(self) -> NetworkConfig:
        """Get network configuration from environment variables."""
        return NetworkConfig(
            request_timeout=_env_float("PLANETS_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT),
            resource_timeout=_env_float("PLANETS_RESOURCE_TIMEOUT", DEFAULT_RESOURCE_TIMEOUT),
            follow_redirects=_env_bool("PLANETS_FOLLOW_REDIRECTS", True),
        )


def _env_float(name: str, default: float) -> float:
    raw: Optional[str] = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}")


def _env_bool(name: str, default: bool) -> bool:
    raw: Optional[str] = os.getenv(name)
    if raw is None or raw == "":
        return default
    value = raw.strip().lower()
    if value not in ("true", "false"):
        raise ValueError(f"{name} must be 'true' or 'false', got {raw!r}")
    return value == "true"
