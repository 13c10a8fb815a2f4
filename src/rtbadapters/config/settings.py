"""
Adapter Configuration

Loads per-exchange adapter settings from a YAML file:

    adapters:
      adoppler:
        enabled: true
        endpoint: "https://adoppler.example.com/processHeaderBid"
        timeout_ms: 200
      someexchange:
        enabled: false
        disabled_message: "someexchange is paused until further notice"

The file location defaults to config/adapters.yaml in the project root and
can be overridden with the RTB_ADAPTERS_CONFIG environment variable.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from ..exceptions import InvalidAdapterConfigError
from ..logging import config_logger
from ..utils.constants import CONFIG_PATH_ENV, DEFAULT_TIMEOUT_MS

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "adapters.yaml"

logger = config_logger()


@dataclass
class AdapterSettings:
    """
    Settings for a single exchange adapter.

    Attributes:
        bidder_code: Exchange name, as used in imp.ext and the registry
        enabled: Whether the exchange takes part in auctions
        endpoint: Exchange OpenRTB endpoint URL
        timeout_ms: Per-call timeout handed to the transport
        disabled_message: Error reported while the exchange is disabled
    """

    bidder_code: str
    enabled: bool = True
    endpoint: str = ""
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    disabled_message: Optional[str] = None

    @classmethod
    def from_dict(cls, bidder_code: str, data: dict[str, Any]) -> "AdapterSettings":
        """Create from dictionary."""
        if not isinstance(data, dict):
            raise InvalidAdapterConfigError(f"adapters.{bidder_code}: expected a mapping")
        try:
            timeout_ms = int(data.get("timeout_ms", DEFAULT_TIMEOUT_MS))
        except (TypeError, ValueError) as e:
            raise InvalidAdapterConfigError(
                f"adapters.{bidder_code}.timeout_ms: {e}"
            ) from e
        if timeout_ms <= 0:
            raise InvalidAdapterConfigError(
                f"adapters.{bidder_code}.timeout_ms must be positive"
            )
        enabled = data.get("enabled", True)
        if not isinstance(enabled, bool):
            raise InvalidAdapterConfigError(
                f"adapters.{bidder_code}.enabled must be true or false"
            )
        return cls(
            bidder_code=bidder_code,
            enabled=enabled,
            endpoint=data.get("endpoint") or "",
            timeout_ms=timeout_ms,
            disabled_message=data.get("disabled_message"),
        )


@dataclass
class AdaptersConfig:
    """All configured exchange adapters, keyed by bidder code."""

    adapters: dict[str, AdapterSettings] = field(default_factory=dict)

    def get(self, bidder_code: str) -> Optional[AdapterSettings]:
        return self.adapters.get(bidder_code)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AdaptersConfig":
        """Create from dictionary."""
        adapters_data = (data or {}).get("adapters") or {}
        if not isinstance(adapters_data, dict):
            raise InvalidAdapterConfigError("adapters: expected a mapping")
        return cls(
            adapters={
                str(code).lower(): AdapterSettings.from_dict(str(code).lower(), settings or {})
                for code, settings in adapters_data.items()
            }
        )


def load_adapters_config(path: str | Path | None = None) -> AdaptersConfig:
    """
    Load adapter settings from YAML.

    Args:
        path: Config file path (defaults to RTB_ADAPTERS_CONFIG or
              config/adapters.yaml)

    Raises:
        InvalidAdapterConfigError: If the file is missing or malformed
    """
    if path is None:
        path = os.environ.get(CONFIG_PATH_ENV, str(DEFAULT_CONFIG_PATH))
    path = Path(path)

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError as e:
        raise InvalidAdapterConfigError(f"Adapter config not found: {path}") from e
    except yaml.YAMLError as e:
        raise InvalidAdapterConfigError(f"YAML error in {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidAdapterConfigError(f"{path}: expected a mapping at the top level")

    config = AdaptersConfig.from_dict(data)
    logger.info(
        "Loaded adapter config",
        path=str(path),
        adapters=sorted(config.adapters),
    )
    return config
