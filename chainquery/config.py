"""
Config loading for chainquery.

Sources (in precedence order, highest first):
  1. Environment variables (CHAINQUERY_*)
  2. ~/.chainquery/config.toml
  3. Built-in defaults

No configuration is required: the plugin runs on defaults alone.

Usage:
    from chainquery.config import load_config
    config = load_config()
    print(config.rate_limit.max_requests)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import toml

from chainquery.exceptions import ConfigInvalidError

DEFAULT_CONFIG_DIR = Path.home() / ".chainquery"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.toml"

# Format: (env_var_name, dotted_config_path, type_converter)
_ENV_OVERRIDES: list[tuple[str, str, type]] = [
    ("CHAINQUERY_API_KEY", "provider.api_key", str),
    ("CHAINQUERY_TRANSLATE_URL", "provider.translate_url", str),
    ("CHAINQUERY_PRICING_URL", "provider.pricing_url", str),
    ("CHAINQUERY_TIMEOUT_SECONDS", "provider.timeout_seconds", float),
    ("CHAINQUERY_MAX_REQUESTS", "rate_limit.max_requests", int),
    ("CHAINQUERY_WINDOW_SECONDS", "rate_limit.window_seconds", float),
    ("CHAINQUERY_MIN_INTERVAL_SECONDS", "rate_limit.min_interval_seconds", float),
    ("CHAINQUERY_MAX_RECENT_TXS", "display.max_recent_txs", int),
    ("CHAINQUERY_LOG_LEVEL", "logging.level", str),
]

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class ProviderConfig:
    """Noves API endpoints and credentials."""

    api_key: str = ""                   # optional; sent only when set
    translate_url: str = "https://translate.noves.fi"
    pricing_url: str = "https://pricing.noves.fi"
    timeout_seconds: float = 30.0


@dataclass
class RateLimitConfig:
    """Outbound request gate parameters."""

    max_requests: int = 30              # per window
    window_seconds: float = 60.0
    min_interval_seconds: float = 2.0


@dataclass
class DisplayConfig:
    """Response formatting options."""

    max_recent_txs: int = 5


@dataclass
class LoggingConfig:
    level: str = "INFO"
    color: bool = True


@dataclass
class ChainqueryConfig:
    """Full configuration object. Passed to build_plugin()."""

    provider: ProviderConfig = field(default_factory=ProviderConfig)
    rate_limit: RateLimitConfig = field(default_factory=RateLimitConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None = None) -> ChainqueryConfig:
    """
    Load configuration from TOML file + environment variable overrides.

    Args:
        path: Override config file path. If None, uses CHAINQUERY_CONFIG_PATH
              env var or default (~/.chainquery/config.toml).

    Returns:
        ChainqueryConfig with all values resolved. A missing file is not an
        error; defaults are used.

    Raises:
        ConfigInvalidError: Config file exists but is invalid TOML or values.
    """
    config_path = _resolve_config_path(path)

    raw: dict = {}
    if config_path.exists():
        try:
            raw = toml.load(str(config_path))
        except toml.TomlDecodeError as e:
            raise ConfigInvalidError(f"Invalid TOML in {config_path}: {e}") from e

    try:
        config = _dict_to_config(raw)
    except (ValueError, TypeError) as e:
        raise ConfigInvalidError(f"Invalid value in {config_path}: {e}") from e
    _apply_env_overrides(config)
    _validate_config(config)

    return config


def get_default_config_path() -> Path:
    """Return the default config file path."""
    return DEFAULT_CONFIG_PATH


# ──────────────────────────────────────────────────────────────
# Private helpers
# ──────────────────────────────────────────────────────────────


def _resolve_config_path(path: str | None) -> Path:
    if path:
        return Path(path).expanduser()
    env_path = os.environ.get("CHAINQUERY_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH


def _dict_to_config(raw: dict) -> ChainqueryConfig:
    """Build ChainqueryConfig from raw TOML dict, applying defaults for missing keys."""
    config = ChainqueryConfig()

    provider = raw.get("provider", {})
    config.provider.api_key = provider.get("api_key", "")
    config.provider.translate_url = provider.get("translate_url", config.provider.translate_url)
    config.provider.pricing_url = provider.get("pricing_url", config.provider.pricing_url)
    config.provider.timeout_seconds = float(provider.get("timeout_seconds", 30.0))

    rate_limit = raw.get("rate_limit", {})
    config.rate_limit.max_requests = int(rate_limit.get("max_requests", 30))
    config.rate_limit.window_seconds = float(rate_limit.get("window_seconds", 60.0))
    config.rate_limit.min_interval_seconds = float(rate_limit.get("min_interval_seconds", 2.0))

    display = raw.get("display", {})
    config.display.max_recent_txs = int(display.get("max_recent_txs", 5))

    log = raw.get("logging", {})
    config.logging.level = str(log.get("level", "INFO")).upper()
    config.logging.color = bool(log.get("color", True))

    return config


def _apply_env_overrides(config: ChainqueryConfig) -> None:
    """Apply environment variable overrides to a loaded config."""
    if os.environ.get("CHAINQUERY_NO_COLOR"):
        config.logging.color = False

    for env_var, dotted_key, converter in _ENV_OVERRIDES:
        val = os.environ.get(env_var)
        if val is None:
            continue
        section, key = dotted_key.split(".", 1)
        section_obj = getattr(config, section)
        try:
            setattr(section_obj, key, converter(val))
        except (ValueError, TypeError) as e:
            raise ConfigInvalidError(
                f"Invalid value for {env_var}={val!r}: {e}"
            ) from e

    config.logging.level = config.logging.level.upper()


def _validate_config(config: ChainqueryConfig) -> None:
    """Validate config values. Raises ConfigInvalidError on invalid values."""
    if config.rate_limit.max_requests < 1:
        raise ConfigInvalidError(
            f"rate_limit.max_requests must be >= 1, got {config.rate_limit.max_requests}"
        )
    if config.rate_limit.window_seconds <= 0:
        raise ConfigInvalidError(
            f"rate_limit.window_seconds must be positive, "
            f"got {config.rate_limit.window_seconds}"
        )
    if config.rate_limit.min_interval_seconds < 0:
        raise ConfigInvalidError(
            f"rate_limit.min_interval_seconds must be non-negative, "
            f"got {config.rate_limit.min_interval_seconds}"
        )
    if config.provider.timeout_seconds <= 0:
        raise ConfigInvalidError(
            f"provider.timeout_seconds must be positive, got {config.provider.timeout_seconds}"
        )
    if config.display.max_recent_txs < 1:
        raise ConfigInvalidError(
            f"display.max_recent_txs must be >= 1, got {config.display.max_recent_txs}"
        )
    if config.logging.level not in VALID_LOG_LEVELS:
        raise ConfigInvalidError(
            f"logging.level must be one of {sorted(VALID_LOG_LEVELS)}, "
            f"got {config.logging.level!r}"
        )
