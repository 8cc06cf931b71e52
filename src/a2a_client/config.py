"""Build a ClientConfig from a YAML file, the environment and explicit overrides."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from a2a_client.exceptions import ConfigError
from a2a_client.models import ClientConfig

LOGGER = logging.getLogger(__name__)

ENV_BASE_URL = "A2A_BASE_URL"
ENV_TIMEOUT_MS = "A2A_TIMEOUT_MS"
ENV_MAX_RETRIES = "A2A_MAX_RETRIES"

# Optional section name in the YAML file
CONFIG_SECTION = "a2a"

_FIELDS = ("base_url", "timeout_ms", "max_retries")
_INT_FIELDS = ("timeout_ms", "max_retries")


def load_config(
    path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
    **overrides: Any,
) -> ClientConfig:
    """
    Resolve client settings.

    Precedence, lowest first: defaults, YAML file, environment, overrides.
    Overrides whose value is None are ignored.

    Args:
        path: Optional YAML file with base_url/timeout_ms/max_retries keys,
              either at top level or under an "a2a" section.
        env: Environment mapping (defaults to os.environ).
        **overrides: Explicit field values, e.g. from the command line.

    Raises:
        ConfigError: Missing file, unknown keys, or invalid values.
    """
    values: dict[str, Any] = {}

    if path is not None:
        values.update(_read_yaml(Path(path)))

    values.update(_read_env(os.environ if env is None else env))

    for key, value in overrides.items():
        if key not in _FIELDS:
            raise ConfigError(f"Unknown config option: {key}")
        if value is not None:
            values[key] = value

    for key in _INT_FIELDS:
        if key in values:
            values[key] = _to_int(key, values[key])

    try:
        config = ClientConfig(**values)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc

    LOGGER.debug(
        "Client config: base_url=%s timeout_ms=%d max_retries=%d",
        config.base_url,
        config.timeout_ms,
        config.max_retries,
    )
    return config


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    if isinstance(data.get(CONFIG_SECTION), dict):
        data = data[CONFIG_SECTION]

    unknown = sorted(set(data) - set(_FIELDS))
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")
    return dict(data)


def _read_env(env: Mapping[str, str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    if ENV_BASE_URL in env:
        # Empty string clears a base URL set by the file
        values["base_url"] = env[ENV_BASE_URL] or None
    if env.get(ENV_TIMEOUT_MS):
        values["timeout_ms"] = env[ENV_TIMEOUT_MS]
    if env.get(ENV_MAX_RETRIES):
        values["max_retries"] = env[ENV_MAX_RETRIES]
    return values


def _to_int(key: str, value: Any) -> int:
    if isinstance(value, (bool, float)):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{key} must be an integer, got {value!r}") from exc
