from __future__ import annotations

from pathlib import Path
from urllib.parse import urlparse

import yaml

from ..models import Endpoints
from .logging import get_logger

logger = get_logger("feeds.config")


class ConfigError(Exception):
    """Raised when the configuration file is invalid or missing required fields."""


def _validate_endpoints_dict(entry: dict) -> None:
    """Validate the ``endpoints`` mapping from YAML.

    Every key must name an ``Endpoints`` field; ``*_url`` values must be
    absolute http(s) URLs and identifiers must be non-empty scalars.
    """
    unknown = set(entry) - Endpoints.field_names()
    if unknown:
        raise ConfigError(
            f"Unknown endpoint keys: {sorted(unknown)}. Allowed: {sorted(Endpoints.field_names())}"
        )

    for key, value in entry.items():
        if value is None or isinstance(value, (dict, list)) or not str(value).strip():
            raise ConfigError(f"'{key}' must be a non-empty string")
        if key in Endpoints.url_field_names():
            url_str = str(value).strip()
            parsed = urlparse(url_str)
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                raise ConfigError(f"Invalid URL '{url_str}' for '{key}'. Must be absolute http(s) URL.")


def load_endpoints_config(path: Path | str) -> Endpoints:
    """Load ``endpoints.yaml`` into an ``Endpoints`` instance.

    YAML structure:
      - Top-level mapping
      - Key ``endpoints``: mapping of ``Endpoints`` field names to values.
        Fields left out keep their defaults.

    Unknown top-level keys are ignored for forward compatibility.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigError("Top level of the YAML configuration must be a mapping")

    raw = data.get("endpoints") or {}
    if not isinstance(raw, dict):
        raise ConfigError("'endpoints' must be a mapping in the YAML configuration")

    _validate_endpoints_dict(raw)
    overrides = {str(k): str(v).strip() for k, v in raw.items()}
    logger.debug("Loaded %d endpoint override(s) from %s", len(overrides), config_path)
    return Endpoints(**overrides)
