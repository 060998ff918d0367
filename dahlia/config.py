"""Converter configuration — defaults, NO_COLOR environment flag, YAML files."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

from dahlia.constants import Depth

log = logging.getLogger(__name__)

_KEYS = ("depth", "marker", "no_reset", "no_color")


class ConfigError(ValueError):
    """Raised for unreadable or invalid configuration values."""


def no_color_from_env(environ: Mapping[str, str] | None = None) -> bool:
    """True when NO_COLOR is "true" (any case) or "1"."""
    env = (os.environ if environ is None else environ).get("NO_COLOR", "")
    return env.lower() == "true" or env == "1"


@dataclass(frozen=True, slots=True)
class DahliaConfig:
    depth: Depth = Depth.HIGH
    marker: str = "&"
    no_reset: bool = False
    no_color: bool = False

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "depth", Depth.parse(self.depth))
        except ValueError as e:
            raise ConfigError(str(e)) from None
        if not isinstance(self.marker, str) or len(self.marker) != 1:
            raise ConfigError(f"Marker must be a single character, got {self.marker!r}")
        for name in ("no_reset", "no_color"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"{name} must be true or false, got {getattr(self, name)!r}")

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides: Any,
    ) -> DahliaConfig:
        """Defaults with `no_color` taken from the environment."""
        overrides.setdefault("no_color", no_color_from_env(environ))
        return cls(**overrides)

    def with_overrides(self, **overrides: Any) -> DahliaConfig:
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_config(
    path: str | Path, environ: Mapping[str, str] | None = None,
) -> DahliaConfig:
    """Load a converter configuration from a YAML mapping.

    Keys: depth, marker, no_reset, no_color. A missing `no_color` falls
    back to the NO_COLOR environment variable.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping, got {type(data).__name__}")

    unknown = sorted(map(str, set(data) - set(_KEYS)))
    if unknown:
        log.warning("Ignoring unknown config keys in %s: %s", path, ", ".join(unknown))

    values = {k: data[k] for k in _KEYS if k in data}
    config = DahliaConfig.from_env(environ, **values)
    log.info("Loaded config from %s: %s", path, config)
    return config
