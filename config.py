"""
Engine configuration for distvec.

Replaces global debug / infinity flags with an explicit object passed to the
engine and the change applicator. Can be loaded from a small YAML file:

    verbose: true
    removal_sentinel: -999
    infinity: null        # derive from the topology
    max_passes: null      # derive from the node count
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

from errors import ConfigError


REMOVAL_SENTINEL = -999


@dataclass(frozen=True)
class EngineConfig:
    verbose: bool = False
    removal_sentinel: int = REMOVAL_SENTINEL
    infinity: Optional[int] = None
    max_passes: Optional[int] = None

    def __post_init__(self) -> None:
        if self.infinity is not None and self.infinity <= 0:
            raise ConfigError(f"infinity must be positive, got {self.infinity}")
        if self.max_passes is not None and self.max_passes <= 0:
            raise ConfigError(f"max_passes must be positive, got {self.max_passes}")
        if self.removal_sentinel >= 0:
            # A non-negative sentinel would shadow a real link cost.
            raise ConfigError(f"removal_sentinel must be negative, got {self.removal_sentinel}")


def load_config(path: Path) -> EngineConfig:
    import yaml  # type: ignore

    try:
        data = yaml.safe_load(path.read_text())
    except OSError as exc:
        raise ConfigError(f"cannot read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc

    if data is None:
        return EngineConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"config {path} must be a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(EngineConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"unknown config keys in {path}: {', '.join(unknown)}")

    def _opt_int(key: str) -> Optional[int]:
        value = data.get(key)
        return None if value is None else int(value)

    try:
        return EngineConfig(
            verbose=bool(data.get("verbose", False)),
            removal_sentinel=int(data.get("removal_sentinel", REMOVAL_SENTINEL)),
            infinity=_opt_int("infinity"),
            max_passes=_opt_int("max_passes"),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"invalid value in {path}: {exc}") from exc
