from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from knightstour.core.errors import ConfigError
from knightstour.core.model import MIN_BORDER
from knightstour.core.search import STRATEGIES

OUTPUTS = ("grid", "json", "yaml")


@dataclass(frozen=True)
class TourConfig:
    size: int = 8
    border: int = MIN_BORDER
    start: Optional[Tuple[int, int]] = None
    seed: Optional[int] = None
    strategy: str = "auto"
    max_attempts: int = 1
    output: str = "grid"

    def __post_init__(self) -> None:
        for name in ("size", "border", "max_attempts"):
            _require_int(name, getattr(self, name))
        if self.seed is not None:
            _require_int("seed", self.seed)
        if self.start is not None:
            start = self.start
            if not isinstance(start, (list, tuple)) or len(start) != 2:
                raise ConfigError(f"start must be a [row, col] pair, got {start!r}")
            for value in start:
                _require_int("start", value)
            object.__setattr__(self, "start", (start[0], start[1]))
        if self.strategy not in STRATEGIES:
            raise ConfigError(f"strategy must be one of {', '.join(STRATEGIES)}, got {self.strategy!r}")
        if self.output not in OUTPUTS:
            raise ConfigError(f"output must be one of {', '.join(OUTPUTS)}, got {self.output!r}")

    def with_overrides(self, **overrides: Any) -> "TourConfig":
        """Copy with every override that is not None applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _require_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {value!r}")


def parse_config(data: Optional[Dict[str, Any]]) -> TourConfig:
    """Build a TourConfig from an already decoded mapping."""
    if data is None:
        return TourConfig()
    if not isinstance(data, dict):
        raise ConfigError("run configuration must be a mapping")
    known = {f.name for f in fields(TourConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"unknown configuration keys: {', '.join(map(str, unknown))}")
    return TourConfig(**data)


def load_config(path: str | Path) -> TourConfig:
    """Load a YAML run description into a TourConfig."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path} is not valid YAML: {exc}") from exc
    return parse_config(data)
