"""Turtle configuration: unit length, surface size and origin placement.

Configuration is an explicit value passed to ``Turtle``.  Scoped
overrides go through a ``DefaultsStack`` owned by the caller; there is
no process-wide default state.

A configuration file is a YAML mapping, e.g.::

    unit: 30
    width: 400
    height: 300
    origin: tl
    surface: TGspace
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from turtle3d.errors import ConfigError
from turtle3d.vec import isfinitenum

logger = logging.getLogger(__name__)

DEFAULT_SURFACE = "TGspace"
DEFAULT_UNIT = 30


def parse_origin(origin: Optional[str], width: float, height: float) -> List[float]:
    """Return the turtle-space home point for an origin string.

    ``origin`` is made of the letters ``t``/``m``/``b`` (top, middle,
    bottom) and ``l``/``c``/``r`` (left, center, right).  Turtle axis a
    runs down the surface and axis b to the right, so the vertical
    letters set a and the horizontal letters set b.  Letters apply in
    order; an empty or missing origin is the surface center.
    """
    a = height / 2
    b = width / 2
    for ch in origin or "":
        if ch == "t":
            a = 0.0
        elif ch == "m":
            a = height / 2
        elif ch == "b":
            a = height
        elif ch == "l":
            b = 0.0
        elif ch == "c":
            b = width / 2
        elif ch == "r":
            b = width
        else:
            raise ConfigError(f"bad origin letter {ch!r} in {origin!r}")
    return [a, b, 0.0]


@dataclass
class TurtleConfig:
    """Construction-time settings of a turtle."""
    unit: float = DEFAULT_UNIT
    width: float = 400
    height: float = 300
    origin: Optional[str] = None
    surface: str = DEFAULT_SURFACE

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for name in ("unit", "width", "height"):
            value = getattr(self, name)
            if not isfinitenum(value) or value <= 0:
                raise ConfigError(f"{name} must be a positive number, got {value!r}")
        if self.origin is not None and not isinstance(self.origin, str):
            raise ConfigError(f"origin must be a string, got {self.origin!r}")
        if not isinstance(self.surface, str):
            raise ConfigError(f"surface must be a string, got {self.surface!r}")
        # letters are checked here so a bad origin fails at construction
        parse_origin(self.origin, self.width, self.height)

    def home(self) -> List[float]:
        return parse_origin(self.origin, self.width, self.height)

    def updated(self, **changes: Any) -> "TurtleConfig":
        """Return a copy with ``changes`` applied."""
        _check_keys(changes)
        return replace(self, **changes)

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "TurtleConfig":
        if not isinstance(data, dict):
            raise ConfigError("configuration must be a mapping")
        _check_keys(data)
        return cls(**data)

    def to_mapping(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _check_keys(data: Dict[str, Any]) -> None:
    known = {f.name for f in fields(TurtleConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"unknown configuration keys: {', '.join(unknown)}")


def load_config(path: Path | str) -> TurtleConfig:
    """Load a ``TurtleConfig`` from a YAML file."""
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"configuration file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"malformed configuration file {path}: {exc}") from exc
    config = TurtleConfig.from_mapping(data)
    logger.debug("loaded configuration %s from %s", config, path)
    return config


def save_config(config: TurtleConfig, path: Path | str) -> None:
    path = Path(path)
    with path.open("w", encoding="utf-8") as fp:
        yaml.safe_dump(config.to_mapping(), fp, sort_keys=False)


class DefaultsStack:
    """A stack of configurations; the top one is in effect.

    ``push`` copies the top before applying changes, so popping
    restores the previous settings exactly.  The bottom entry is never
    popped.
    """

    def __init__(self, base: Optional[TurtleConfig] = None):
        self._stack: List[TurtleConfig] = [base if base is not None else TurtleConfig()]

    def __len__(self) -> int:
        return len(self._stack)

    @property
    def top(self) -> TurtleConfig:
        return self._stack[-1]

    def set(self, **changes: Any) -> TurtleConfig:
        """Update the top entry in place (other settings are unaffected)."""
        self._stack[-1] = self.top.updated(**changes)
        return self.top

    def push(self, **changes: Any) -> TurtleConfig:
        self._stack.append(copy.copy(self.top))
        try:
            return self.set(**changes)
        except ConfigError:
            self._stack.pop()
            raise

    def pop(self) -> TurtleConfig:
        if len(self._stack) > 1:
            self._stack.pop()
        return self.top
