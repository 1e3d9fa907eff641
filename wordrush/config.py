"""
Game settings, read once at startup and never changed afterwards.

Defaults live on the Config dataclass; an optional JSON file overrides any
subset of them.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from wordrush.errors import ConfigError

logger = logging.getLogger(__name__)

WORDS_PATH = Path(__file__).with_name("words.txt")


class Gamemode(Enum):
    PRACTICE = "practice"
    INFINITE_LIVES = "infinite_lives"
    LIMITED_LIVES = "limited_lives"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


@dataclass(frozen=True)
class Config:
    gamemode: Gamemode = Gamemode.LIMITED_LIVES
    min_words_per_prompt: int = 25
    ticks_per_turn: int = 320
    tick_rate: int = 64  # ticks per second
    starting_lives: int = 2
    max_lives: int = 3
    highlight_symbol: str = "> "

    @property
    def tick_interval(self) -> float:
        return 1.0 / self.tick_rate

    @property
    def has_countdown(self) -> bool:
        return self.gamemode is not Gamemode.PRACTICE

    def validate(self) -> "Config":
        for name in ("min_words_per_prompt", "ticks_per_turn", "tick_rate", "max_lives"):
            if getattr(self, name) < 1:
                raise ConfigError(f"{name} must be at least 1, got {getattr(self, name)}")
        if not 1 <= self.starting_lives <= self.max_lives:
            raise ConfigError(
                f"starting_lives must be between 1 and max_lives ({self.max_lives}), got {self.starting_lives}"
            )
        return self


def _data_home() -> Path:
    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / "wordrush"
    return Path.home() / ".local" / "share" / "wordrush"


def _config_home() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "wordrush"
    return Path.home() / ".config" / "wordrush"


def default_config_path() -> Path:
    override = os.environ.get("WORDRUSH_CONFIG")
    if override:
        return Path(override)
    return _config_home() / "config.json"


def default_words_path() -> Path:
    override = os.environ.get("WORDRUSH_WORDS")
    if override:
        return Path(override)
    return WORDS_PATH


def default_log_path() -> Path:
    override = os.environ.get("WORDRUSH_LOG_FILE")
    if override:
        return Path(override)
    return _data_home() / "wordrush.log"


def _coerce(name: str, value: Any, default: Any) -> Any:
    if isinstance(default, Gamemode):
        try:
            return Gamemode(value)
        except ValueError:
            choices = ", ".join(mode.value for mode in Gamemode)
            raise ConfigError(f"unknown gamemode {value!r} (expected one of: {choices})") from None
    # bool is an int subclass; reject it for numeric settings
    if isinstance(default, int) and (isinstance(value, bool) or not isinstance(value, int)):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    if isinstance(default, str) and not isinstance(value, str):
        raise ConfigError(f"{name} must be a string, got {value!r}")
    return value


def config_from_mapping(data: dict[str, Any], base: Optional[Config] = None) -> Config:
    """Merge ``data`` over ``base`` (the defaults when omitted) and validate."""
    base = base or Config()
    known = {f.name: getattr(base, f.name) for f in fields(Config)}
    unknown = sorted(set(data) - set(known))
    if unknown:
        raise ConfigError(f"unknown config key(s): {', '.join(unknown)}")
    overrides = {name: _coerce(name, value, known[name]) for name, value in data.items()}
    return replace(base, **overrides).validate()


def load_config(path: Optional[Path] = None) -> Config:
    path = path or default_config_path()
    if not path.exists():
        logger.info("no config file at %s, using defaults", path)
        return Config()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"config file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a JSON object")
    config = config_from_mapping(data)
    logger.info("loaded config from %s", path)
    return config
