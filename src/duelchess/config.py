"""
Configuration and environment loading for duelchess.

- Loads settings.yml (YAML) from the repo root or the working directory if present, then .env, then environment variables.
- Exposes SETTINGS with the knobs used by the CLI and the game loops (listen address, save file, logging, display).
"""
from __future__ import annotations
from dataclasses import dataclass
import os
from typing import Any, Callable

import yaml
from dotenv import load_dotenv

load_dotenv()


def _repo_root() -> str:
    # this file: src/duelchess/config.py → repo root is two levels up
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))


def _load_yaml(path: str) -> dict:
    if not os.path.isfile(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return data if isinstance(data, dict) else {}


def _load_settings_files() -> dict:
    cfg: dict = {}
    for path in (os.path.join(_repo_root(), "settings.yml"), os.path.join(os.getcwd(), "settings.yml")):
        cfg.update(_load_yaml(path))
    return cfg


_cfg = _load_settings_files()


def _as_bool(val: Any) -> bool:
    if isinstance(val, bool):
        return val
    return str(val).strip().lower() in {"1", "true", "yes", "on"}


def _get(name: str, default: Any, cast: Callable[[Any], Any] | None = None, cfg: dict | None = None) -> Any:
    cfg = _cfg if cfg is None else cfg
    if name in cfg:
        val = cfg[name]
        return cast(val) if cast else val
    env = os.environ.get(name)
    if env is not None:
        return cast(env) if cast else env
    return default


@dataclass(frozen=True)
class Settings:
    # Network
    listen_address: str = "0.0.0.0"

    # Persistence
    save_file: str = "game.txt"

    # Logging
    log_level: str = "WARNING"
    log_file: str | None = None

    # Display
    color: bool = True
    clear_screen: bool = True


def load_settings(cfg: dict | None = None) -> Settings:
    """Build Settings from a YAML-style dict (defaults to settings.yml) with env fallback."""
    return Settings(
        listen_address=_get("DUELCHESS_LISTEN_ADDRESS", "0.0.0.0", cfg=cfg),
        save_file=_get("DUELCHESS_SAVE_FILE", "game.txt", cfg=cfg),
        log_level=str(_get("DUELCHESS_LOG_LEVEL", "WARNING", cfg=cfg)).upper(),
        log_file=_get("DUELCHESS_LOG_FILE", None, cfg=cfg) or None,
        color=_get("DUELCHESS_COLOR", True, cast=_as_bool, cfg=cfg),
        clear_screen=_get("DUELCHESS_CLEAR_SCREEN", True, cast=_as_bool, cfg=cfg),
    )


SETTINGS = load_settings()
