from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import List

from .utils.io import write_text_atomic
from .utils.logging import get_logger


DEFAULT_TERMINAL_BUNDLE_IDS: List[str] = [
    "com.apple.Terminal",
    "com.googlecode.iterm2",
    "dev.warp.Warp-Stable",
    "com.microsoft.VSCode",
    "net.kovidgoyal.kitty",
    "io.alacritty",
    "com.github.wez.wezterm",
    "co.zeit.hyper",
    "dev.zed.Zed",
    "com.todesktop.230313mzl4w4u92",  # Cursor
    "com.mitchellh.ghostty",
]


class ConfigError(Exception):
    pass


@dataclass
class TermclipConfig:
    notifications_enabled: bool = False
    terminal_bundle_ids: List[str] = field(default_factory=lambda: list(DEFAULT_TERMINAL_BUNDLE_IDS))
    poll_interval: float = 0.3
    # seconds between frontmost-app lookups while idle
    frontmost_interval: float = 1.0
    log_max_entries: int = 1000
    # False cleans every clipboard change, whatever app is frontmost
    terminal_only: bool = True

    def is_terminal(self, bundle_id: str) -> bool:
        return bundle_id in self.terminal_bundle_ids


def _from_dict(data: dict) -> TermclipConfig:
    known = {f.name for f in fields(TermclipConfig)}
    kwargs = {k: v for k, v in data.items() if k in known}
    cfg = TermclipConfig(**kwargs)
    if not isinstance(cfg.terminal_bundle_ids, list):
        raise ConfigError("terminal_bundle_ids must be a list")
    try:
        cfg.poll_interval = float(cfg.poll_interval)
        cfg.frontmost_interval = float(cfg.frontmost_interval)
        cfg.log_max_entries = int(cfg.log_max_entries)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid config value: {e}") from e
    if cfg.poll_interval <= 0 or cfg.frontmost_interval <= 0 or cfg.log_max_entries <= 0:
        raise ConfigError("poll_interval, frontmost_interval and log_max_entries must be positive")
    return cfg


def load_config(path: Path) -> TermclipConfig:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Malformed config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Malformed config {path}: expected a JSON object")
    return _from_dict(data)


def load_config_or_default(path: Path) -> TermclipConfig:
    if not path.exists():
        return TermclipConfig()
    try:
        return load_config(path)
    except ConfigError as e:
        get_logger(__name__).warning(f"{e}; using defaults")
        return TermclipConfig()


def save_config(config: TermclipConfig, path: Path) -> None:
    payload = json.dumps(asdict(config), indent=2, sort_keys=True) + "\n"
    write_text_atomic(path, payload)
