from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


HOME_ENV = "TERMCLIP_HOME"
AGENT_LABEL = "com.termclip.agent"


@dataclass(frozen=True)
class TermclipPaths:
    base_dir: Path
    launch_agents_dir: Path

    @property
    def config_file(self) -> Path:
        return self.base_dir / "config.json"

    @property
    def pid_file(self) -> Path:
        return self.base_dir / "termclip.pid"

    @property
    def log_file(self) -> Path:
        return self.base_dir / "termclip.log"

    @property
    def stdout_log(self) -> Path:
        return self.base_dir / "stdout.log"

    @property
    def stderr_log(self) -> Path:
        return self.base_dir / "stderr.log"

    @property
    def launchd_plist(self) -> Path:
        return self.launch_agents_dir / f"{AGENT_LABEL}.plist"

    def ensure_base_dir(self) -> None:
        self.base_dir.mkdir(parents=True, exist_ok=True)


def default_paths(home: Optional[Path] = None) -> TermclipPaths:
    user_home = home or Path.home()
    override = os.getenv(HOME_ENV)
    base = Path(override).expanduser() if override else user_home / ".termclip"
    return TermclipPaths(base_dir=base, launch_agents_dir=user_home / "Library" / "LaunchAgents")
