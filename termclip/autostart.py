from __future__ import annotations

import plistlib
import subprocess
import sys
from typing import Any, Dict

from .utils.io import ensure_parent
from .utils.logging import get_logger
from .utils.paths import AGENT_LABEL, TermclipPaths


def build_plist(paths: TermclipPaths) -> Dict[str, Any]:
    return {
        "Label": AGENT_LABEL,
        "ProgramArguments": [sys.executable, "-m", "termclip", "start", "--foreground"],
        "RunAtLoad": True,
        "KeepAlive": False,
        "StandardOutPath": str(paths.stdout_log),
        "StandardErrorPath": str(paths.stderr_log),
    }


def install(paths: TermclipPaths) -> None:
    paths.ensure_base_dir()
    ensure_parent(paths.launchd_plist)
    with paths.launchd_plist.open("wb") as fh:
        plistlib.dump(build_plist(paths), fh, fmt=plistlib.FMT_XML)


def uninstall(paths: TermclipPaths) -> None:
    if not paths.launchd_plist.exists():
        return
    try:
        subprocess.run(["launchctl", "unload", str(paths.launchd_plist)], check=False, capture_output=True)  # noqa: S603
    except OSError as e:
        get_logger(__name__).debug(f"launchctl unload failed: {e}")
    paths.launchd_plist.unlink()


def is_installed(paths: TermclipPaths) -> bool:
    return paths.launchd_plist.exists()
