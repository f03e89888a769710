from __future__ import annotations

import platform
import subprocess
from dataclasses import dataclass
from typing import Optional

from ..utils.logging import get_logger


_OSASCRIPT = (
    'tell application "System Events" to tell (first application process whose frontmost is true) '
    'to return (bundle identifier as text) & linefeed & (name as text)'
)


@dataclass(frozen=True)
class FrontmostApp:
    bundle_id: str
    name: str


def parse_osascript_output(output: str) -> Optional[FrontmostApp]:
    parts = output.strip().splitlines()
    if not parts or not parts[0].strip():
        return None
    bundle_id = parts[0].strip()
    name = parts[1].strip() if len(parts) > 1 and parts[1].strip() else bundle_id
    return FrontmostApp(bundle_id=bundle_id, name=name)


def detect_frontmost_app(timeout: float = 2.0) -> Optional[FrontmostApp]:
    """Return the frontmost application, or None when it cannot be determined."""
    if platform.system() != "Darwin":
        return None
    try:
        out = subprocess.check_output(  # noqa: S603
            ["osascript", "-e", _OSASCRIPT], text=True, timeout=timeout, stderr=subprocess.DEVNULL
        )
    except (OSError, subprocess.SubprocessError) as e:
        get_logger(__name__).debug(f"Frontmost app lookup failed: {e}")
        return None
    return parse_osascript_output(out)
