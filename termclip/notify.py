from __future__ import annotations

import platform
import subprocess

from .utils.logging import get_logger


PREVIEW_CHARS = 60


def notification_body(text: str) -> str:
    body = text[:PREVIEW_CHARS]
    return body + "..." if len(text) > PREVIEW_CHARS else body


def _applescript_quote(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def notify_cleaned(text: str, title: str = "Termclip") -> None:
    logger = get_logger(__name__)
    body = notification_body(text)
    if platform.system() != "Darwin":
        logger.debug(f"Notification: {body}")
        return
    script = f"display notification {_applescript_quote(body)} with title {_applescript_quote(title)}"
    try:
        subprocess.run(["osascript", "-e", script], check=False, timeout=5, capture_output=True)  # noqa: S603
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"Notification failed: {e}")
