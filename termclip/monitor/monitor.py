from __future__ import annotations

import threading
import time
from typing import Callable, Optional, Protocol, Tuple

from ..activity import ActivityLog
from ..config import TermclipConfig
from ..reflow import classify, clean
from ..utils.logging import get_logger
from .clipboard import ClipboardError, PyperclipClipboard
from .frontmost import FrontmostApp, detect_frontmost_app


class Clipboard(Protocol):
    def paste(self) -> str: ...

    def copy(self, text: str) -> None: ...


class ClipboardMonitor:
    """Poll the clipboard and rewrite text copied from terminal apps.

    The most recent terminal to be frontmost is remembered for one clipboard
    change, so copy, switch app, paste still gets cleaned when the switch
    happens before the next poll.
    """

    def __init__(
        self,
        config: TermclipConfig,
        activity: Optional[ActivityLog] = None,
        clipboard: Optional[Clipboard] = None,
        frontmost: Callable[[], Optional[FrontmostApp]] = detect_frontmost_app,
        on_clean: Optional[Callable[[str], None]] = None,
    ):
        self.config = config
        self.activity = activity
        self.clipboard = clipboard or PyperclipClipboard()
        self.frontmost = frontmost
        self.on_clean = on_clean
        self.logger = get_logger(__name__)
        self.last_terminal: Optional[FrontmostApp] = None
        self._last_seen: Optional[str] = None
        self._last_noted: Optional[float] = None

    def _terminal_app(self) -> Tuple[Optional[FrontmostApp], bool]:
        app = self.frontmost()
        return app, app is not None and self.config.is_terminal(app.bundle_id)

    def seed(self) -> None:
        try:
            self._last_seen = self.clipboard.paste()
        except ClipboardError as e:
            self.logger.warning(str(e))
        self.note_frontmost()

    def note_frontmost(self) -> None:
        app, is_terminal = self._terminal_app()
        if is_terminal:
            self.last_terminal = app

    def maybe_note_frontmost(self, now: float) -> None:
        """Look up the frontmost app at most once per ``frontmost_interval``."""
        if self._last_noted is not None and now - self._last_noted < self.config.frontmost_interval:
            return
        self._last_noted = now
        self.note_frontmost()

    def _attribute(self) -> Optional[str]:
        app, is_terminal = self._terminal_app()
        if is_terminal:
            return app.name
        if self.last_terminal is not None:
            name = self.last_terminal.name
            self.last_terminal = None
            return name
        if not self.config.terminal_only:
            return app.name if app else "Unknown"
        return None

    def check(self) -> Optional[str]:
        """Run one poll cycle; return the text written back, if any."""
        try:
            text = self.clipboard.paste()
        except ClipboardError as e:
            self.logger.warning(str(e))
            return None
        if text == self._last_seen:
            return None
        self._last_seen = text
        if not text:
            return None

        app_name = self._attribute()
        if app_name is None:
            return None

        cleaned = clean(text)
        if cleaned == text:
            return None
        self.logger.debug(f"Reflowing {classify(text).value} text from {app_name}")

        try:
            self.clipboard.copy(cleaned)
        except ClipboardError as e:
            self.logger.warning(str(e))
            return None
        # our own write must not count as a new change
        self._last_seen = cleaned

        if self.activity is not None:
            try:
                self.activity.log(app_name, text, cleaned)
            except OSError as e:
                self.logger.warning(f"Activity log write failed: {e}")
        if self.on_clean is not None:
            self.on_clean(cleaned)
        return cleaned

    def run(self, stop_event: Optional[threading.Event] = None) -> None:
        stop = stop_event or threading.Event()
        self.seed()
        self.logger.info(f"Watching clipboard every {self.config.poll_interval:.2f}s")
        while not stop.is_set():
            self.check()
            self.maybe_note_frontmost(time.monotonic())
            stop.wait(self.config.poll_interval)
        self.logger.info("Clipboard monitor stopped")
