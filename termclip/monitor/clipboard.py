from __future__ import annotations

import pyperclip


class ClipboardError(Exception):
    pass


class PyperclipClipboard:
    """Text clipboard backed by pyperclip."""

    def paste(self) -> str:
        try:
            return pyperclip.paste() or ""
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Clipboard read failed: {e}") from e

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Clipboard write failed: {e}") from e
