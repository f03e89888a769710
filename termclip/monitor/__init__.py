from .clipboard import ClipboardError, PyperclipClipboard
from .frontmost import FrontmostApp, detect_frontmost_app
from .monitor import ClipboardMonitor

__all__ = ["ClipboardError", "ClipboardMonitor", "FrontmostApp", "PyperclipClipboard", "detect_frontmost_app"]
