from __future__ import annotations

import os
import signal
import subprocess
import sys
import threading
from pathlib import Path

from .activity import ActivityLog
from .config import load_config_or_default
from .monitor import ClipboardMonitor
from .notify import notify_cleaned
from .utils.io import write_text_atomic
from .utils.logging import get_logger
from .utils.paths import TermclipPaths


class DaemonError(Exception):
    pass


def write_pid(pid: int, path: Path) -> None:
    write_text_atomic(path, str(pid))


def read_pid(path: Path) -> int:
    try:
        contents = path.read_text(encoding="utf-8").strip()
    except OSError as e:
        raise DaemonError(f"Cannot read PID file: {e}") from e
    try:
        return int(contents)
    except ValueError:
        raise DaemonError("Invalid PID file") from None


def _pid_alive(pid: int) -> bool:
    if pid <= 0:
        return False
    try:
        os.kill(pid, 0)
    except ProcessLookupError:
        return False
    except PermissionError:
        # exists, owned by someone else
        return True
    return True


def is_running(pid_file: Path) -> bool:
    try:
        pid = read_pid(pid_file)
    except DaemonError:
        return False
    return _pid_alive(pid)


def remove_stale_pid(pid_file: Path) -> None:
    if not is_running(pid_file):
        pid_file.unlink(missing_ok=True)


def stop_running(pid_file: Path) -> None:
    pid = read_pid(pid_file)
    try:
        os.kill(pid, signal.SIGTERM)
    except ProcessLookupError:
        pass
    pid_file.unlink(missing_ok=True)


def _prepare(paths: TermclipPaths) -> None:
    paths.ensure_base_dir()
    remove_stale_pid(paths.pid_file)
    if is_running(paths.pid_file):
        raise DaemonError("Termclip is already running")


def start_background(paths: TermclipPaths) -> int:
    _prepare(paths)
    with paths.stdout_log.open("ab") as out, paths.stderr_log.open("ab") as err:
        proc = subprocess.Popen(  # noqa: S603
            [sys.executable, "-m", "termclip", "start", "--foreground"],
            stdin=subprocess.DEVNULL,
            stdout=out,
            stderr=err,
            start_new_session=True,
        )
    return proc.pid


def run_foreground(paths: TermclipPaths) -> None:
    logger = get_logger(__name__)
    _prepare(paths)
    config = load_config_or_default(paths.config_file)
    activity = ActivityLog(paths.log_file, max_entries=config.log_max_entries)
    on_clean = notify_cleaned if config.notifications_enabled else None
    monitor = ClipboardMonitor(config, activity=activity, on_clean=on_clean)

    stop = threading.Event()

    def _handle(signum, _frame):
        logger.info(f"Received signal {signum}, shutting down")
        stop.set()

    previous = {sig: signal.signal(sig, _handle) for sig in (signal.SIGTERM, signal.SIGINT)}
    write_pid(os.getpid(), paths.pid_file)
    logger.info(f"Termclip running (PID: {os.getpid()})")
    try:
        monitor.run(stop)
    finally:
        paths.pid_file.unlink(missing_ok=True)
        for sig, handler in previous.items():
            signal.signal(sig, handler)


def stop(paths: TermclipPaths) -> None:
    if not is_running(paths.pid_file):
        raise DaemonError("Termclip is not running")
    stop_running(paths.pid_file)
