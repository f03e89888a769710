from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from . import autostart, daemon
from .activity import ActivityLog
from .config import ConfigError, load_config_or_default, save_config
from .monitor.clipboard import ClipboardError, PyperclipClipboard
from .reflow import classify, clean
from .utils.logging import setup_logger
from .utils.paths import default_paths
from .version import __version__


app = typer.Typer(add_completion=False, no_args_is_help=True, help="Auto-clean clipboard text copied from terminal apps.")


def _fail(message: str) -> None:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def _log_level(ctx: typer.Context) -> str:
    return (ctx.obj or {}).get("log_level", "WARNING")


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
):
    # Load environment variables from .env if present (best-effort)
    try:
        from dotenv import load_dotenv  # type: ignore

        load_dotenv()
    except Exception:
        pass
    ctx.obj = {"log_level": log_level}
    setup_logger(log_level)


@app.command("clean")
def clean_cmd(
    source: Optional[Path] = typer.Argument(None, help="File to reflow; reads stdin when omitted"),
    clipboard: bool = typer.Option(False, "--clipboard", help="Read from and write back to the clipboard"),
    check: bool = typer.Option(False, "--check", help="Exit 1 if the text is not already clean"),
    explain: bool = typer.Option(False, "--explain", help="Print the chosen reflow strategy to stderr"),
):
    """Reflow text the same way the daemon does."""
    board = PyperclipClipboard()
    try:
        if clipboard:
            text = board.paste()
        elif source is not None:
            text = source.read_text(encoding="utf-8")
        else:
            text = sys.stdin.read()
    except (ClipboardError, OSError, UnicodeDecodeError) as e:
        _fail(str(e))

    result = clean(text)
    if explain:
        typer.echo(f"classification: {classify(text).value}", err=True)
    if check:
        raise typer.Exit(code=0 if result == text else 1)
    if clipboard:
        if result != text:
            try:
                board.copy(result)
            except ClipboardError as e:
                _fail(str(e))
        typer.echo("Clipboard cleaned" if result != text else "Clipboard already clean")
        return
    typer.echo(result)


@app.command()
def start(
    ctx: typer.Context,
    foreground: bool = typer.Option(False, "--foreground", help="Run in this process instead of detaching"),
):
    """Start the Termclip daemon."""
    paths = default_paths()
    try:
        if foreground:
            setup_logger(_log_level(ctx), show_time=True)
            daemon.run_foreground(paths)
            return
        pid = daemon.start_background(paths)
    except (daemon.DaemonError, OSError) as e:
        _fail(str(e))
    typer.echo(f"Termclip started (PID: {pid})")


@app.command()
def stop():
    """Stop the running daemon."""
    try:
        daemon.stop(default_paths())
    except daemon.DaemonError as e:
        _fail(str(e))
    typer.echo("Termclip stopped")


@app.command()
def status():
    """Show current status."""
    paths = default_paths()
    running = daemon.is_running(paths.pid_file)
    config = load_config_or_default(paths.config_file)
    typer.echo("Termclip status:")
    typer.echo(f"  Running:       {'yes' if running else 'no'}")
    if running:
        typer.echo(f"  PID:           {daemon.read_pid(paths.pid_file)}")
    typer.echo(f"  Notifications: {'on' if config.notifications_enabled else 'off'}")
    typer.echo(f"  Auto-start:    {'enabled' if autostart.is_installed(paths) else 'disabled'}")


@app.command()
def notifications(value: str = typer.Argument(..., help="on or off")):
    """Toggle desktop notifications."""
    if value not in ("on", "off"):
        typer.echo("Usage: termclip notifications <on|off>", err=True)
        raise typer.Exit(code=1)
    paths = default_paths()
    config = load_config_or_default(paths.config_file)
    config.notifications_enabled = value == "on"
    try:
        save_config(config, paths.config_file)
    except (ConfigError, OSError) as e:
        _fail(str(e))
    typer.echo(f"Notifications {value}")


@app.command("log")
def show_log(count: int = typer.Option(20, "--count", "-n", help="Number of entries to show")):
    """Show recent cleaning activity."""
    paths = default_paths()
    try:
        entries = ActivityLog(paths.log_file).recent(count)
    except (OSError, UnicodeDecodeError) as e:
        _fail(str(e))
    if not entries:
        typer.echo("No cleaning activity yet.")
        return
    for entry in entries:
        typer.echo(entry)


@app.command()
def enable():
    """Enable auto-start on login."""
    try:
        autostart.install(default_paths())
    except OSError as e:
        _fail(str(e))
    typer.echo("Auto-start enabled. Termclip will start on login.")


@app.command()
def disable():
    """Disable auto-start on login."""
    try:
        autostart.uninstall(default_paths())
    except OSError as e:
        _fail(str(e))
    typer.echo("Auto-start disabled.")


@app.command()
def version():
    """Show version."""
    typer.echo(f"termclip v{__version__}")


def entrypoint():
    app()

if __name__ == "__main__":
    entrypoint()
