import plistlib

from termclip import autostart
from termclip.utils.paths import TermclipPaths, default_paths


def make_paths(tmp_path):
    return TermclipPaths(base_dir=tmp_path / "home", launch_agents_dir=tmp_path / "LaunchAgents")


def test_install_writes_launchd_plist(tmp_path):
    paths = make_paths(tmp_path)
    autostart.install(paths)
    assert autostart.is_installed(paths)
    with paths.launchd_plist.open("rb") as fh:
        data = plistlib.load(fh)
    assert data["Label"] == "com.termclip.agent"
    assert data["ProgramArguments"][-2:] == ["start", "--foreground"]
    assert data["RunAtLoad"] is True
    assert data["KeepAlive"] is False
    assert data["StandardErrorPath"] == str(paths.stderr_log)


def test_uninstall_removes_plist(tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr(autostart.subprocess, "run", lambda args, **kw: calls.append(args))
    paths = make_paths(tmp_path)
    autostart.install(paths)
    autostart.uninstall(paths)
    assert not autostart.is_installed(paths)
    assert calls[0][:2] == ["launchctl", "unload"]


def test_uninstall_when_missing_is_noop(tmp_path):
    autostart.uninstall(make_paths(tmp_path))


def test_default_paths_honours_env(tmp_path, monkeypatch):
    monkeypatch.setenv("TERMCLIP_HOME", str(tmp_path / "custom"))
    paths = default_paths(home=tmp_path)
    assert paths.config_file == tmp_path / "custom" / "config.json"
    assert paths.launchd_plist == tmp_path / "Library" / "LaunchAgents" / "com.termclip.agent.plist"
    monkeypatch.delenv("TERMCLIP_HOME")
    assert default_paths(home=tmp_path).pid_file == tmp_path / ".termclip" / "termclip.pid"
