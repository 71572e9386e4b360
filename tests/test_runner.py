import subprocess

from ddk_postinstall import runner as runner_mod
from ddk_postinstall.runner import CommandRunner, resolve


def test_resolve_uses_path_lookup(monkeypatch):
    monkeypatch.setattr(runner_mod.shutil, "which",
                        lambda name: r"C:\Program Files\nodejs\npx.CMD" if name == "npx" else None)
    assert resolve(["npx", "uniffi-bindgen-react-native", "--help"]) == [
        r"C:\Program Files\nodejs\npx.CMD", "uniffi-bindgen-react-native", "--help",
    ]


def test_resolve_leaves_unknown_binary(monkeypatch):
    monkeypatch.setattr(runner_mod.shutil, "which", lambda name: None)
    assert resolve(["uniffi-bindgen-react-native", "--help"]) == ["uniffi-bindgen-react-native", "--help"]


def test_command_runner_spawns_resolved_binary(tmp_path, monkeypatch, capsys):
    calls = []

    def fake_run(cmd, cwd=None, check=False, **kwargs):
        calls.append((cmd, cwd, check, kwargs))
        return subprocess.CompletedProcess(cmd, 3)

    monkeypatch.setattr(runner_mod.shutil, "which", lambda name: "/usr/local/bin/" + name)
    monkeypatch.setattr(runner_mod.subprocess, "run", fake_run)

    assert CommandRunner().run(["npx", "uniffi-bindgen-react-native", "build", "ios"], cwd=tmp_path) == 3
    cmd, cwd, check, kwargs = calls[0]
    assert cmd[0] == "/usr/local/bin/npx"
    assert cwd == tmp_path
    assert check is False
    assert kwargs == {}
    assert "$ /usr/local/bin/npx uniffi-bindgen-react-native build ios" in capsys.readouterr().out


def test_quiet_run_silences_output(tmp_path, monkeypatch, capsys):
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append(kwargs)
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr(runner_mod.shutil, "which", lambda name: None)
    monkeypatch.setattr(runner_mod.subprocess, "run", fake_run)

    assert CommandRunner().run(["npx", "--help"], cwd=tmp_path, quiet=True) == 0
    assert calls[0]["stdout"] is subprocess.DEVNULL
    assert calls[0]["stderr"] is subprocess.DEVNULL
    assert capsys.readouterr().out == ""
