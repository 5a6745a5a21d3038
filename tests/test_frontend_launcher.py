import subprocess
from pathlib import Path

from huffman_codec import frontend


def test_build_command_adds_defaults():
    command = frontend.build_streamlit_command(Path("app.py"))
    assert command == [
        "streamlit",
        "run",
        "app.py",
        "--server.headless",
        "true",
        "--browser.gatherUsageStats",
        "false",
    ]


def test_build_command_forwards_and_overrides():
    command = frontend.build_streamlit_command(
        Path("app.py"), ["--server.port", "8600", "--server.headless=false"]
    )
    assert command[-3:] == ["--server.port", "8600", "--server.headless=false"]
    assert "--server.headless" not in command
    assert command[3:5] == ["--browser.gatherUsageStats", "false"]


def test_app_path_points_at_demo():
    assert frontend.APP_PATH.name == "app.py"
    assert frontend.APP_PATH.parent.name == "frontend"


def test_main_forwards_args_and_exit_code(tmp_path, monkeypatch):
    app = tmp_path / "app.py"
    app.write_text("", encoding="utf-8")
    monkeypatch.setattr(frontend, "APP_PATH", app)
    calls = []

    def fake_run(command):
        calls.append(command)
        return subprocess.CompletedProcess(command, 3)

    monkeypatch.setattr(frontend.subprocess, "run", fake_run)

    assert frontend.main(["--server.port", "8600"]) == 3
    assert calls[0][:3] == ["streamlit", "run", str(app)]
    assert calls[0][-2:] == ["--server.port", "8600"]


def test_main_without_streamlit(tmp_path, monkeypatch, capsys):
    app = tmp_path / "app.py"
    app.write_text("", encoding="utf-8")
    monkeypatch.setattr(frontend, "APP_PATH", app)

    def missing(command):
        raise FileNotFoundError(command[0])

    monkeypatch.setattr(frontend.subprocess, "run", missing)

    assert frontend.main([]) == 1
    assert "streamlit is not installed" in capsys.readouterr().err


def test_main_missing_app(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(frontend, "APP_PATH", tmp_path / "app.py")
    assert frontend.main([]) == 1
    assert "could not find the demo app" in capsys.readouterr().err
