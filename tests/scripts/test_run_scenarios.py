from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from scripts import run_scenarios


@pytest.fixture
def scenario_dir(tmp_path: Path) -> Path:
    (tmp_path / "nested").mkdir()
    (tmp_path / "login.sf.py").write_text("", encoding="utf-8")
    (tmp_path / "nested" / "get_data.sf.py").write_text("", encoding="utf-8")
    (tmp_path / "flows.py").write_text("", encoding="utf-8")
    return tmp_path


def test_help_exits_zero(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run_scenarios.main(["-h"])

    assert excinfo.value.code == 0
    assert "DIRECTORY" in capsys.readouterr().out.upper()


def test_runs_each_scenario_and_prints_summary(monkeypatch, capsys, scenario_dir: Path, log_lines) -> None:
    # Arrange
    executed = []

    def fake_run(cmd, cwd):
        executed.append(Path(cmd[1]).name)
        return subprocess.CompletedProcess(cmd, 1 if "get_data" in cmd[1] else 0)

    monkeypatch.setattr(run_scenarios.subprocess, "run", fake_run)
    monkeypatch.setattr(run_scenarios, "setup_console_logging", lambda level: None)

    # Act
    exit_code = run_scenarios.main([str(scenario_dir)])

    # Assert
    out = capsys.readouterr().out
    assert exit_code == 0
    assert sorted(executed) == ["get_data.sf.py", "login.sf.py"]
    assert "Found 2 .sf.py files:" in out
    assert "flows.py" not in out
    assert any("1/2 scenarios executed successfully" in line for line in log_lines)


def test_no_scenarios_found(monkeypatch, capsys, tmp_path: Path) -> None:
    monkeypatch.setattr(run_scenarios, "setup_console_logging", lambda level: None)

    exit_code = run_scenarios.main([str(tmp_path)])

    assert exit_code == 0
    assert "No .sf.py files found." in capsys.readouterr().out


def test_execute_scenario_file_handles_os_error(monkeypatch, tmp_path: Path) -> None:
    def fake_run(cmd, cwd):
        raise OSError("interpreter missing")

    monkeypatch.setattr(run_scenarios.subprocess, "run", fake_run)

    assert run_scenarios.execute_scenario_file(tmp_path / "x.sf.py") is False
