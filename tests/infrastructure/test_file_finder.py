from __future__ import annotations

from pathlib import Path

from scenario_flow.infrastructure.scenario.file_finder import ScenarioFileFinder


def test_file_finder_finds_nested_scenarios_sorted(tmp_path: Path) -> None:
    base_dir = tmp_path / "scenarios"
    (base_dir / "sample-api1").mkdir(parents=True)
    (base_dir / "login.sf.py").write_text("", encoding="utf-8")
    (base_dir / "get_data.sf.py").write_text("", encoding="utf-8")
    (base_dir / "sample-api1" / "login.sf.py").write_text("", encoding="utf-8")

    found = ScenarioFileFinder(base_dir).find_all()

    assert [p.relative_to(base_dir.resolve()).as_posix() for p in found] == [
        "get_data.sf.py",
        "login.sf.py",
        "sample-api1/login.sf.py",
    ]


def test_file_finder_ignores_plain_python_files(tmp_path: Path) -> None:
    (tmp_path / "flows.py").write_text("", encoding="utf-8")
    (tmp_path / "notes.sf.txt").write_text("", encoding="utf-8")

    assert ScenarioFileFinder(tmp_path).find_all() == []


def test_file_finder_missing_directory_returns_empty(tmp_path: Path) -> None:
    assert ScenarioFileFinder(tmp_path / "nope").find_all() == []
