#!/usr/bin/env python3
"""
Scenario runner

Finds every *.sf.py file under a directory (recursively) and runs each one
in its own Python process. A scenario counts as successful when its process
exits with code 0.

Usage:
  python scripts/run_scenarios.py [DIRECTORY]

Examples:
  python scripts/run_scenarios.py                # current directory
  python scripts/run_scenarios.py ./scenarios    # a scenario folder
"""
from __future__ import annotations

import argparse
import subprocess
import sys
import time
from pathlib import Path
from typing import List

from dotenv import load_dotenv

from scenario_flow.application.scenario_logger import default_logger
from scenario_flow.infrastructure.logging.log_setup import setup_console_logging
from scenario_flow.infrastructure.scenario.file_finder import SCENARIO_SUFFIX, ScenarioFileFinder


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="run_scenarios",
        description=f"Run every {SCENARIO_SUFFIX} scenario file found under DIRECTORY.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to search for scenario files (default: current directory)",
    )
    return parser


def find_scenario_files(directory: str) -> List[Path]:
    return ScenarioFileFinder(Path(directory)).find_all()


def execute_scenario_file(path: Path) -> bool:
    try:
        completed = subprocess.run([sys.executable, str(path)], cwd=str(path.parent))
    except OSError as exc:
        print(f"Error executing {path}: {exc}")
        return False
    return completed.returncode == 0


def main(argv: List[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_console_logging(level="INFO")

    print(f"🔍 Searching for {SCENARIO_SUFFIX} files in: {args.directory}")
    files = find_scenario_files(args.directory)
    if not files:
        print(f"❌ No {SCENARIO_SUFFIX} files found.")
        return 0

    print(f"✅ Found {len(files)} {SCENARIO_SUFFIX} files:")
    for path in files:
        print(f"  📄 {path}")
    print("")

    t0 = time.perf_counter()
    success_count = 0
    for path in files:
        if execute_scenario_file(path):
            success_count += 1
    elapsed_ms = (time.perf_counter() - t0) * 1000

    default_logger.log_execution_summary(len(files), success_count, elapsed_ms)
    return 0


if __name__ == "__main__":
    load_dotenv()
    sys.exit(main())
