"""Find scenario files under a directory."""
from pathlib import Path
from typing import List

SCENARIO_SUFFIX = ".sf.py"


class ScenarioFileFinder:
    """Search scenario files under the given base directory."""

    def __init__(self, base_dir: Path, suffix: str = SCENARIO_SUFFIX):
        self.base_dir = base_dir
        self.suffix = suffix

    def find_all(self) -> List[Path]:
        """
        Find every scenario file below base_dir, recursively.

        Returns:
            Resolved paths sorted by their string form, so runs are ordered
            the same way on every platform. Empty if base_dir does not exist.
        """
        base = Path(self.base_dir).resolve()
        if not base.is_dir():
            return []

        found = [
            path
            for path in base.rglob(f"*{self.suffix}")
            if path.is_file()
        ]
        return sorted(found, key=str)
