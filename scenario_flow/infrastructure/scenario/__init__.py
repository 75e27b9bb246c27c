# scenario_flow/infrastructure/scenario/__init__.py
from scenario_flow.infrastructure.scenario.file_finder import SCENARIO_SUFFIX, ScenarioFileFinder

__all__ = ["SCENARIO_SUFFIX", "ScenarioFileFinder"]
