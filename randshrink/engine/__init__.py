"""Random shrink search engine."""

from .engine import Engine, EngineConfig, EngineResults, ImprovementStats
from .interfaces import AlgorithmRun, Searcher
from .search import RandomShrinkSearch
from .searchers import ComboSearcher, RandomSearcher, ShrinkSearcher, searcher_from_name
from .types import Trial, VariableWindow

__all__ = [
    "AlgorithmRun",
    "Searcher",
    "RandomShrinkSearch",
    "RandomSearcher",
    "ShrinkSearcher",
    "ComboSearcher",
    "searcher_from_name",
    "Engine",
    "EngineConfig",
    "EngineResults",
    "ImprovementStats",
    "Trial",
    "VariableWindow",
]
