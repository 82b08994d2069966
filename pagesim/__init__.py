"""PAGESIM - FIFO / LRU page replacement simulator package."""

from .engine_base import InvalidCapacity, LoadResult, ReplacementEngine  # noqa: F401
from .engines import FIFOEngine, LRUEngine  # noqa: F401
from .simulator import Simulator, SimulationResult  # noqa: F401
from .report import ReportBuilder  # noqa: F401
