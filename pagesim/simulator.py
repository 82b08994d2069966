from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from .engine_base import LoadResult, ReplacementEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StepRecord:
    """One row of a trial: the reference, what the engine did, and what it holds afterwards."""

    index: int
    page: int
    result: LoadResult
    resident: Tuple[int, ...]


@dataclass
class SimulationResult:
    """Statistics for one policy at one resident set size, rendered by ReportBuilder."""

    policy: str
    capacity: int
    total_references: int
    faults: int
    hits: int
    evictions: int
    steps: List[StepRecord] = field(default_factory=list)

    @property
    def fault_ratio(self) -> float:
        """Faults / total references, as a fraction."""
        return self.faults / self.total_references if self.total_references else 0.0

    @property
    def hit_ratio(self) -> float:
        return self.hits / self.total_references if self.total_references else 0.0

    def load_results(self) -> List[LoadResult]:
        return [step.result for step in self.steps]


class Simulator:
    """Feeds a reference string through an engine in order and records every step."""

    def __init__(self, references: Iterable[int]):
        self.references: List[int] = list(references)

    def run(self, engine: ReplacementEngine) -> SimulationResult:
        steps: List[StepRecord] = []
        for index, page in enumerate(self.references):
            result = engine.load(page)
            steps.append(StepRecord(index, page, result, tuple(engine.resident_pages())))

        stats: Dict[str, int] = engine.get_stats()
        result = SimulationResult(
            policy=engine.policy_name,
            capacity=engine.capacity(),
            total_references=len(self.references),
            faults=engine.fault_count(),
            hits=stats["hits"],
            evictions=stats["evictions"],
            steps=steps,
        )
        logger.debug(
            "%s rss=%d: %d faults over %d references (ratio %.4f)",
            result.policy,
            result.capacity,
            result.faults,
            result.total_references,
            result.fault_ratio,
        )
        return result
