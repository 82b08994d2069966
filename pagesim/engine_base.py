from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional


class InvalidCapacity(ValueError):
    """Raised when an engine is built with fewer than one frame."""


@dataclass(frozen=True)
class LoadResult:
    """Outcome of one page reference: a hit, or a fault that may have evicted a page."""

    fault: bool
    evicted: Optional[int] = None

    @classmethod
    def hit(cls) -> "LoadResult":
        return cls(fault=False)

    @classmethod
    def miss(cls, evicted: Optional[int] = None) -> "LoadResult":
        return cls(fault=True, evicted=evicted)

    @property
    def is_hit(self) -> bool:
        return not self.fault

    @property
    def is_fault(self) -> bool:
        return self.fault

    def describe(self) -> str:
        """'none' on a hit, 'empty' when a free frame was filled, else the evicted page."""
        if not self.fault:
            return "none"
        if self.evicted is None:
            return "empty"
        return str(self.evicted)


class ReplacementEngine(ABC):

    policy_name = ""

    def __init__(self, capacity: int):
        if capacity < 1:
            raise InvalidCapacity(f"Resident set size must be at least 1, got {capacity}")
        self._capacity = capacity
        self.faults = 0
        self.hits = 0
        self.evictions = 0

    def capacity(self) -> int:
        return self._capacity

    def fault_count(self) -> int:
        return self.faults

    @abstractmethod
    def load(self, page: int) -> LoadResult:
        """Reference a page; return a hit or a fault with the displaced page, if any."""

    @abstractmethod
    def resident_pages(self) -> List[int]:
        """Return a snapshot copy of the pages currently held."""

    def get_stats(self) -> Dict[str, int]:
        return {"hits": self.hits, "faults": self.faults, "evictions": self.evictions}
