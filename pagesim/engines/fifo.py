from __future__ import annotations

from collections import deque
from typing import Deque, List, Set

from ..engine_base import LoadResult, ReplacementEngine


class FIFOEngine(ReplacementEngine):
    """Evicts the longest-resident page. A hit never changes eviction order."""

    policy_name = "FIFO"

    def __init__(self, capacity: int):
        super().__init__(capacity)
        self.queue: Deque[int] = deque()
        self.members: Set[int] = set()

    def load(self, page: int) -> LoadResult:
        if page in self.members:
            self.hits += 1
            return LoadResult.hit()

        self.faults += 1
        self.queue.append(page)
        self.members.add(page)
        if len(self.queue) > self._capacity:
            evicted = self.queue.popleft()
            self.members.remove(evicted)
            self.evictions += 1
            return LoadResult.miss(evicted)
        return LoadResult.miss()

    def resident_pages(self) -> List[int]:
        # oldest first
        return list(self.queue)
