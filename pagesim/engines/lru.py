from __future__ import annotations

from typing import Dict, List

from ..engine_base import LoadResult, ReplacementEngine


class LRUEngine(ReplacementEngine):
    """LRU over per-page ages, where age counts references since the page was last touched."""

    policy_name = "LRU"

    def __init__(self, capacity: int):
        super().__init__(capacity)
        self.ages: Dict[int, int] = {}

    def load(self, page: int) -> LoadResult:
        hit = page in self.ages
        if hit:
            self.hits += 1
        else:
            self.faults += 1

        for other in self.ages:
            if other != page:
                self.ages[other] += 1
        self.ages[page] = 0

        if len(self.ages) > self._capacity:
            victim = self._select_victim()
            del self.ages[victim]
            self.evictions += 1
            return LoadResult.miss(victim)
        return LoadResult.hit() if hit else LoadResult.miss()

    def _select_victim(self) -> int:
        # oldest age wins; equal ages fall back to the smallest page id
        return min(self.ages.items(), key=lambda item: (-item[1], item[0]))[0]

    def resident_pages(self) -> List[int]:
        return list(self.ages)
