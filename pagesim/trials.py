"""
Built-in trial data.

The reference string mixes a long run of repeats with a scattering of cold
pages, so small resident sets fault heavily and FIFO and LRU diverge once
the first eviction happens. Per-step tables are printed only for
TRACE_CAPACITY; other capacities contribute to the summary table.
"""

from __future__ import annotations

from typing import List, Tuple

DEFAULT_REFERENCES: Tuple[int, ...] = (
    1, 1, 1, 1, 0, 3, 1, 1, 3, 5, 1, 8, 1, 3, 5, 13,
    15, 6, 1, 1, 3, 6, 7, 8, 9, 3, 1, 1, 4, 4, 4, 1, 2,
)
DEFAULT_CAPACITIES: Tuple[int, ...] = (3, 5, 7)
TRACE_CAPACITY = 3


def parse_int_list(text: str) -> List[int]:
    """Parse '1,2 3' style input (commas and/or spaces) into a list of ints."""
    values = []
    for part in text.replace(",", " ").split():
        try:
            values.append(int(part))
        except ValueError:
            raise ValueError(f"'{part}' is not a valid integer") from None
    if not values:
        raise ValueError("Expected at least one integer")
    return values
