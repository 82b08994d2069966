"""Concrete page replacement engines."""

from typing import Dict, Type

from ..engine_base import ReplacementEngine
from .fifo import FIFOEngine  # noqa: F401
from .lru import LRUEngine  # noqa: F401

ENGINE_FACTORIES: Dict[str, Type[ReplacementEngine]] = {
    FIFOEngine.policy_name: FIFOEngine,
    LRUEngine.policy_name: LRUEngine,
}
