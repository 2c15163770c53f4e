"""
Query Engines

Engine contract, outcome constructors and the engine registry.
"""

from .base import EngineFactory, QueryEngine, capture, fail, succeed
from .registry import EngineRegistry, EngineRegistryClass

__all__ = [
    "EngineFactory",
    "QueryEngine",
    "capture",
    "fail",
    "succeed",
    "EngineRegistry",
    "EngineRegistryClass",
]
