from collections.abc import Iterator

import pytest

from seriesql.engines.registry import EngineRegistry
from tests.utils import TimeseriesStubEngine, build_engine


@pytest.fixture
def stub_engine() -> TimeseriesStubEngine:
    """Fresh in-memory engine with no storage groups or series"""
    return TimeseriesStubEngine()


@pytest.fixture
def registered_stub_engine() -> Iterator[str]:
    """Register the stub engine factory under the name 'stub' for one test"""
    EngineRegistry.register("stub", build_engine)
    yield "stub"
    EngineRegistry.unregister("stub")
