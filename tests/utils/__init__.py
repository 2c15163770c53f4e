"""Shared test helpers."""

from .cli_helpers import invoke_cli
from .engines import TimeseriesStubEngine, build_engine

__all__ = ["TimeseriesStubEngine", "build_engine", "invoke_cli"]
