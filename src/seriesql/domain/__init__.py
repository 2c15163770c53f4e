"""Domain types and contracts for SeriesQL script interpretation."""

from .errors import (
    EngineConfigurationError,
    EngineNotFoundError,
    SeriesQLDomainError,
    StatementExecutionError,
)
from .results import AggregatedResult, StatementFailure, StatementOutcome, StatementSuccess

__all__ = [
    "AggregatedResult",
    "StatementFailure",
    "StatementOutcome",
    "StatementSuccess",
    "SeriesQLDomainError",
    "EngineNotFoundError",
    "EngineConfigurationError",
    "StatementExecutionError",
]
