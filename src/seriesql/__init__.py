"""
SeriesQL

Script segmentation and ordered statement execution for time-series
database notebook interpreters.
"""

__version__ = "0.1.0"

from .config import ExecutionConfig, InterpreterConfig
from .core import (
    StatementCoordinator,
    render_rows,
    run_statements,
    segment_script,
)
from .domain import (
    AggregatedResult,
    StatementFailure,
    StatementOutcome,
    StatementSuccess,
)
from .engines import EngineRegistry, QueryEngine
from .application import Interpreter

__all__ = [
    "__version__",
    "ExecutionConfig",
    "InterpreterConfig",
    "segment_script",
    "render_rows",
    "StatementCoordinator",
    "run_statements",
    "AggregatedResult",
    "StatementFailure",
    "StatementOutcome",
    "StatementSuccess",
    "EngineRegistry",
    "QueryEngine",
    "Interpreter",
]
