"""
Core Infrastructure

Engine-agnostic building blocks for SeriesQL:
- SQL utils: Statement segmentation for notebook scripts
- Coordinator: Ordered execution and outcome aggregation
- Formatting: Result tables, acknowledgements and diagnostics
"""

from .coordinator import StatementCoordinator, run_statements
from .formatting import NON_QUERY_ACKNOWLEDGEMENT, describe_exception, render_rows
from .sql_utils import STATEMENT_DELIMITER, segment_script

__all__ = [
    # SQL utils
    "STATEMENT_DELIMITER",
    "segment_script",
    # Coordinator
    "StatementCoordinator",
    "run_statements",
    # Formatting
    "NON_QUERY_ACKNOWLEDGEMENT",
    "describe_exception",
    "render_rows",
]
