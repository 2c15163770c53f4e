"""
Base Query Engine Protocol

Defines the contract for executing one statement against a time-series
database. Engines implement this protocol to be driven by the coordinator;
connection handling and wire protocols stay inside the engine.
"""

import time
from collections.abc import Callable, Sequence
from typing import Protocol

from seriesql.core.formatting import describe_exception
from seriesql.domain.results import StatementFailure, StatementOutcome, StatementSuccess


class QueryEngine(Protocol):
    """Protocol for executing a single normalized statement

    Implementations return a StatementOutcome instead of raising for
    statement-level failures (syntax errors, unknown series, ...).
    """

    def execute(self, statement: str) -> StatementOutcome:
        """Execute one statement

        Args:
            statement: Single-line statement without its delimiter

        Returns:
            StatementSuccess with rendered output, or StatementFailure with
            the engine diagnostic
        """
        ...


EngineFactory = Callable[..., QueryEngine]


def succeed(
    statement: str, output: str | Sequence[str], execution_time_ms: int = 0
) -> StatementSuccess:
    """Build a success outcome from rendered text or a list of lines.

    An empty sequence renders as a single empty line.
    """
    lines = output.split("\n") if isinstance(output, str) else list(output) or [""]
    return StatementSuccess(statement=statement, lines=lines, execution_time_ms=execution_time_ms)


def fail(statement: str, diagnostic: str, execution_time_ms: int = 0) -> StatementFailure:
    """Build a failure outcome carrying the engine diagnostic verbatim."""
    return StatementFailure(
        statement=statement, diagnostic=diagnostic, execution_time_ms=execution_time_ms
    )


def capture(statement: str, func: Callable[[], str | Sequence[str]]) -> StatementOutcome:
    """Run ``func`` and wrap its rendered output, or its exception, as an outcome.

    Lets engines built on raising drivers satisfy the protocol without their
    own try/except around every call.
    """
    start = time.time()
    try:
        output = func()
    except Exception as e:
        return fail(statement, describe_exception(e), int((time.time() - start) * 1000))
    return succeed(statement, output, int((time.time() - start) * 1000))
