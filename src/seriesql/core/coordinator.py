"""
Statement Coordinator

Dispatches segmented statements to a query engine, one at a time and in
order, and aggregates their outcomes into a single result.
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from seriesql.config import ExecutionConfig
from seriesql.core.formatting import describe_exception
from seriesql.domain.results import (
    AggregatedResult,
    StatementFailure,
    StatementOutcome,
    StatementSuccess,
)

if TYPE_CHECKING:
    from seriesql.engines.base import QueryEngine

console = Console(stderr=True)


class StatementCoordinator:
    """Execute statements sequentially against one engine

    Statement failures are captured as StatementFailure outcomes and never
    raised. Whether execution continues after a failure is decided by
    ``ExecutionConfig.failure_policy``.

    Attributes:
        engine: Query engine every statement is dispatched to
    """

    def __init__(self, engine: QueryEngine) -> None:
        """Initialize coordinator with an engine

        Args:
            engine: Query engine (session lifecycle is owned by the caller)
        """
        self.engine = engine

    def execute_statements(
        self, statements: Sequence[str], config: ExecutionConfig | None = None
    ) -> AggregatedResult:
        """Execute statements in order and aggregate their outcomes

        Args:
            statements: Normalized statements, in segmentation order
            config: Execution configuration (failure policy, progress output)

        Returns:
            AggregatedResult with one outcome per dispatched statement
        """
        config = config or ExecutionConfig()
        outcomes: list[StatementOutcome] = []
        skipped: list[str] = []
        start_time = time.time()

        if config.show_progress and statements:
            console.print(f"[bold cyan]Executing {len(statements)} statements...[/bold cyan]")

        for i, statement in enumerate(statements, 1):
            outcome = self._dispatch(statement)
            outcomes.append(outcome)

            if config.show_progress:
                self._report(i, len(statements), outcome)

            if isinstance(outcome, StatementFailure) and config.failure_policy == "stop":
                skipped = list(statements[i:])
                break

        if config.show_progress and skipped:
            console.print(f"[yellow]Skipped {len(skipped)} remaining statement(s)[/yellow]")

        return AggregatedResult(
            outcomes=outcomes,
            skipped_statements=skipped,
            total_statements=len(statements),
            total_execution_time_ms=int((time.time() - start_time) * 1000),
        )

    def _dispatch(self, statement: str) -> StatementOutcome:
        """Execute one statement; escaped exceptions and non-outcome returns become failures."""
        exec_start = time.time()
        try:
            outcome = self.engine.execute(statement)
        except Exception as e:
            outcome = StatementFailure(statement=statement, diagnostic=describe_exception(e))

        if not isinstance(outcome, (StatementSuccess, StatementFailure)):
            outcome = StatementFailure(
                statement=statement,
                diagnostic=f"Engine returned {type(outcome).__name__} instead of a statement outcome",
            )

        if not outcome.execution_time_ms:
            elapsed_ms = int((time.time() - exec_start) * 1000)
            outcome = outcome.model_copy(update={"execution_time_ms": elapsed_ms})
        return outcome

    @staticmethod
    def _report(index: int, total: int, outcome: StatementOutcome) -> None:
        """Print one progress line for a finished statement."""
        if isinstance(outcome, StatementFailure):
            console.print(
                f"  [red]✗[/red] Statement {index}/{total} failed: {escape(outcome.diagnostic)}"
            )
        else:
            exec_time = outcome.execution_time_ms / 1000
            console.print(
                f"  [green]✓[/green] Statement {index}/{total} completed in {exec_time:.2f}s"
            )


def run_statements(
    statements: Sequence[str], engine: QueryEngine, config: ExecutionConfig | None = None
) -> AggregatedResult:
    """Execute statements against ``engine``; see StatementCoordinator."""
    return StatementCoordinator(engine).execute_statements(statements, config)
