"""
Statement Outcomes

Typed per-statement outcomes and the aggregated result returned for one
interpreted script.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, computed_field


class StatementSuccess(BaseModel):
    """Successful execution of one statement

    Attributes:
        status: Discriminator, always "success"
        statement: The statement that was executed
        lines: Rendered output lines (a table or a plain acknowledgement)
        execution_time_ms: Time taken to execute in milliseconds
    """

    status: Literal["success"] = "success"
    statement: str = Field(..., description="Executed statement")
    lines: list[str] = Field(..., min_length=1, description="Rendered output lines")
    execution_time_ms: int = Field(default=0, description="Execution time in milliseconds")

    @property
    def payload(self) -> str:
        return "\n".join(self.lines)


class StatementFailure(BaseModel):
    """Failed execution of one statement

    Attributes:
        status: Discriminator, always "failure"
        statement: The statement that was executed
        diagnostic: Human-readable error reported by the engine
        execution_time_ms: Time taken before the failure in milliseconds
    """

    status: Literal["failure"] = "failure"
    statement: str = Field(..., description="Executed statement")
    diagnostic: str = Field(..., description="Engine diagnostic")
    execution_time_ms: int = Field(default=0, description="Execution time in milliseconds")

    @property
    def payload(self) -> str:
        return self.diagnostic


StatementOutcome = Annotated[StatementSuccess | StatementFailure, Field(discriminator="status")]


class AggregatedResult(BaseModel):
    """Result of interpreting one script

    Attributes:
        outcomes: Outcome of every dispatched statement, in order
        skipped_statements: Statements never dispatched because execution stopped
        total_statements: Number of statements the script segmented into
        total_execution_time_ms: Total execution time in milliseconds
    """

    outcomes: list[StatementOutcome] = Field(
        default_factory=list, description="Per-statement outcomes"
    )
    skipped_statements: list[str] = Field(
        default_factory=list, description="Statements not dispatched"
    )
    total_statements: int = Field(default=0, description="Total statements")
    total_execution_time_ms: int = Field(default=0, description="Total execution time (ms)")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def status(self) -> Literal["success", "error"]:
        """Overall status: error if and only if some statement failed."""
        return "error" if self.failed_statement_index is not None else "success"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def failed_statement_index(self) -> int | None:
        for index, outcome in enumerate(self.outcomes):
            if isinstance(outcome, StatementFailure):
                return index
        return None

    @property
    def successful_statements(self) -> int:
        return sum(1 for outcome in self.outcomes if isinstance(outcome, StatementSuccess))

    def messages(self) -> list[str]:
        """Return one text payload per dispatched statement, in order."""
        return [outcome.payload for outcome in self.outcomes]
