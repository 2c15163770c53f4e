"""Application service for interpreting notebook scripts.

An Interpreter binds one engine session to one configuration and answers
each interpretation request independently: segment the script, then run
the statements in order.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from seriesql.config import InterpreterConfig
from seriesql.core.coordinator import StatementCoordinator
from seriesql.core.sql_utils import segment_script
from seriesql.domain.errors import EngineConfigurationError
from seriesql.domain.results import AggregatedResult
from seriesql.engines.base import QueryEngine
from seriesql.engines.registry import EngineRegistry


@dataclass(slots=True)
class Interpreter:
    """Interpret scripts against an explicitly supplied engine."""

    engine: QueryEngine
    config: InterpreterConfig = field(default_factory=InterpreterConfig)

    @classmethod
    def from_config(cls, config: InterpreterConfig) -> Interpreter:
        """Build the configured engine through the registry.

        Raises:
            EngineConfigurationError: If no engine is configured or its options are rejected
            EngineNotFoundError: If the engine reference cannot be resolved
        """
        if not config.engine:
            raise EngineConfigurationError(
                "No engine configured (set 'seriesql.engine')", code="engine_configuration"
            )
        engine = EngineRegistry.create(config.engine, **config.engine_options)
        return cls(engine=engine, config=config)

    def interpret(self, script: str) -> AggregatedResult:
        statements = segment_script(script)
        return StatementCoordinator(self.engine).execute_statements(
            statements, self.config.execution
        )

    def close(self) -> None:
        """Close the engine if it exposes ``close()``."""
        close = getattr(self.engine, "close", None)
        if callable(close):
            close()
