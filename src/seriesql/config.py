"""
Interpreter Configuration

Pydantic models for execution behavior and for notebook-style interpreter
properties (``seriesql.*`` keys).
"""

from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from seriesql.domain.errors import EngineConfigurationError

PROPERTY_PREFIX = "seriesql."
ENGINE_PROPERTY = "seriesql.engine"
ENGINE_OPTION_PREFIX = "seriesql.engine."

_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES = frozenset({"false", "0", "no", "off"})


class ExecutionConfig(BaseModel):
    """Configuration for statement execution

    Attributes:
        failure_policy: "continue" runs every statement; "stop" halts after
            the first failure and reports the rest as skipped
        show_progress: If True, print per-statement progress to stderr
    """

    failure_policy: Literal["continue", "stop"] = Field(
        default="continue", description="Behavior after a failed statement"
    )
    show_progress: bool = Field(default=False, description="Print per-statement progress")


class InterpreterConfig(BaseModel):
    """Configuration for one interpreter instance

    Attributes:
        execution: Statement execution behavior
        engine: Engine reference (registered name or ``module:attribute``)
        engine_options: Keyword options passed to the engine factory
    """

    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
    engine: str | None = Field(None, description="Engine reference")
    engine_options: dict[str, str] = Field(
        default_factory=dict, description="Engine factory options"
    )

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> "InterpreterConfig":
        """Build a config from flat interpreter properties

        Recognized keys:
            seriesql.failure_policy: "continue" or "stop"
            seriesql.show_progress: boolean string
            seriesql.engine: engine reference
            seriesql.engine.<option>: engine factory option

        Keys outside the ``seriesql.`` namespace are ignored.

        Raises:
            EngineConfigurationError: If a property value is invalid
        """
        execution: dict[str, object] = {}
        engine: str | None = None
        engine_options: dict[str, str] = {}

        for key, value in properties.items():
            if key == ENGINE_PROPERTY:
                engine = value.strip() or None
            elif key.startswith(ENGINE_OPTION_PREFIX):
                engine_options[key[len(ENGINE_OPTION_PREFIX) :]] = value
            elif key == f"{PROPERTY_PREFIX}failure_policy":
                execution["failure_policy"] = value.strip().lower()
            elif key == f"{PROPERTY_PREFIX}show_progress":
                execution["show_progress"] = _parse_bool(key, value)

        try:
            return cls(
                execution=ExecutionConfig(**execution),
                engine=engine,
                engine_options=engine_options,
            )
        except ValidationError as e:
            raise EngineConfigurationError(
                f"Invalid interpreter properties: {e}", code="engine_configuration"
            ) from e


def _parse_bool(key: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise EngineConfigurationError(
        f"Property '{key}' expects a boolean, got '{value}'", code="engine_configuration"
    )
