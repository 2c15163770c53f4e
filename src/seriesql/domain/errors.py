"""Unified domain error taxonomy for script interpretation."""

from dataclasses import dataclass


@dataclass(slots=True)
class SeriesQLDomainError(Exception):
    """Base class for application/domain-level failures."""

    message: str
    code: str

    def __str__(self) -> str:
        return self.message


class EngineNotFoundError(SeriesQLDomainError):
    """Raised when an engine reference cannot be resolved."""


class EngineConfigurationError(SeriesQLDomainError):
    """Raised for invalid engine options or interpreter properties."""


class StatementExecutionError(SeriesQLDomainError):
    """Raised by engines that report statement failures as exceptions."""
