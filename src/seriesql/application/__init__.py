"""Application service layer for CLI and notebook callers."""

from .interpreter import Interpreter

__all__ = ["Interpreter"]
