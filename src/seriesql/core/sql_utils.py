"""
SQL utilities - engine-agnostic helpers for script handling.

Single source of truth for turning notebook script text into single-line
statements. No engine or dialect dependency.
"""

STATEMENT_DELIMITER = ";"

# Each occurrence becomes exactly one space; runs are not collapsed.
_SPACED_CHARACTERS = frozenset("\n\t")


def _normalize_line_breaks(script: str) -> str:
    """Fold CRLF and lone CR line endings into LF."""
    return script.replace("\r\n", "\n").replace("\r", "\n")


def _finish_statement(buffer: list[str], statements: list[str]) -> None:
    """Trim the buffered candidate and keep it if anything is left."""
    statement = "".join(buffer).strip()
    if statement:
        statements.append(statement)


def segment_script(script: str) -> list[str]:
    """Split a script into single-line statements.

    Every ``;`` ends a statement, including one inside a quoted literal.
    Newlines and tabs inside a statement are each replaced by one space, so
    a line break followed by an indenting tab leaves two spaces at the join.
    Candidates that are empty after trimming are dropped, and the final
    statement does not need a trailing delimiter.

    Args:
        script: Raw script text (e.g. a notebook cell).

    Returns:
        List of non-empty statement strings, in order.
    """
    statements: list[str] = []
    buffer: list[str] = []

    for char in _normalize_line_breaks(script):
        if char == STATEMENT_DELIMITER:
            _finish_statement(buffer, statements)
            buffer = []
            continue
        buffer.append(" " if char in _SPACED_CHARACTERS else char)

    _finish_statement(buffer, statements)
    return statements
