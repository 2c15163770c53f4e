"""Text rendering shared by engines: result tables, acknowledgements, diagnostics."""

from collections.abc import Iterable, Sequence

NON_QUERY_ACKNOWLEDGEMENT = "Sql executed."

_FIELD_SEPARATOR = "\t"


def render_rows(columns: Sequence[str], rows: Iterable[Sequence[object]]) -> str:
    """Render a result set as a header line plus one tab-separated line per row.

    No trailing newline is added, so a query returning no rows renders as
    the header alone.
    """
    lines = [_FIELD_SEPARATOR.join(columns)]
    lines.extend(_FIELD_SEPARATOR.join(_render_value(value) for value in row) for row in rows)
    return "\n".join(lines)


def _render_value(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def describe_exception(exc: BaseException) -> str:
    """Return ``"<TypeName>: <message>"`` for an engine-side exception."""
    message = str(exc)
    name = type(exc).__name__
    return f"{name}: {message}" if message else name
