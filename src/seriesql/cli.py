"""
Click-based CLI for SeriesQL.
"""

import json
import sys
from typing import IO, Optional

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .application import Interpreter
from .config import ExecutionConfig, InterpreterConfig
from .core.sql_utils import segment_script
from .domain.errors import SeriesQLDomainError
from .domain.results import AggregatedResult, StatementFailure

console = Console()
err_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__, prog_name="seriesql")
def cli() -> None:
    """SeriesQL CLI for running time-series SQL scripts"""
    pass


@cli.command()
@click.argument("script", type=click.File("r"))
@click.option("--json", "json_output", is_flag=True, help="Output statements as JSON")
def split(script: IO[str], json_output: bool) -> None:
    """Split a script into single-line statements (use - for stdin)"""

    statements = segment_script(script.read())

    if json_output:
        print(json.dumps({"statements": statements, "count": len(statements)}))
        return

    for statement in statements:
        click.echo(statement)


@cli.command()
@click.argument("script", type=click.File("r"))
@click.option(
    "--engine",
    "-e",
    help="Engine name or package.module:factory reference",
)
@click.option(
    "--option",
    "-o",
    "options",
    multiple=True,
    help="Engine factory option as key=value (repeatable)",
)
@click.option(
    "--properties",
    "-p",
    type=click.File("r"),
    help="Interpreter properties file (seriesql.* keys, key=value per line)",
)
@click.option("--stop-on-error", is_flag=True, help="Stop at the first failing statement")
@click.option("--progress", is_flag=True, help="Show per-statement progress on stderr")
@click.option("--json", "json_output", is_flag=True, help="Output the result as JSON")
def run(
    script: IO[str],
    engine: Optional[str],
    options: tuple[str, ...],
    properties: Optional[IO[str]],
    stop_on_error: bool,
    progress: bool,
    json_output: bool,
) -> None:
    """Run every statement of a script against an engine (use - for stdin)"""

    engine_options = _parse_options(options)

    try:
        base = (
            InterpreterConfig.from_properties(_read_properties(properties))
            if properties
            else InterpreterConfig()
        )
        config = InterpreterConfig(
            engine=engine or base.engine,
            engine_options={**base.engine_options, **engine_options},
            execution=ExecutionConfig(
                failure_policy="stop" if stop_on_error else base.execution.failure_policy,
                show_progress=progress or base.execution.show_progress,
            ),
        )
        interpreter = Interpreter.from_config(config)
    except SeriesQLDomainError as e:
        err_console.print(f"[red]✗ Error:[/red] {escape(str(e))}", soft_wrap=True)
        sys.exit(2)

    try:
        result = interpreter.interpret(script.read())
    finally:
        interpreter.close()

    if json_output:
        print(json.dumps(result.model_dump()))
    else:
        _print_result(result)

    if result.status == "error":
        sys.exit(1)


def _parse_options(options: tuple[str, ...]) -> dict[str, str]:
    """Parse repeated key=value engine options."""
    parsed: dict[str, str] = {}
    for option in options:
        key, sep, value = option.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"Expected key=value, got '{option}'", param_hint="--option")
        parsed[key.strip()] = value
    return parsed


def _read_properties(stream: IO[str]) -> dict[str, str]:
    """Read key=value lines, skipping blanks and # comments."""
    properties: dict[str, str] = {}
    for line in stream.read().splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        key, _, value = stripped.partition("=")
        properties[key.strip()] = value.strip()
    return properties


def _print_result(result: AggregatedResult) -> None:
    """Print payloads in statement order, failures marked in red."""
    for outcome in result.outcomes:
        if isinstance(outcome, StatementFailure):
            console.print(f"[red]✗[/red] {escape(outcome.diagnostic)}", soft_wrap=True)
        else:
            click.echo(outcome.payload)

    for statement in result.skipped_statements:
        console.print(f"[yellow]Skipped:[/yellow] {escape(statement)}", soft_wrap=True)

    failed = len(result.outcomes) - result.successful_statements
    if failed:
        console.print(
            f"\n[red]✗ {failed} of {result.total_statements} statement(s) failed[/red]"
        )
    else:
        console.print(f"\n[green]✓[/green] {result.total_statements} statement(s) executed")


if __name__ == "__main__":
    cli()
