"""Architecture fitness checks for layer boundaries."""

from __future__ import annotations

import ast
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]
PACKAGE_ROOT = REPO_ROOT / "src" / "seriesql"

# Segmentation, formatting and domain types stay pure: no engines, no I/O layers.
PURE_MODULES = (
    PACKAGE_ROOT / "core" / "sql_utils.py",
    PACKAGE_ROOT / "core" / "formatting.py",
    PACKAGE_ROOT / "domain" / "errors.py",
    PACKAGE_ROOT / "domain" / "results.py",
)
PURE_FORBIDDEN_PREFIXES = (
    "seriesql.engines",
    "seriesql.application",
    "seriesql.cli",
    "seriesql.core.coordinator",
    "rich",
    "click",
)

# The CLI reaches engines and the coordinator only through the application layer.
CLI_FORBIDDEN_PREFIXES = (
    "seriesql.engines",
    "seriesql.core.coordinator",
)


def _module_name(path: Path) -> str:
    """Return the dotted module name for a file under src/."""
    relative = path.relative_to(REPO_ROOT / "src").with_suffix("")
    return ".".join(relative.parts)


def _imported_modules(path: Path) -> list[str]:
    """Collect absolute names of every module imported by one file."""
    tree = ast.parse(path.read_text(encoding="utf-8"))
    package = _module_name(path).rsplit(".", 1)[0]
    names: list[str] = []

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            names.extend(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            names.append(_resolve_from_import(node, package))
    return names


def _resolve_from_import(node: ast.ImportFrom, package: str) -> str:
    """Resolve relative `from . import x` forms against the importing package."""
    if not node.level:
        return node.module or ""
    base = package.split(".")
    if node.level > 1:
        base = base[: -(node.level - 1)]
    return ".".join([*base, node.module] if node.module else base)


def _violations(path: Path, prefixes: tuple[str, ...]) -> list[str]:
    return [
        name
        for name in _imported_modules(path)
        if any(name == prefix or name.startswith(f"{prefix}.") for prefix in prefixes)
    ]


def test_pure_modules_do_not_import_engine_or_io_layers() -> None:
    """Segmenter and domain modules must stay free of engine, CLI and console imports."""
    violations: dict[str, list[str]] = {}

    for file_path in PURE_MODULES:
        forbidden = _violations(file_path, PURE_FORBIDDEN_PREFIXES)
        if forbidden:
            violations[str(file_path.relative_to(REPO_ROOT))] = forbidden

    assert not violations, f"Forbidden imports detected: {violations}"


def test_cli_goes_through_application_layer() -> None:
    """The CLI must not couple to engines or the coordinator directly."""
    cli_path = PACKAGE_ROOT / "cli.py"
    forbidden = _violations(cli_path, CLI_FORBIDDEN_PREFIXES)

    assert not forbidden, f"Forbidden CLI imports detected: {forbidden}"


def test_relative_imports_are_resolved() -> None:
    """Sanity check for the resolver used by the boundary tests."""
    imported = _imported_modules(PACKAGE_ROOT / "cli.py")

    assert "seriesql.application" in imported
    assert "seriesql.core.sql_utils" in imported
