import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from doc_xref.cli.output import render_table
from doc_xref.core.content import list_units, load_unit
from doc_xref.core.xref import audit_unit
from doc_xref.models import ReferenceReport
from doc_xref.settings import get_content_root

console = Console()


def _report_rows(reports: list[ReferenceReport]) -> list[tuple[object, ...]]:
    rows = []
    for report in reports:
        matched = [name for name, config in report.matches.items() if not config.is_empty()]
        status = "ok" if report.resolved else "unresolved"
        reference = report.reference
        rows.append((reference.line, reference.kind.value, reference.text, status, ", ".join(matched)))
    return rows


def _audit(directory: Path) -> int:
    """Print the audit of one unit and return its number of unresolved references."""
    try:
        unit = load_unit(directory)
    except FileNotFoundError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from None
    reports = audit_unit(unit)
    console.print(f"[bold]{unit.id}[/bold] ({len(unit.files)} file(s))")
    render_table(console, ["line", "kind", "reference", "status", "files"], _report_rows(reports))
    return sum(1 for report in reports if not report.resolved)


def _report_unresolved(unresolved: int) -> None:
    console.print(f"[red]{unresolved} unresolved reference(s).[/red]")


def check(
    directory: Annotated[str, typer.Argument(help="Content directory holding README.md and source files.")],
    strict: Annotated[
        bool,
        typer.Option(help="Exit with status 1 on unresolved references (with --watch, report them on every run)."),
    ] = False,
    watch: Annotated[bool, typer.Option(help="Re-run the audit whenever the directory changes.")] = False,
) -> None:
    """Audit which README code references resolve in the unit's source files."""
    unresolved = _audit(Path(directory))

    if watch:
        from doc_xref.watcher.watchfiles_adapter import WatchfilesWatcher

        async def _on_change(paths: set[Path]) -> None:
            console.print(f"[cyan]Changed:[/cyan] {', '.join(sorted(p.name for p in paths))}")
            rerun = _audit(Path(directory))
            if strict and rerun:
                _report_unresolved(rerun)

        async def _run() -> None:
            watcher = WatchfilesWatcher(directory, _on_change)
            await watcher.start()
            try:
                await watcher.wait()
            finally:
                await watcher.stop()

        if strict and unresolved:
            _report_unresolved(unresolved)
        console.print(f"[green]Watching[/green] {directory} (Ctrl+C to stop)")
        try:
            asyncio.run(_run())
        except KeyboardInterrupt:
            pass
        return

    if strict and unresolved:
        _report_unresolved(unresolved)
        raise typer.Exit(1)


def units(
    root: Annotated[str | None, typer.Argument(help="Content root (default: $DOC_XREF_CONTENT_DIR).")] = None,
) -> None:
    """List the documentation units under a content root."""
    try:
        names = list_units(root or get_content_root())
    except FileNotFoundError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from None
    render_table(console, ["unit"], [(name,) for name in names])
