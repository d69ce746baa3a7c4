from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from doc_xref.cli.output import render_table, to_rich_text
from doc_xref.core.annotate import annotate
from doc_xref.core.block import locate_block
from doc_xref.core.content import load_source_file
from doc_xref.core.hover import block_config, identifier_config
from doc_xref.core.identifier import extract_identifier
from doc_xref.core.languages import resolve_language
from doc_xref.core.locator import locate_occurrences
from doc_xref.core.render import to_html
from doc_xref.highlighter.tree_sitter_adapter import TreeSitterHighlighter
from doc_xref.models import SourceFile
from doc_xref.settings import get_theme

console = Console()


def _load(path: str, language: str | None = None) -> SourceFile:
    try:
        return load_source_file(path, resolve_language(language, Path(path)))
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from None


def _read_snippet(snippet: str | None, snippet_file: str | None) -> str:
    if snippet_file is not None:
        try:
            return Path(snippet_file).read_text(encoding="utf-8")
        except FileNotFoundError:
            console.print(f"[red]File not found: {snippet_file}[/red]")
            raise typer.Exit(1) from None
    if snippet is None:
        console.print("[red]Either --snippet or --snippet-file must be provided.[/red]")
        raise typer.Exit(1)
    return snippet


def identifier(
    raw: Annotated[str, typer.Argument(help="Inline code reference, e.g. 'FHE.add()'.")],
) -> None:
    """Print the identifier extracted from an inline code reference."""
    extracted = extract_identifier(raw)
    if not extracted:
        console.print("[yellow]No identifier (nothing to match).[/yellow]")
        return
    console.print(extracted, markup=False, highlight=False)


def locate(
    path: Annotated[str, typer.Argument(help="Source file to search.")],
    name: Annotated[str, typer.Argument(help="Identifier to locate.")],
    raw: Annotated[bool, typer.Option("--raw", help="Extract NAME from a raw inline reference first.")] = False,
) -> None:
    """List every word-bounded occurrence of an identifier."""
    source = _load(path)
    target = extract_identifier(name) if raw else name.strip()
    if not target:
        console.print("[yellow]No identifier (nothing to match).[/yellow]")
        return
    config = locate_occurrences(source.content, target)
    lines = source.content.split("\n")
    rows = [(t.line, t.column, t.length, lines[t.line - 1].strip()) for t in config.tokens or []]
    render_table(console, ["line", "column", "length", "source"], rows)


def block(
    path: Annotated[str, typer.Argument(help="Source file to search.")],
    snippet: Annotated[str | None, typer.Option(help="Snippet text to find.")] = None,
    snippet_file: Annotated[str | None, typer.Option(help="Read the snippet from a file.")] = None,
) -> None:
    """Find the first line range containing a multi-line snippet."""
    source = _load(path)
    lines = locate_block(source.content, _read_snippet(snippet, snippet_file))
    if not lines:
        console.print("[yellow]Snippet not found.[/yellow]")
        return
    console.print(f"[green]Matched[/green] lines {lines[0]}-{lines[-1]}")


def show(
    path: Annotated[str, typer.Argument(help="Source file to render.")],
    identifier: Annotated[str | None, typer.Option("--identifier", "-i", help="Inline reference to highlight.")] = None,
    snippet: Annotated[str | None, typer.Option(help="Snippet whose lines to highlight.")] = None,
    snippet_file: Annotated[str | None, typer.Option(help="Read the snippet from a file.")] = None,
    language: Annotated[str | None, typer.Option(help="Override the detected language.")] = None,
    theme: Annotated[str | None, typer.Option(help="Highlight theme (default: $DOC_XREF_THEME).")] = None,
    html: Annotated[bool, typer.Option("--html", help="Emit HTML instead of terminal output.")] = False,
) -> None:
    """Render a source file with a documentation reference highlighted."""
    source = _load(path, language)
    if identifier is not None:
        config = identifier_config(source.content, identifier)
    elif snippet is not None or snippet_file is not None:
        config = block_config(source.content, _read_snippet(snippet, snippet_file))
    else:
        console.print("[red]Either --identifier or --snippet must be provided.[/red]")
        raise typer.Exit(1)

    tree = TreeSitterHighlighter().tokenize_sync(source.content, source.language, theme or get_theme())
    annotated = annotate(tree, config)
    if html:
        console.print(to_html(annotated), markup=False, highlight=False, soft_wrap=True)
    else:
        console.print(to_rich_text(annotated), soft_wrap=True)
