import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from doc_xref.cli.check import check, units
from doc_xref.cli.highlight import block, identifier, locate, show
from doc_xref.cli.serve import serve_app

app = typer.Typer(
    name="doc-xref",
    help="Doc Xref CLI: highlight the source code that documentation refers to.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def _configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


app.command("identifier")(identifier)
app.command("locate")(locate)
app.command("block")(block)
app.command("show")(show)
app.command("check")(check)
app.command("units")(units)
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
