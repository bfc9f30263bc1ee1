"""
CLI entry point, called by mdbook.

    mdbook-citeproc supports html    # exit 0 if the renderer is supported, 1 if not
    mdbook-citeproc < payload.json   # preprocess: [context, book] in, book out
"""

import logging
import sys

import typer

from mdbook_citeproc.config import get_log_level
from mdbook_citeproc.errors import CiteprocError
from mdbook_citeproc.preprocessor import CiteprocPreprocessor
from mdbook_citeproc.protocol import check_version, parse_input, write_output

app = typer.Typer(
    name="mdbook-citeproc",
    help="A mdbook preprocessor which runs your code through pandoc and citeproc",
    add_completion=False,
)


def setup_logging(verbose: bool = False) -> None:
    """Log to stderr; stdout is reserved for the book."""
    logging.basicConfig(
        level=get_log_level(verbose),
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


@app.callback(invoke_without_command=True)
def preprocess(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log each pandoc invocation"),
    pandoc: str | None = typer.Option(
        None,
        "--pandoc",
        help="pandoc executable (default: $MDBOOK_CITEPROC_PANDOC or pandoc on PATH)",
    ),
) -> None:
    """Read mdbook's payload from stdin and write the converted book to stdout."""
    if ctx.invoked_subcommand is not None:
        return
    setup_logging(verbose)

    pre = CiteprocPreprocessor(executable=pandoc)
    try:
        book_ctx, book = parse_input(sys.stdin)
        check_version(book_ctx, pre.name)
        processed = pre.run(book_ctx, book)
        write_output(processed, sys.stdout)
    except CiteprocError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("supports")
def supports(
    renderer: str = typer.Argument(..., help="Renderer name, e.g. html"),
) -> None:
    """Check whether a renderer is supported by this preprocessor."""
    supported = CiteprocPreprocessor().supports_renderer(renderer)
    raise typer.Exit(0 if supported else 1)


def main() -> None:
    """Entry point for the mdbook-citeproc console script."""
    app()


if __name__ == "__main__":
    main()
