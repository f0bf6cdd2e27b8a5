"""
lrexpr CLI package.

- expr.py: eval, parse and tokens commands
- utils.py: Shared utilities
"""

import typer

from lrexpr.cli.expr import eval_command, parse_command, tokens_command
from lrexpr.cli.utils import configure_logging, version_callback

app = typer.Typer(
    help="lrexpr - left-to-right integer expression interpreter",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """lrexpr CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="eval")(eval_command)
app.command(name="parse")(parse_command)
app.command(name="tokens")(tokens_command)


def main() -> None:
    app()


__all__ = ["app", "main"]
