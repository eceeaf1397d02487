"""Click CLI group: repl and run commands."""

from __future__ import annotations

import sys

import click

from cmdparser.cli.repl import default_dispatcher, report_error, run_repl
from cmdparser.config import get_settings, validate_settings
from cmdparser.errors import ConfigError, DispatchError
from cmdparser.logging import configure_logging


@click.group()
def cli() -> None:
    """Minimal command dispatcher CLI."""
    settings = get_settings()
    try:
        validate_settings(settings)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    configure_logging(settings.log_level)


@cli.command()
def repl() -> None:
    """Read lines from stdin and dispatch each one to its command."""
    run_repl(default_dispatcher(), get_settings())


class RawTokensCommand(click.Command):
    """Command whose arguments bypass click's option parsing."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.args = list(args)
        return ctx.args


@cli.command(cls=RawTokensCommand, add_help_option=False)
@click.pass_context
def run(ctx: click.Context) -> None:
    """Dispatch a single pre-tokenized command."""
    settings = get_settings()
    try:
        default_dispatcher().dispatch_tokens(ctx.args)
    except DispatchError as exc:
        report_error(exc, settings)
        sys.exit(1)
