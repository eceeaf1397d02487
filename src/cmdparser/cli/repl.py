"""Read-dispatch loop driving a Dispatcher from standard input."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import click

from cmdparser.builtins import register_builtins
from cmdparser.config import Settings
from cmdparser.dispatcher import Dispatcher
from cmdparser.errors import DispatchError

logger = logging.getLogger(__name__)


def default_dispatcher() -> Dispatcher:
    dispatcher = Dispatcher()
    register_builtins(dispatcher)
    return dispatcher


def report_error(exc: DispatchError, settings: Settings) -> None:
    logger.info("dispatch failed: %s (%s)", exc, type(exc).__name__)
    click.echo(f"{settings.error_prefix}: {exc}", err=True)


def read_line(settings: Settings, stream: TextIO | None = None) -> str | None:
    """Print the prompt and read one line; None at end of input or on interrupt."""
    click.echo(settings.prompt, nl=False)
    try:
        line = (stream or sys.stdin).readline()
    except KeyboardInterrupt:
        line = ""
    if not line:
        click.echo()
        return None
    return line


def run_repl(dispatcher: Dispatcher, settings: Settings, stream: TextIO | None = None) -> None:
    """Dispatch lines until input runs out.

    Dispatch errors are reported on stderr and never end the loop.
    """
    while True:
        line = read_line(settings, stream)
        if line is None:
            break
        try:
            dispatcher.dispatch_line(line)
        except DispatchError as exc:
            report_error(exc, settings)
