"""Stock handlers installed by the REPL driver."""

import click

from cmdparser.dispatcher import Dispatcher


def echo(tokens: list[str]) -> None:
    click.echo(" ".join(tokens[1:]))


def print_(tokens: list[str]) -> None:
    click.echo("".join(tokens[1:]))


def register_builtins(dispatcher: Dispatcher) -> None:
    dispatcher.register("echo", echo)
    dispatcher.register("print", print_)
