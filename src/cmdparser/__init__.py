"""Minimal command-line command dispatcher."""

from cmdparser.dispatcher import Dispatcher, Handler, tokenize
from cmdparser.errors import (
    CommandParserError,
    DispatchError,
    DuplicateCommandError,
    HandlerError,
    HandlerFailedError,
    InvalidCommandNameError,
    MissingCommandError,
    UnknownCommandError,
)

__all__ = [
    "CommandParserError",
    "DispatchError",
    "Dispatcher",
    "DuplicateCommandError",
    "Handler",
    "HandlerError",
    "HandlerFailedError",
    "InvalidCommandNameError",
    "MissingCommandError",
    "UnknownCommandError",
    "tokenize",
]
