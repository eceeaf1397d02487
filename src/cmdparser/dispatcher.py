"""Command name to handler registry with line and token dispatch."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

from cmdparser.errors import (
    DuplicateCommandError,
    HandlerError,
    HandlerFailedError,
    InvalidCommandNameError,
    MissingCommandError,
    UnknownCommandError,
)

Handler = Callable[[list[str]], object]


def tokenize(line: str) -> list[str]:
    """Split a line on runs of whitespace, dropping empty fragments.

    Whitespace is whatever ``str.isspace`` accepts, which includes the ASCII
    separator controls ``\\x1c`` to ``\\x1f``.
    """
    return line.split()


def _validate_name(name: str) -> None:
    if not name or any(ch.isspace() for ch in name):
        raise InvalidCommandNameError(name)


class Dispatcher:
    """Maps command names to handlers and invokes them.

    Handlers receive the full token list, command name included at index 0.
    Names are matched exactly and case-sensitively. Instances are not
    thread-safe; serialize register and dispatch calls externally if shared.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}

    def register(self, name: str, handler: Handler) -> None:
        """Bind ``handler`` to ``name``.

        Raises:
            InvalidCommandNameError: ``name`` is empty or contains whitespace.
            DuplicateCommandError: ``name`` is already bound; the existing
                handler is kept.
        """
        _validate_name(name)
        if name in self._handlers:
            raise DuplicateCommandError(name)
        self._handlers[name] = handler

    def command(self, name: str) -> Callable[[Handler], Handler]:
        """Decorator form of :meth:`register`."""

        def decorator(func: Handler) -> Handler:
            self.register(name, func)
            return func

        return decorator

    def get(self, name: str) -> Handler | None:
        return self._handlers.get(name)

    def names(self) -> list[str]:
        return sorted(self._handlers)

    def dispatch_line(self, line: str) -> None:
        """Tokenize ``line`` and dispatch the result."""
        self.dispatch_tokens(tokenize(line))

    def dispatch_tokens(self, tokens: Sequence[str]) -> None:
        """Invoke the handler named by ``tokens[0]`` with all of ``tokens``.

        Raises:
            MissingCommandError: ``tokens`` is empty.
            UnknownCommandError: no handler is bound to ``tokens[0]``.
            HandlerFailedError: the handler raised HandlerError.
        """
        if not tokens:
            raise MissingCommandError()
        name = tokens[0]
        handler = self._handlers.get(name)
        if handler is None:
            raise UnknownCommandError(name)
        try:
            handler(list(tokens))
        except HandlerError as exc:
            raise HandlerFailedError(name, exc) from exc

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._handlers)
