"""cmd-parser exception hierarchy.

All cmd-parser exceptions inherit from CommandParserError, so a driver can
report any dispatch problem with a single except clause.
"""


class CommandParserError(Exception):
    """Base exception for all cmd-parser errors."""


class DispatchError(CommandParserError):
    """Registration or dispatch could not be carried out."""

    def __init__(self, message: str = "", *, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


class DuplicateCommandError(DispatchError):
    """A handler is already registered under this name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"This command already exists: {name}", name=name)


class InvalidCommandNameError(DispatchError):
    """Command name is empty or contains whitespace."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid command name: {name!r}", name=name)


class MissingCommandError(DispatchError):
    """No command name was supplied."""

    def __init__(self) -> None:
        super().__init__("Please specify a command")


class UnknownCommandError(DispatchError):
    """No handler is registered under this name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown command: {name}", name=name)


class HandlerFailedError(DispatchError):
    """A handler reported failure by raising HandlerError."""

    def __init__(self, name: str, cause: "HandlerError") -> None:
        super().__init__(f"{name}: {cause}", name=name)
        self.cause = cause


class HandlerError(CommandParserError):
    """Raised by a handler to report an expected failure to the caller."""


class ConfigError(CommandParserError):
    """Invalid or missing configuration."""
