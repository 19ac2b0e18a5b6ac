"""Typed errors raised by the registry, validator and path helpers.

The command layer catches :class:`AliasGeneratorError`, reports the message
and carries on.  Only a failure to create the registry directory on first
run ends the process.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .features.name_validator import NameRejection


class ErrorKind(Enum):
    IO_ERROR = "io_error"
    NOT_FOUND = "not_found"
    INVALID_NAME = "invalid_name"
    INVALID_COMMAND = "invalid_command"
    MALFORMED_PATH = "malformed_path"


class AliasGeneratorError(Exception):
    """Base class for every error this package raises on purpose."""

    kind: ErrorKind = ErrorKind.IO_ERROR


class RegistryIOError(AliasGeneratorError):
    """The registry directory or an alias file could not be read or written."""

    kind = ErrorKind.IO_ERROR


class AliasNotFoundError(AliasGeneratorError):
    """No alias file exists for the requested name."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, name: str) -> None:
        super().__init__(f"No such alias '{name}'. Type 'alias list' to see all aliases")
        self.name = name


class InvalidNameError(AliasGeneratorError):
    """A candidate alias name was rejected by the validator."""

    kind = ErrorKind.INVALID_NAME

    def __init__(self, name: str, reason: NameRejection) -> None:
        super().__init__(reason.message)
        self.name = name
        self.reason = reason


class ReservedNameError(InvalidNameError):
    """An operation targeted the bootstrap alias."""


class InvalidCommandError(AliasGeneratorError):
    """The command does not resolve and the user declined to keep it."""

    kind = ErrorKind.INVALID_COMMAND

    def __init__(self, command: str) -> None:
        super().__init__(f"{command} is not a valid command.")
        self.command = command


class MalformedPathError(AliasGeneratorError):
    """A search-path string could not be split into segments."""

    kind = ErrorKind.MALFORMED_PATH
