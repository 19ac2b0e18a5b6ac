"""Alias registry: one ``.cmd`` shim per alias in the registry directory."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterable

from ..constants import BOOTSTRAP_ALIAS, SHIM_EXTENSION, SHIM_PREAMBLE
from ..errors import AliasNotFoundError, InvalidNameError, ReservedNameError
from ..features.name_validator import NameRejection, is_plain_name, is_reserved_name
from ..log import logger
from ._base import DirectoryStore


class DeleteOutcome(Enum):
    REMOVED = "removed"
    NOT_FOUND = "not_found"


class AliasRegistry(DirectoryStore):
    """Create, read, list and delete alias shims.

    A shim is the preamble line followed by one command per line, with no
    trailing newline::

        @echo off
        git status %*
    """

    def __init__(
        self,
        directory: Path,
        extension: str = SHIM_EXTENSION,
        preamble: str = SHIM_PREAMBLE,
    ) -> None:
        super().__init__(directory, extension)
        self.preamble = preamble

    # -- codec ----------------------------------------------------------------

    def render(self, commands: Iterable[str]) -> str:
        """Return the shim text for *commands*."""
        return "\n".join([self.preamble, *commands])

    @staticmethod
    def parse(text: str) -> list[str]:
        """Return the command lines of a shim (everything after line one)."""
        _, sep, body = text.partition("\n")
        if not sep:
            return []
        return body.split("\n")

    # -- operations -----------------------------------------------------------

    def list(self) -> list[str]:
        """Return the sorted names of every alias on disk."""
        return self.names()

    def exists(self, name: str) -> bool:
        return name in self.list()

    def get(self, name: str) -> str:
        """Return the command text stored for *name* (newline-joined)."""
        text = self.read(name) if name and is_plain_name(name) else None
        if text is None:
            raise AliasNotFoundError(name)
        return "\n".join(self.parse(text))

    def get_commands(self, name: str) -> list[str]:
        return self.get(name).split("\n")

    def create(self, name: str, commands: Iterable[str]) -> Path:
        """Write the shim for *name*, replacing any existing one."""
        if is_reserved_name(name):
            raise ReservedNameError(name, NameRejection.RESERVED)
        if not name:
            raise InvalidNameError(name, NameRejection.EMPTY)
        if not is_plain_name(name):
            raise InvalidNameError(name, NameRejection.NOT_A_FILE_NAME)
        commands = list(commands)
        if not commands:
            raise ValueError("an alias needs at least one command")
        path = self.write(name, self.render(commands))
        logger.info("alias %s -> %s", name, " && ".join(commands))
        return path

    def delete(self, name: str) -> DeleteOutcome:
        """Remove the shim for *name*.

        A missing alias is reported as ``NOT_FOUND`` rather than raised; the
        bootstrap alias can never be removed, whatever its letter case.
        """
        if is_reserved_name(name):
            raise ReservedNameError(name, NameRejection.RESERVED)
        if not name or not is_plain_name(name):
            logger.debug("refusing to delete %r: not an alias file name", name)
            return DeleteOutcome.NOT_FOUND
        if self.remove(name):
            return DeleteOutcome.REMOVED
        return DeleteOutcome.NOT_FOUND

    def ensure_bootstrap(self, command: str) -> bool:
        """Write the bootstrap alias if it is missing.  Returns True if written."""
        if self.read(BOOTSTRAP_ALIAS) is not None:
            return False
        self.write(BOOTSTRAP_ALIAS, self.render([command]))
        logger.info("bootstrap alias written: %s", command)
        return True
