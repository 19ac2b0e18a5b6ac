"""Alias name and command checks.

Nothing in here reads from the terminal.  The one interactive decision,
"the program you entered does not exist, create the alias anyway?", is
delegated to a ``confirm(question) -> bool`` callable supplied by the caller.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable, Collection
from enum import Enum

from ..constants import BOOTSTRAP_ALIAS, CMD_BUILTINS, DOT_NAMES, NAME_SEPARATORS
from ..errors import InvalidCommandError, InvalidNameError, ReservedNameError
from ..log import logger

Confirm = Callable[[str], bool]
CommandLookup = Callable[[str], bool]

UNKNOWN_COMMAND_QUESTION = (
    "The program you have entered does not exist. Create alias anyway?"
)


class NameRejection(Enum):
    """Why a candidate alias name cannot be used."""

    EMPTY = "empty"
    CONTAINS_SPACE = "contains_space"
    NOT_A_FILE_NAME = "not_a_file_name"
    RESERVED = "reserved"
    SHADOWS_FILE = "shadows_file"
    SHADOWS_SYSTEM_COMMAND = "shadows_system_command"

    @property
    def message(self) -> str:
        return _REJECTION_MESSAGES[self]


_REJECTION_MESSAGES: dict[NameRejection, str] = {
    NameRejection.EMPTY: "Alias name cannot be empty.",
    NameRejection.CONTAINS_SPACE: "Alias name cannot contain spaces.",
    NameRejection.NOT_A_FILE_NAME: "Alias name cannot contain slashes or be '.' or '..'.",
    NameRejection.RESERVED: f"Cannot overwrite '{BOOTSTRAP_ALIAS}' name.",
    NameRejection.SHADOWS_FILE: "Cannot use folder/file name as alias name.",
    NameRejection.SHADOWS_SYSTEM_COMMAND: "Cannot use existing command as alias name.",
}


class SystemCommandLookup:
    """Decide whether a bare name is something the shell can already run.

    True for cmd.exe built-ins (case-insensitive) and for anything found on
    the search path.  *which* is injectable so tests need no real PATH.
    """

    def __init__(
        self,
        builtins: Collection[str] = CMD_BUILTINS,
        which: Callable[[str], str | None] | None = shutil.which,
    ) -> None:
        self.builtins = frozenset(b.lower() for b in builtins)
        self.which = which

    def __call__(self, name: str) -> bool:
        if not name:
            return False
        if name.lower() in self.builtins:
            return True
        if self.which is None:
            return False
        return self.which(name) is not None


def is_reserved_name(name: str) -> bool:
    """True for the bootstrap alias in any letter case (Windows file names fold case)."""
    return name.casefold() == BOOTSTRAP_ALIAS


def is_plain_name(name: str) -> bool:
    """True if *name* maps to a single file directly inside the registry."""
    if name in DOT_NAMES:
        return False
    return not any(sep in name for sep in NAME_SEPARATORS)


def first_token(command_line: str) -> str:
    """Return the first whitespace-delimited word of *command_line*."""
    parts = command_line.split(None, 1)
    return parts[0] if parts else ""


def check_name(
    name: str,
    current_aliases: Collection[str],
    is_system_command: CommandLookup,
    *,
    exists: Callable[[str], bool] = os.path.exists,
) -> NameRejection | None:
    """Return why *name* cannot be registered, or None if it can.

    Re-defining an existing alias is allowed even when the name is also a
    system command; a brand-new alias may not shadow one.
    """
    if not name:
        return NameRejection.EMPTY
    if " " in name:
        return NameRejection.CONTAINS_SPACE
    if not is_plain_name(name):
        return NameRejection.NOT_A_FILE_NAME
    if is_reserved_name(name):
        return NameRejection.RESERVED
    if exists(name):
        return NameRejection.SHADOWS_FILE
    if name not in current_aliases and is_system_command(name):
        return NameRejection.SHADOWS_SYSTEM_COMMAND
    return None


def is_name_available(
    name: str,
    current_aliases: Collection[str],
    is_system_command: CommandLookup,
    *,
    exists: Callable[[str], bool] = os.path.exists,
) -> bool:
    return check_name(name, current_aliases, is_system_command, exists=exists) is None


def validate_name(
    name: str,
    current_aliases: Collection[str],
    is_system_command: CommandLookup,
    *,
    exists: Callable[[str], bool] = os.path.exists,
) -> None:
    """Raise :class:`InvalidNameError` if *name* cannot be registered."""
    reason = check_name(name, current_aliases, is_system_command, exists=exists)
    if reason is NameRejection.RESERVED:
        raise ReservedNameError(name, reason)
    if reason is not None:
        raise InvalidNameError(name, reason)


def is_command_available(
    command_line: str,
    confirm: Confirm,
    *,
    current_aliases: Collection[str] = (),
    is_system_command: CommandLookup | None = None,
    exists: Callable[[str], bool] = os.path.exists,
) -> bool:
    """Return True if the first word of *command_line* can be invoked.

    Existing files, system commands and existing aliases resolve directly.
    Anything else is put to *confirm*, which may accept it anyway.
    """
    token = first_token(command_line)
    if token:
        if exists(token):
            return True
        if is_system_command is not None and is_system_command(token):
            return True
        if token in current_aliases:
            return True
    logger.debug("command %r does not resolve; asking for confirmation", token)
    return confirm(UNKNOWN_COMMAND_QUESTION)


def validate_command(
    command_line: str,
    confirm: Confirm,
    *,
    current_aliases: Collection[str] = (),
    is_system_command: CommandLookup | None = None,
    exists: Callable[[str], bool] = os.path.exists,
) -> None:
    """Raise :class:`InvalidCommandError` if the command is rejected."""
    if not is_command_available(
        command_line,
        confirm,
        current_aliases=current_aliases,
        is_system_command=is_system_command,
        exists=exists,
    ):
        raise InvalidCommandError(command_line)


class NameValidator:
    """Checks bound to one snapshot of the alias set.

    Build one per CLI invocation from ``registry.list()`` so the alias set
    is passed explicitly instead of living in shared state.
    """

    def __init__(
        self,
        current_aliases: Collection[str],
        is_system_command: CommandLookup | None = None,
        confirm: Confirm | None = None,
        exists: Callable[[str], bool] = os.path.exists,
    ) -> None:
        self.current_aliases = frozenset(current_aliases)
        self.is_system_command = is_system_command or SystemCommandLookup()
        self.confirm = confirm or (lambda _question: False)
        self.exists = exists

    def check_name(self, name: str) -> NameRejection | None:
        return check_name(
            name, self.current_aliases, self.is_system_command, exists=self.exists
        )

    def is_name_available(self, name: str) -> bool:
        return self.check_name(name) is None

    def validate_name(self, name: str) -> None:
        validate_name(
            name, self.current_aliases, self.is_system_command, exists=self.exists
        )

    def is_command_available(self, command_line: str) -> bool:
        return is_command_available(
            command_line,
            self.confirm,
            current_aliases=self.current_aliases,
            is_system_command=self.is_system_command,
            exists=self.exists,
        )

    def validate_command(self, command_line: str) -> None:
        validate_command(
            command_line,
            self.confirm,
            current_aliases=self.current_aliases,
            is_system_command=self.is_system_command,
            exists=self.exists,
        )
