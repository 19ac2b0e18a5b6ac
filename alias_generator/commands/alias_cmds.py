"""List, add, delete, and help commands."""

from __future__ import annotations

from collections.abc import Sequence

from rich.table import Table
from rich.text import Text

from ..constants import BOOTSTRAP_ALIAS
from ..errors import AliasGeneratorError, AliasNotFoundError, ReservedNameError
from ..log import logger
from ..persistence import DeleteOutcome

USAGE = f"$ {BOOTSTRAP_ALIAS} <yourAliasName> <yourCommand>"

HELP_LINES: tuple[str, ...] = (
    f"-Add alias: {BOOTSTRAP_ALIAS} <yourName> <yourCommand>",
    f"-Add multi-command alias: {BOOTSTRAP_ALIAS} special",
    f"-Remove alias: {BOOTSTRAP_ALIAS} delete <yourName>",
    f"-List all aliases: {BOOTSTRAP_ALIAS} list",
    f"-Display help: {BOOTSTRAP_ALIAS} help",
)


class AliasCommandsMixin:
    """List, add, delete, and help commands."""

    def _cmd_help(self) -> None:
        self._say("-------------------- Alias Help --------------------")
        for line in HELP_LINES:
            self._say(line)

    def _cmd_list(self, current: Sequence[str]) -> None:
        """Print every alias with the command it runs."""
        table = Table(title="Current aliases", show_header=True, header_style="bold")
        table.add_column("Alias", no_wrap=True)
        table.add_column("Command")
        for name in current:
            try:
                command = self.registry.get(name)
            except AliasNotFoundError:
                # Deleted between listing and reading
                continue
            except AliasGeneratorError as exc:
                command = f"<{exc}>"
            table.add_row(Text(name), Text(command))
        self.console.print(table)

    def _cmd_delete(self, name: str) -> None:
        try:
            outcome = self.registry.delete(name)
        except ReservedNameError:
            self._say(f"Cannot delete the '{BOOTSTRAP_ALIAS}' alias.")
            return
        except AliasGeneratorError as exc:
            self._say(str(exc))
            return
        if outcome is DeleteOutcome.REMOVED:
            self._say(f"Removed '{name}' alias.")
        else:
            self._say(f"No such alias. Type '{BOOTSTRAP_ALIAS} list' to see all aliases")

    def _cmd_add(self, words: Sequence[str], current: Sequence[str]) -> None:
        """Handle ``alias <name> <command...>``."""
        if len(words) < 2:
            self._say(
                "Wrong number of arguments. Expected 2 arguments. "
                "Enter commands in the following format"
            )
            self._say(USAGE)
            return

        name = words[0]
        command = " ".join(words[1:]).strip()
        validator = self._validator(current)
        try:
            validator.validate_name(name)
            validator.validate_command(command)
        except AliasGeneratorError as exc:
            self._say(str(exc))
            return

        self._write_alias(name, [command], current)

    def _cmd_special(self, current: Sequence[str]) -> None:
        """Interactive wizard for an alias that runs several commands."""
        validator = self._validator(current)
        name = self._ask("Alias name").strip()
        try:
            validator.validate_name(name)
        except AliasGeneratorError as exc:
            self._say(str(exc))
            return

        self._say("Enter one command per line. Leave the line empty to finish.")
        commands: list[str] = []
        while True:
            line = self._ask(f"Command {len(commands) + 1}").strip()
            if not line:
                break
            try:
                validator.validate_command(line)
            except AliasGeneratorError as exc:
                self._say(str(exc))
                continue
            commands.append(line)

        if not commands:
            self._say("No commands entered; nothing created.")
            return
        self._write_alias(name, commands, current)

    def _write_alias(self, name: str, commands: list[str], current: Sequence[str]) -> None:
        if name in current and not self._confirm(
            "You already have an alias with that name. Replace it?"
        ):
            return
        self._say("Generating .cmd")
        try:
            self.registry.create(name, commands)
        except AliasGeneratorError as exc:
            logger.debug("writing alias %s failed", name, exc_info=True)
            self._say(str(exc))
            return
        self._say(f"Alias '{name}' created: {' & '.join(commands)}")
