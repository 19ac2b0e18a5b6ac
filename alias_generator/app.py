"""Alias generator application: holds per-invocation state and dispatches."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from .commands import AliasCommandsMixin, SetupCommandsMixin
from .errors import AliasGeneratorError, RegistryIOError
from .features.name_validator import CommandLookup, NameValidator, SystemCommandLookup
from .log import logger
from .persistence import AliasRegistry
from .preferences import Preferences


class AliasApp(AliasCommandsMixin, SetupCommandsMixin):
    """One CLI invocation.

    The confirm and ask callables are the only way the commands talk to the
    user; tests pass plain functions instead of a terminal.
    """

    def __init__(
        self,
        prefs: Preferences,
        *,
        console: Console | None = None,
        confirm: Callable[[str], bool] | None = None,
        ask: Callable[[str], str] | None = None,
        is_system_command: CommandLookup | None = None,
    ) -> None:
        self.prefs = prefs
        self.console = console or Console(highlight=False)
        self.registry = AliasRegistry(
            prefs.registry.resolved_directory,
            extension=prefs.registry.extension,
            preamble=prefs.registry.preamble,
        )
        self.is_system_command = is_system_command or SystemCommandLookup()
        self._confirm_cb = confirm or self._rich_confirm
        self._ask_cb = ask or self._rich_ask

    # ── shared contract used by the command mixins ──

    def _say(self, text: str = "") -> None:
        self.console.print(text, markup=False, highlight=False)

    def _confirm(self, question: str) -> bool:
        if self.prefs.prompts.assume_yes:
            return True
        return self._confirm_cb(question)

    def _ask(self, prompt: str) -> str:
        return self._ask_cb(prompt)

    def _validator(self, current_aliases: Sequence[str]) -> NameValidator:
        return NameValidator(
            current_aliases,
            is_system_command=self.is_system_command,
            confirm=self._confirm,
        )

    def _rich_confirm(self, question: str) -> bool:
        # Questions carry user paths; keep brackets in them literal
        return Confirm.ask(escape(question), console=self.console)

    def _rich_ask(self, prompt: str) -> str:
        return Prompt.ask(escape(prompt), console=self.console, default="", show_default=False)

    # ── dispatch ──

    def run(self, words: Sequence[str]) -> int:
        """Run one invocation.  Returns the process exit status."""
        words = list(words)

        if not self.registry.directory.is_dir():
            try:
                self._first_run_setup()
            except RegistryIOError as exc:
                logger.debug("first-run setup failed", exc_info=True)
                self.console.print(f"[red]Setup failed:[/red] {escape(str(exc))}", highlight=False)
                return 1
            return 0

        if not self._check_path():
            return 0

        try:
            current = self._ensure_bootstrap()
        except AliasGeneratorError as exc:
            self._say(str(exc))
            return 0

        if words:
            sub = words[0].strip().lower()
            if sub == "list" or (sub == "delete" and len(words) == 1):
                self._cmd_list(current)
                return 0
            if sub == "delete" and len(words) == 2:
                self._cmd_delete(words[1])
                return 0
            if sub == "help" and len(words) == 1:
                self._cmd_help()
                return 0
            if sub == "special" and len(words) == 1:
                self._cmd_special(current)
                return 0

        self._cmd_add(words, current)
        return 0
