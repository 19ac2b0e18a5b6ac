"""First-run setup, search-path check and bootstrap alias."""

from __future__ import annotations

from ..constants import BOOTSTRAP_ALIAS
from ..features.path_membership import path_contains
from ..log import logger
from ..platform import (
    IS_WINDOWS,
    add_to_user_path,
    bootstrap_command,
    path_instructions,
    read_search_path,
    registry_dir_string,
)


class SetupCommandsMixin:
    """Setup and environment checks."""

    def _first_run_setup(self) -> None:
        """Create the registry directory and the bootstrap alias."""
        directory = self.registry.directory
        self._say("Alias_Generator running for the first time.")
        self._say("Setting up...")
        self._say(f"Creating {registry_dir_string(directory)} directory.")
        self.registry.ensure_directory()
        self._say("Setting self alias.")
        self.registry.ensure_bootstrap(bootstrap_command())
        if self._check_path():
            self._say("To use this tool, enter commands in the following format:")
            self._say(f"$ {BOOTSTRAP_ALIAS} <yourAliasName> <yourCommand>")

    def _check_path(self) -> bool:
        """Return True if the registry directory is on the search path.

        Otherwise print instructions and, on Windows, offer to add it.
        """
        directory = registry_dir_string(self.registry.directory)
        variable = self.prefs.path.variable
        separator = self.prefs.path.separator
        if path_contains(directory, read_search_path(variable), separator):
            return True

        self._say("")
        self._say(
            "ATTENTION: The folder containing the .cmd files must be added to "
            f"the System {variable}. (Takes ~1 minute)"
        )
        if IS_WINDOWS and self._confirm(f"Add {directory} to your user {variable} now?"):
            if add_to_user_path(directory, variable, separator):
                self._say(f"Added {directory} to your user {variable}.")
                self._say("Open a new terminal for the change to take effect.")
                return True
            logger.debug("automatic %s update failed; falling back to instructions", variable)
            self._say(f"Could not update {variable} automatically.")
        for line in path_instructions(directory):
            self._say(line)
        return False

    def _ensure_bootstrap(self) -> list[str]:
        """Recreate the bootstrap alias if missing and return the alias names."""
        current = self.registry.list()
        if BOOTSTRAP_ALIAS not in current:
            self.registry.ensure_bootstrap(bootstrap_command())
            current = self.registry.list()
        return current
