"""User preferences for alias-generator.

Loads settings from ~/.alias-generator/preferences.yaml (or the file named by
$ALIAS_GENERATOR_CONFIG / ``--config``).  Falls back to sensible defaults if
the file doesn't exist or is invalid.  Creates a default file on first run so
users can discover and edit it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .constants import PATH_VARIABLE, SHIM_EXTENSION, SHIM_PREAMBLE
from .log import logger
from .platform import default_registry_dir

CONFIG_ENV_VAR = "ALIAS_GENERATOR_CONFIG"
PREFS_PATH = Path.home() / ".alias-generator" / "preferences.yaml"

_DEFAULT_YAML = """\
# alias-generator preferences
# Delete this file to reset to defaults.

registry:
  directory: ""                  # where the .cmd shims live (empty = platform default)
  extension: ".cmd"              # shim file extension
  preamble: "@echo off"          # first line of every shim

path:
  variable: "Path"               # search-path environment variable
  separator: ""                  # segment delimiter (empty = platform default)

prompts:
  assume_yes: false              # answer yes to every confirmation
"""


@dataclass
class RegistryPreferences:
    """Where and how alias shims are written."""

    directory: str = ""  # Empty means default_registry_dir()
    extension: str = SHIM_EXTENSION
    preamble: str = SHIM_PREAMBLE

    @property
    def resolved_directory(self) -> Path:
        if self.directory:
            return Path(os.path.expandvars(os.path.expanduser(self.directory)))
        return default_registry_dir()


@dataclass
class PathPreferences:
    """The search-path variable the registry directory must appear in."""

    variable: str = PATH_VARIABLE
    separator: str = os.pathsep  # ";" on Windows


@dataclass
class PromptPreferences:
    assume_yes: bool = False


@dataclass
class Preferences:
    """Top-level preferences."""

    registry: RegistryPreferences = field(default_factory=RegistryPreferences)
    path: PathPreferences = field(default_factory=PathPreferences)
    prompts: PromptPreferences = field(default_factory=PromptPreferences)


def preferences_path(override: str | Path | None = None) -> Path:
    """Return the preferences file to use: *override*, then env, then default."""
    if override:
        return Path(override)
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env)
    return PREFS_PATH


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences from YAML file.

    Falls back to sensible defaults if the file doesn't exist or is invalid.
    Creates a default preferences file on first run.
    """
    path = path or preferences_path()
    prefs = Preferences()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
            if isinstance(data.get("registry"), dict):
                rdata = data["registry"]
                if "directory" in rdata:
                    prefs.registry.directory = str(rdata["directory"] or "")
                if rdata.get("extension"):
                    prefs.registry.extension = str(rdata["extension"])
                if rdata.get("preamble"):
                    prefs.registry.preamble = str(rdata["preamble"])
            if isinstance(data.get("path"), dict):
                pdata = data["path"]
                if pdata.get("variable"):
                    prefs.path.variable = str(pdata["variable"])
                if pdata.get("separator"):
                    prefs.path.separator = str(pdata["separator"])
            if isinstance(data.get("prompts"), dict):
                qdata = data["prompts"]
                if "assume_yes" in qdata:
                    prefs.prompts.assume_yes = bool(qdata["assume_yes"])
        except (OSError, yaml.YAMLError, AttributeError):
            logger.debug("failed to load preferences from %s", path, exc_info=True)
            return Preferences()
    else:
        # Create default file for user to customize
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(_DEFAULT_YAML, encoding="utf-8")
        except OSError:
            logger.debug("could not write default preferences to %s", path, exc_info=True)

    return prefs
