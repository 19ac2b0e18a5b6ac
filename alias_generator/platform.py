"""Platform-specific pieces of alias-generator.

Detects the runtime platform once at import time.  Everything that touches
the real environment (default directories, the search-path variable, the
Windows user environment in the registry) lives here so the rest of the
package stays platform neutral.
"""

from __future__ import annotations

import os
import platform
import sys
from pathlib import Path

from .constants import POSIX_REGISTRY_DIR_NAME, WINDOWS_REGISTRY_DIR
from .features.path_membership import append_path_segment
from .log import logger

# ---------------------------------------------------------------------------
# Platform detection (runs once at import time)
# ---------------------------------------------------------------------------

_system = platform.system()  # "Linux", "Darwin", "Windows"

IS_WINDOWS = _system == "Windows"

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


def default_registry_dir() -> Path:
    """Return the directory that holds the alias shims.

    ``C:\\Cmd_Aliases\\`` on Windows, ``~/.cmd_aliases`` elsewhere.
    """
    if IS_WINDOWS:
        return Path(WINDOWS_REGISTRY_DIR)
    return Path.home() / POSIX_REGISTRY_DIR_NAME


def registry_dir_string(directory: Path) -> str:
    """Return *directory* as it is written into a search path (trailing separator)."""
    text = str(directory)
    return text if text.endswith(os.sep) else text + os.sep


def bootstrap_command() -> str:
    """Return the command line the ``alias`` shim runs to reach this tool."""
    script = sys.argv[0] if sys.argv else ""
    if script:
        candidate = Path(script).resolve()
        if candidate.suffix.lower() != ".exe":
            candidate = candidate.with_suffix(".exe")
        if candidate.is_file():
            return f'"{candidate}" %*'
    return f'"{sys.executable}" -m alias_generator %*'


# ---------------------------------------------------------------------------
# Search path
# ---------------------------------------------------------------------------


def read_search_path(variable: str) -> str:
    """Return the current value of the search-path *variable* ("" if unset)."""
    value = os.environ.get(variable)
    if value is None:
        # Environment names are case-sensitive outside Windows
        value = os.environ.get(variable.upper(), "")
    return value


def path_instructions(directory: str) -> list[str]:
    """Return step-by-step instructions for adding *directory* by hand."""
    if IS_WINDOWS:
        return [
            "Instructions (for Windows):",
            "-Open start menu. Search for 'System' (not 'System Information')",
            "-Navigate to System -> Advanced system settings -> Environment Variables",
            "-Under 'System variables', find 'Path'. Click on it and click 'Edit...'",
            f"-Click 'New' and input '{directory}' (without the apostrophes)",
            "-Save all changes. Run this program again.",
        ]
    return [
        "Add this line to your shell profile and open a new terminal:",
        f'  export PATH="$PATH:{directory}"',
    ]


def add_to_user_path(directory: str, variable: str, separator: str) -> bool:
    """Append *directory* to the persistent user search path.

    Windows only: updates ``HKCU\\Environment`` and broadcasts the change so
    new consoles pick it up.  Returns False when the change could not be made
    (or on other platforms, where the user edits their profile instead).
    """
    if not IS_WINDOWS:
        return False

    import ctypes
    import winreg

    try:
        with winreg.OpenKey(
            winreg.HKEY_CURRENT_USER, "Environment", 0, winreg.KEY_READ | winreg.KEY_WRITE
        ) as key:
            try:
                current, value_type = winreg.QueryValueEx(key, variable)
            except FileNotFoundError:
                current, value_type = "", winreg.REG_EXPAND_SZ
            updated = append_path_segment(directory, current, separator)
            if updated == current:
                return True
            winreg.SetValueEx(key, variable, 0, value_type, updated)
    except OSError:
        logger.debug("updating user %s in the registry failed", variable, exc_info=True)
        return False

    # HWND_BROADCAST, WM_SETTINGCHANGE, SMTO_ABORTIFHUNG
    try:
        ctypes.windll.user32.SendMessageTimeoutW(
            0xFFFF, 0x001A, 0, "Environment", 0x0002, 5000, None
        )
    except OSError:
        logger.debug("environment change broadcast failed", exc_info=True)
    os.environ[variable] = append_path_segment(
        directory, read_search_path(variable), separator
    )
    return True
