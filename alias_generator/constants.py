"""Module-level constants for alias-generator."""

from __future__ import annotations

# Name of the alias that points back at this tool.  Always present once
# setup has run; never deletable and never usable for anything else.
BOOTSTRAP_ALIAS = "alias"

SHIM_EXTENSION = ".cmd"
SHIM_PREAMBLE = "@echo off"

# Registry directory used on Windows when the preferences leave it empty
WINDOWS_REGISTRY_DIR = "C:\\Cmd_Aliases\\"
POSIX_REGISTRY_DIR_NAME = ".cmd_aliases"

PATH_VARIABLE = "Path"
PATH_SEPARATOR = ";"

# Characters and names that would take an alias file outside the registry
NAME_SEPARATORS: tuple[str, ...] = ("/", "\\")
DOT_NAMES = frozenset({".", ".."})

# Owner read/write/execute
REGISTRY_DIR_MODE = 0o700

# Sub-commands understood by the dispatcher.  ``delete`` with no name lists.
SUBCOMMANDS: tuple[str, ...] = (
    "list",
    "delete",
    "help",
    "special",
)

# Commands reported by cmd.exe ``help``.  Lower-case; lookups fold case.
CMD_BUILTINS: frozenset[str] = frozenset(
    {
        "assoc",
        "attrib",
        "bcdedit",
        "break",
        "cacls",
        "call",
        "cd",
        "chcp",
        "chdir",
        "chkdsk",
        "chkntfs",
        "cls",
        "cmd",
        "color",
        "comp",
        "compact",
        "convert",
        "copy",
        "date",
        "del",
        "dir",
        "diskpart",
        "doskey",
        "driverquery",
        "echo",
        "endlocal",
        "erase",
        "exit",
        "fc",
        "find",
        "findstr",
        "for",
        "format",
        "fsutil",
        "ftype",
        "goto",
        "gpresult",
        "graftabl",
        "help",
        "icacls",
        "if",
        "label",
        "md",
        "mkdir",
        "mklink",
        "mode",
        "more",
        "move",
        "openfiles",
        "path",
        "pause",
        "popd",
        "print",
        "prompt",
        "pushd",
        "rd",
        "recover",
        "rem",
        "ren",
        "rename",
        "replace",
        "rmdir",
        "robocopy",
        "sc",
        "schtasks",
        "set",
        "setlocal",
        "shift",
        "shutdown",
        "sort",
        "start",
        "subst",
        "systeminfo",
        "taskkill",
        "tasklist",
        "time",
        "title",
        "tree",
        "type",
        "ver",
        "verify",
        "vol",
        "wmic",
        "xcopy",
    }
)
