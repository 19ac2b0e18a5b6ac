"""Base one-file-per-record directory store."""

from __future__ import annotations

import os
from pathlib import Path

from ..constants import REGISTRY_DIR_MODE
from ..errors import RegistryIOError
from ..features.name_validator import is_plain_name
from ..log import logger


class DirectoryStore:
    """Records stored as ``<directory>/<name><extension>`` text files.

    Enumerating the directory is the only index: there is no cache, so
    :meth:`names` always reflects what is on disk right now.
    """

    def __init__(self, directory: Path, extension: str) -> None:
        self.directory = Path(directory)
        self.extension = extension

    # -- directory ------------------------------------------------------------

    def ensure_directory(self) -> bool:
        """Create the store directory if missing.  Returns True if created."""
        if self.directory.is_dir():
            return False
        try:
            self.directory.mkdir(mode=REGISTRY_DIR_MODE, parents=True)
        except OSError as exc:
            raise RegistryIOError(f"Cannot create {self.directory}: {exc}") from exc
        logger.debug("created store directory %s", self.directory)
        return True

    def path_for(self, name: str) -> Path:
        """Return the record file for *name*.

        Raises ValueError for names that would resolve outside the directory.
        """
        if not name or not is_plain_name(name):
            raise ValueError(f"not a record name: {name!r}")
        return self.directory / f"{name}{self.extension}"

    # -- core I/O -------------------------------------------------------------

    def names(self) -> list[str]:
        """Return the sorted names of every record in the directory."""
        try:
            entries = os.listdir(self.directory)
        except OSError as exc:
            raise RegistryIOError(f"Cannot read {self.directory}: {exc}") from exc
        ext_len = len(self.extension)
        return sorted(
            entry[:-ext_len]
            for entry in entries
            if entry.endswith(self.extension) and len(entry) > ext_len
        )

    def read(self, name: str) -> str | None:
        """Return the text of record *name*, or None if it does not exist."""
        path = self.path_for(name)
        try:
            # newline="" keeps the stored bytes intact on every platform
            with open(path, encoding="utf-8", newline="") as fh:
                return fh.read()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise RegistryIOError(f"Cannot read {path}: {exc}") from exc

    def write(self, name: str, text: str) -> Path:
        """Create or overwrite record *name* with *text*."""
        path = self.path_for(name)
        try:
            with open(path, "w", encoding="utf-8", newline="") as fh:
                fh.write(text)
        except OSError as exc:
            raise RegistryIOError(f"Cannot write {path}: {exc}") from exc
        logger.debug("wrote %s (%d bytes)", path, len(text))
        return path

    def remove(self, name: str) -> bool:
        """Delete record *name*.  Returns False if there was nothing to delete."""
        path = self.path_for(name)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise RegistryIOError(f"Cannot delete {path}: {exc}") from exc
        logger.debug("removed %s", path)
        return True
