"""Persistence layer – the registry directory is the only source of truth."""

from .aliases import AliasRegistry, DeleteOutcome
from ._base import DirectoryStore

__all__ = [
    "AliasRegistry",
    "DeleteOutcome",
    "DirectoryStore",
]
