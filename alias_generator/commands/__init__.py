"""Command handler mixins for AliasApp."""

from .alias_cmds import AliasCommandsMixin  # noqa: F401
from .setup_cmds import SetupCommandsMixin  # noqa: F401

__all__ = [
    "AliasCommandsMixin",
    "SetupCommandsMixin",
]
