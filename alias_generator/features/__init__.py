"""Decision logic with no terminal I/O: path membership and name checks."""

from .name_validator import (
    NameRejection,
    NameValidator,
    SystemCommandLookup,
    check_name,
    is_command_available,
    is_name_available,
    is_plain_name,
    is_reserved_name,
    validate_command,
    validate_name,
)
from .path_membership import append_path_segment, path_contains, split_path_segments

__all__ = [
    "NameRejection",
    "NameValidator",
    "SystemCommandLookup",
    "append_path_segment",
    "check_name",
    "is_command_available",
    "is_name_available",
    "is_plain_name",
    "is_reserved_name",
    "path_contains",
    "split_path_segments",
    "validate_command",
    "validate_name",
]
