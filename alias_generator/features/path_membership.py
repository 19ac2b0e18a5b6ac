"""Search-path membership checks for ``;``-delimited path strings.

Path entries on Windows are often written with and without a trailing
backslash, so a candidate also matches a segment equal to the candidate
minus its last character (``C:\\Foo\\`` matches ``C:\\Foo``).
"""

from __future__ import annotations

from ..constants import PATH_SEPARATOR
from ..errors import MalformedPathError
from ..log import logger


def split_path_segments(path_string: str, separator: str = PATH_SEPARATOR) -> list[str]:
    """Split *path_string* into its segments, keeping empty ones.

    Raises :class:`MalformedPathError` when the string holds no separator.
    """
    if separator not in path_string:
        raise MalformedPathError(f"Path not formatted correctly: {path_string!r}")
    return path_string.split(separator)


def _segment_matches(candidate: str, segment: str) -> bool:
    if segment == candidate:
        return True
    # An empty segment never matches a non-empty candidate
    return len(candidate) > 1 and segment == candidate[:-1]


def path_contains(candidate: str, path_string: str, separator: str = PATH_SEPARATOR) -> bool:
    """Return True if *candidate* is one of the segments of *path_string*.

    Never raises: a path string without any separator is logged and
    compared as a single segment.
    """
    try:
        segments = split_path_segments(path_string, separator)
    except MalformedPathError:
        logger.warning("Path not formatted correctly; treating it as one entry")
        return _segment_matches(candidate, path_string)

    for segment in segments:
        if _segment_matches(candidate, segment):
            return True
    return False


def append_path_segment(
    directory: str, path_string: str, separator: str = PATH_SEPARATOR
) -> str:
    """Return *path_string* with *directory* added as its last segment.

    Unchanged when *directory* is already present.
    """
    if path_contains(directory, path_string, separator):
        return path_string
    if not path_string:
        return directory
    if path_string.endswith(separator):
        return path_string + directory
    return path_string + separator + directory
