"""
Path Relativizer
================
Computes the relative path a terminal would accept to reach a file, when the
terminal's working directory and the file may be written in different path
dialects.

Dialect pair resolution (first match wins):
    1. Windows → Windows, different drives : absolute ``to`` path, unchanged
    2. WSL     → Windows                   : ``to`` rewritten under /mnt, POSIX relative
    3. Windows → WSL                       : ``from`` rewritten under /mnt, POSIX relative
    4. anything else                       : relative path in the ``from`` dialect

Separators follow the ``from`` dialect: backslashes when the terminal is a
native Windows shell, forward slashes for POSIX and WSL shells.

Every function here is total and never raises.
"""
import re
from typing import Callable, Optional

from cliagent_mention.utils.path_dialect import (
    PathDialect,
    TaggedPath,
    drive_letter,
    tag_path,
    windows_to_wsl,
)

POSIX_SEPARATOR = "/"
WINDOWS_SEPARATOR = "\\"
PARENT_SEGMENT = ".."

_WINDOWS_SPLIT_RE = re.compile(r"[\\/]")


# ---------------------------------------------------------------------------
# Segment helpers
# ---------------------------------------------------------------------------
def split_segments(raw: str, dialect: str) -> list[str]:
    """
    Split a path into its non-empty segments.

    Native Windows paths split on both separators; POSIX-family paths split
    on forward slashes only (a backslash is a legal POSIX filename char).
    """
    if dialect == PathDialect.NATIVE_WINDOWS:
        parts = _WINDOWS_SPLIT_RE.split(raw)
    else:
        parts = raw.split(POSIX_SEPARATOR)
    return [part for part in parts if part]


def _segment_key(dialect: str) -> Callable[[int, str], str]:
    # Windows filesystems are case-insensitive; under /mnt only the drive is.
    if dialect == PathDialect.NATIVE_WINDOWS:
        return lambda _index, segment: segment.casefold()
    if dialect == PathDialect.WSL_MOUNT:
        return lambda index, segment: segment.lower() if index == 1 else segment
    return lambda _index, segment: segment


def _common_prefix_length(
    from_segments: list[str],
    to_segments: list[str],
    key: Callable[[int, str], str],
) -> int:
    common = 0
    for index, (left, right) in enumerate(zip(from_segments, to_segments)):
        if key(index, left) != key(index, right):
            break
        common += 1
    return common


def relative_segments(
    from_raw: str,
    to_raw: str,
    dialect: str,
    separator: str,
    to_dialect: Optional[str] = None,
) -> str:
    """
    Segment-wise relative path from ``from_raw`` to ``to_raw``.

    Strips the common leading segments, emits one ``..`` per remaining
    ``from`` segment, then appends the remaining ``to`` segments, all joined
    with ``separator``.  Identical paths give the empty string.

    Parameters
    ----------
    from_raw : str
        Reference directory (the terminal working directory).
    to_raw : str
        Target path (the active file).
    dialect : str
        Dialect governing comparison of segments (the ``from`` dialect).
    separator : str
        Separator used to join the result.
    to_dialect : str | None
        Dialect used to split ``to_raw``; defaults to ``dialect``.
    """
    from_segments = split_segments(from_raw, dialect)
    to_segments = split_segments(to_raw, to_dialect or dialect)

    common = _common_prefix_length(from_segments, to_segments, _segment_key(dialect))

    ups = [PARENT_SEGMENT] * (len(from_segments) - common)
    return separator.join(ups + to_segments[common:])


def _posix_relative(from_raw: str, to_raw: str) -> str:
    return relative_segments(from_raw, to_raw, PathDialect.WSL_MOUNT, POSIX_SEPARATOR)


# ---------------------------------------------------------------------------
# Core relativization
# ---------------------------------------------------------------------------
def relativize(from_path: TaggedPath, to_path: TaggedPath) -> str:
    """
    Relative path from ``from_path`` (a directory) to ``to_path``.

    Returns
    -------
    str
        The relative path in the ``from`` dialect's separators, the absolute
        ``to`` path for cross-drive Windows pairs, or "" for identical paths.

    Examples
    --------
    >>> relativize(tag_path("/a/b/c"), tag_path("/a/d"))
    '../../d'
    >>> relativize(tag_path("/mnt/c/home/x/proj"), tag_path("C:\\\\home\\\\x\\\\note.txt"))
    '../note.txt'
    """
    match (from_path.dialect, to_path.dialect):
        case (PathDialect.NATIVE_WINDOWS, PathDialect.NATIVE_WINDOWS) if (
            drive_letter(from_path.raw) != drive_letter(to_path.raw)
        ):
            return to_path.raw
        case (PathDialect.WSL_MOUNT, PathDialect.NATIVE_WINDOWS):
            return _posix_relative(from_path.raw, windows_to_wsl(to_path.raw))
        case (PathDialect.NATIVE_WINDOWS, PathDialect.WSL_MOUNT):
            return _posix_relative(windows_to_wsl(from_path.raw), to_path.raw)
        case (PathDialect.NATIVE_WINDOWS, _):
            return relative_segments(
                from_path.raw,
                to_path.raw,
                PathDialect.NATIVE_WINDOWS,
                WINDOWS_SEPARATOR,
                to_dialect=to_path.dialect,
            )
        case _:
            return relative_segments(
                from_path.raw,
                to_path.raw,
                from_path.dialect,
                POSIX_SEPARATOR,
                to_dialect=to_path.dialect,
            )


def relative_path_between(
    from_raw: Optional[str],
    to_raw: Optional[str],
) -> Optional[str]:
    """
    Tag both raw paths and relativize them.

    Returns None ("cannot relate") when either side is missing.
    """
    if from_raw is None or to_raw is None:
        return None
    return relativize(tag_path(from_raw), tag_path(to_raw))
