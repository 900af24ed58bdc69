"""
Path Dialect
============
Classifies raw path strings by the convention they are written in.

Dialects:
    native_posix    — /home/user/project, relative/paths, anything unmatched
    native_windows  — C:\\Users\\user\\project or C:/Users/user/project
    wsl_mount       — /mnt/c/Users/user/project (a Windows drive seen from WSL)

Classification is total: every string, including the empty string, lands in
exactly one dialect.  Nothing here touches the filesystem.
"""
import re
from dataclasses import dataclass, field
from typing import Optional


# ---------------------------------------------------------------------------
# Dialect Constants
# ---------------------------------------------------------------------------
class PathDialect:
    """Supported path dialect identifiers."""
    NATIVE_POSIX   = "native_posix"
    NATIVE_WINDOWS = "native_windows"
    WSL_MOUNT      = "wsl_mount"


PATH_DIALECTS: frozenset[str] = frozenset({
    PathDialect.NATIVE_POSIX,
    PathDialect.NATIVE_WINDOWS,
    PathDialect.WSL_MOUNT,
})

_WINDOWS_DRIVE_RE = re.compile(r"^([A-Za-z]):[\\/]")
_WSL_MOUNT_RE = re.compile(r"^/mnt/[a-zA-Z]/")


# ---------------------------------------------------------------------------
# Tagged Path
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TaggedPath:
    """
    Immutable raw path paired with its dialect.

    The dialect is computed from ``raw`` on construction and cannot be
    passed in.
    """
    raw: str
    dialect: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "dialect", classify(self.raw))


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------
def classify(raw: str) -> str:
    """
    Classify a raw path string into one of PATH_DIALECTS.

    Examples
    --------
    >>> classify("C:\\\\Users\\\\x")
    'native_windows'
    >>> classify("/mnt/d/work")
    'wsl_mount'
    >>> classify("/home/x")
    'native_posix'
    """
    if _WINDOWS_DRIVE_RE.match(raw):
        return PathDialect.NATIVE_WINDOWS
    if _WSL_MOUNT_RE.match(raw):
        return PathDialect.WSL_MOUNT
    return PathDialect.NATIVE_POSIX


def tag_path(raw: str) -> TaggedPath:
    """Resolve the dialect of ``raw`` and wrap both in a TaggedPath."""
    return TaggedPath(raw)


def drive_letter(raw: str) -> Optional[str]:
    """
    Return the lowercased drive letter of a native Windows path.

    Returns None for any other dialect.
    """
    match = _WINDOWS_DRIVE_RE.match(raw)
    if match is None:
        return None
    return match.group(1).lower()


def windows_to_wsl(raw: str) -> str:
    """
    Rewrite a native Windows path as its WSL mount equivalent.

    ``C:\\Users\\x\\note.txt`` becomes ``/mnt/c/Users/x/note.txt``.
    Non-Windows input is returned unchanged.
    """
    drive = drive_letter(raw)
    if drive is None:
        return raw
    rest = raw[2:].replace("\\", "/")
    return f"/mnt/{drive}{rest}"
