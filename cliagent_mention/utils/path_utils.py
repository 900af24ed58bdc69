"""
Path Utils
==========
Path normalisation and workspace-relative conversion helpers.

Responsibilities:
    - Convert absolute file paths to workspace-relative paths
    - Always join relative results with forward slashes
    - Fall back to the absolute path for files outside the workspace
"""
import logging
from typing import Optional

from cliagent_mention.utils.path_dialect import tag_path
from cliagent_mention.utils.path_relativizer import (
    PARENT_SEGMENT,
    POSIX_SEPARATOR,
    relative_segments,
)

logger = logging.getLogger(__name__)


def workspace_relative_or_none(file_path: str, workspace_root: str) -> Optional[str]:
    """
    Forward-slash path of ``file_path`` below ``workspace_root``.

    Returns None when the two are in different dialects, the file is the
    root itself, or the file is outside the root.
    """
    root = tag_path(workspace_root)
    target = tag_path(file_path)
    if root.dialect != target.dialect:
        return None

    rel = relative_segments(root.raw, target.raw, root.dialect, POSIX_SEPARATOR)
    if not rel or rel == PARENT_SEGMENT or rel.startswith(PARENT_SEGMENT + POSIX_SEPARATOR):
        return None
    return rel


def workspace_relative_path(file_path: str, workspace_root: Optional[str]) -> str:
    """
    Workspace-relative path with forward slashes, like an editor's
    "relative path" copy action.

    Parameters
    ----------
    file_path : str
        Absolute path of the document.
    workspace_root : str | None
        Absolute path of the containing workspace folder, if any.

    Returns
    -------
    str
        Relative path when the file is inside the workspace, else
        ``file_path`` unchanged.
    """
    if not workspace_root:
        logger.warning("No workspace folder, using absolute path: %s", file_path)
        return file_path
    rel = workspace_relative_or_none(file_path, workspace_root)
    if rel is None:
        logger.warning(
            "File outside workspace %s, using absolute path: %s", workspace_root, file_path
        )
        return file_path
    logger.debug("Using workspace relative path: %s", rel)
    return rel
