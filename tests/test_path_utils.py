"""
Unit Tests — Path Utils
=======================
Workspace-relative paths with an absolute fallback.
"""
import logging

from cliagent_mention.utils.path_utils import (
    workspace_relative_or_none,
    workspace_relative_path,
)

LOGGER = "cliagent_mention.utils.path_utils"


# ---------------------------------------------------------------------------
# 1. workspace_relative_path()
# ---------------------------------------------------------------------------
class TestWorkspaceRelativePath:

    def test_inside_posix_workspace(self):
        assert workspace_relative_path("/w/proj/src/a.py", "/w/proj") == "src/a.py"

    def test_inside_windows_workspace_case_insensitive(self):
        assert workspace_relative_path("c:\\Proj\\src\\a.py", "C:\\proj") == "src/a.py"

    def test_outside_workspace_is_absolute(self):
        assert workspace_relative_path("/other/a.py", "/w/proj") == "/other/a.py"

    def test_sibling_with_common_prefix_is_absolute(self):
        assert workspace_relative_path("/w/project2/a.py", "/w/proj") == "/w/project2/a.py"

    def test_other_drive_is_absolute(self):
        assert workspace_relative_path("D:\\a.py", "C:\\proj") == "D:\\a.py"

    def test_mixed_dialects_is_absolute(self):
        assert workspace_relative_path("/mnt/c/proj/a.py", "C:\\proj") == "/mnt/c/proj/a.py"

    def test_no_workspace(self):
        assert workspace_relative_path("/w/a.py", None) == "/w/a.py"

    def test_empty_workspace_is_no_workspace(self):
        assert workspace_relative_path("/w/a.py", "") == "/w/a.py"


# ---------------------------------------------------------------------------
# 2. Fallback logging
# ---------------------------------------------------------------------------
class TestFallbackLogging:

    def test_no_workspace_message(self, caplog):
        caplog.set_level(logging.DEBUG, logger=LOGGER)
        workspace_relative_path("/w/a.py", None)
        assert "No workspace folder, using absolute path: /w/a.py" in caplog.text
        assert "outside workspace" not in caplog.text

    def test_outside_workspace_message(self, caplog):
        caplog.set_level(logging.DEBUG, logger=LOGGER)
        workspace_relative_path("/other/a.py", "/w/proj")
        assert "File outside workspace /w/proj, using absolute path: /other/a.py" in caplog.text
        assert "No workspace folder" not in caplog.text

    def test_inside_workspace_has_no_warning(self, caplog):
        caplog.set_level(logging.DEBUG, logger=LOGGER)
        workspace_relative_path("/w/proj/a.py", "/w/proj")
        assert not any(r.levelno >= logging.WARNING for r in caplog.records)
        assert "Using workspace relative path: a.py" in caplog.text


# ---------------------------------------------------------------------------
# 3. workspace_relative_or_none()
# ---------------------------------------------------------------------------
class TestWorkspaceRelativeOrNone:

    def test_root_itself_is_none(self):
        assert workspace_relative_or_none("/w/proj", "/w/proj") is None

    def test_parent_is_none(self):
        assert workspace_relative_or_none("/w", "/w/proj") is None

    def test_nested(self):
        assert workspace_relative_or_none("/w/proj/a/b.py", "/w/proj") == "a/b.py"
