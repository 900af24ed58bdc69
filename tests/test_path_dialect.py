"""
Unit Tests — Path Dialect
=========================
Classification of raw path strings and Windows → WSL rewriting.
"""
import string

import pytest
from cliagent_mention.utils.path_dialect import (
    PATH_DIALECTS,
    PathDialect,
    TaggedPath,
    classify,
    drive_letter,
    tag_path,
    windows_to_wsl,
)


# ---------------------------------------------------------------------------
# 1. Dialect constants
# ---------------------------------------------------------------------------
class TestDialectConstants:

    def test_three_dialects(self):
        assert PATH_DIALECTS == {"native_posix", "native_windows", "wsl_mount"}

    def test_class_members_match_set(self):
        for attr in ("NATIVE_POSIX", "NATIVE_WINDOWS", "WSL_MOUNT"):
            assert getattr(PathDialect, attr) in PATH_DIALECTS


# ---------------------------------------------------------------------------
# 2. classify()
# ---------------------------------------------------------------------------
class TestClassify:

    @pytest.mark.parametrize("letter", string.ascii_letters)
    def test_every_drive_letter_with_backslash_is_windows(self, letter):
        assert classify(f"{letter}:\\work") == PathDialect.NATIVE_WINDOWS

    @pytest.mark.parametrize("letter", "CDEZcdez")
    def test_drive_letter_with_forward_slash_is_windows(self, letter):
        assert classify(f"{letter}:/work/src") == PathDialect.NATIVE_WINDOWS

    @pytest.mark.parametrize("letter", string.ascii_lowercase)
    def test_every_mnt_drive_is_wsl(self, letter):
        assert classify(f"/mnt/{letter}/home") == PathDialect.WSL_MOUNT

    def test_uppercase_mnt_drive_is_wsl(self):
        assert classify("/mnt/C/Users") == PathDialect.WSL_MOUNT

    def test_plain_posix(self):
        assert classify("/home/user/project") == PathDialect.NATIVE_POSIX

    def test_bare_drive_without_separator_is_posix(self):
        assert classify("C:") == PathDialect.NATIVE_POSIX

    def test_mnt_without_trailing_separator_is_posix(self):
        assert classify("/mnt/c") == PathDialect.NATIVE_POSIX

    def test_multi_letter_mnt_segment_is_posix(self):
        assert classify("/mnt/data/file") == PathDialect.NATIVE_POSIX

    def test_empty_string_is_posix(self):
        assert classify("") == PathDialect.NATIVE_POSIX

    def test_garbage_is_posix(self):
        assert classify("::not a path::") == PathDialect.NATIVE_POSIX

    def test_relative_path_is_posix(self):
        assert classify("src/app.py") == PathDialect.NATIVE_POSIX


# ---------------------------------------------------------------------------
# 3. tag_path()
# ---------------------------------------------------------------------------
class TestTagPath:

    def test_dialect_derived_from_raw(self):
        tagged = tag_path("D:\\repo")
        assert tagged.raw == "D:\\repo"
        assert tagged.dialect == PathDialect.NATIVE_WINDOWS
        assert tagged == TaggedPath("D:\\repo")

    def test_constructor_classifies(self):
        assert TaggedPath("/mnt/c/work").dialect == PathDialect.WSL_MOUNT
        assert TaggedPath("/home/x").dialect == PathDialect.NATIVE_POSIX

    def test_dialect_cannot_be_passed_in(self):
        with pytest.raises(TypeError):
            TaggedPath(raw="C:\\a\\b", dialect=PathDialect.WSL_MOUNT)

    def test_tagged_path_is_frozen(self):
        tagged = tag_path("/home/x")
        with pytest.raises(Exception):
            tagged.dialect = PathDialect.WSL_MOUNT


# ---------------------------------------------------------------------------
# 4. drive_letter()
# ---------------------------------------------------------------------------
class TestDriveLetter:

    def test_lowercases(self):
        assert drive_letter("C:\\Users") == "c"

    def test_already_lowercase(self):
        assert drive_letter("e:/work") == "e"

    def test_none_for_posix(self):
        assert drive_letter("/home/x") is None

    def test_none_for_wsl(self):
        assert drive_letter("/mnt/c/Users") is None


# ---------------------------------------------------------------------------
# 5. windows_to_wsl()
# ---------------------------------------------------------------------------
class TestWindowsToWsl:

    def test_backslash_path(self):
        assert windows_to_wsl("C:\\Users\\x\\note.txt") == "/mnt/c/Users/x/note.txt"

    def test_forward_slash_path(self):
        assert windows_to_wsl("D:/work/src") == "/mnt/d/work/src"

    def test_drive_root(self):
        assert windows_to_wsl("E:\\") == "/mnt/e/"

    def test_posix_is_identity(self):
        assert windows_to_wsl("/home/x") == "/home/x"

    def test_wsl_is_identity(self):
        assert windows_to_wsl("/mnt/c/x") == "/mnt/c/x"

    @pytest.mark.parametrize("raw", [
        "C:\\Users\\x",
        "z:\\a\\b\\c.txt",
        "D:/mixed\\seps/file",
        "E:\\",
    ])
    def test_result_reclassifies_as_wsl(self, raw):
        assert classify(windows_to_wsl(raw)) == PathDialect.WSL_MOUNT
