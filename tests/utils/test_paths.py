import os
import sys

import pytest

from autopatch.errors.path import PathViolation
from autopatch.utils.ignore import get_protected_spec
from autopatch.utils.paths import path_key, resolve_within_root, sanitize_file_path


@pytest.mark.parametrize(
    "raw, expected",
    [
        (" src\\app.ts ", "src/app.ts"),
        ("folder//sub///file.ts", "folder/sub/file.ts"),
        ("folder/sub/", "folder/sub"),
        ("../up/file.ts", "../up/file.ts"),
        ("./a/./b.txt", "a/b.txt"),
        ("a/x/../b.txt", "a/b.txt"),
    ],
)
def test_sanitize_file_path(raw, expected):
    assert sanitize_file_path(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", ".", "./", "a/..", None, "/etc/passwd", "C:\\win.ini"])
def test_sanitize_file_path_rejects(raw):
    assert sanitize_file_path(raw) is None


def test_path_key_follows_case_policy():
    assert path_key("Src/A.ts", True) == path_key("src/a.TS", True)
    assert path_key("Src/A.ts", False) != path_key("src/a.ts", False)


def test_resolve_within_root_allows_nested_and_dotdot_inside(tmp_path):
    base = str(tmp_path.resolve())
    assert resolve_within_root(base, "a/b/c.txt") == os.path.join(base, "a", "b", "c.txt")
    assert resolve_within_root(base, "a/../b.txt") == os.path.join(base, "b.txt")


def test_resolve_within_root_allows_names_starting_with_dots(tmp_path):
    base = str(tmp_path.resolve())
    assert resolve_within_root(base, "..config").endswith("..config")


@pytest.mark.parametrize("rel", ["../evil.txt", "a/../../evil.txt", ".."])
def test_resolve_within_root_blocks_traversal(tmp_path, rel):
    with pytest.raises(PathViolation, match="Path traversal detected"):
        resolve_within_root(str(tmp_path), rel)


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks require special permissions on Windows")
def test_resolve_within_root_blocks_symlink_escapes(tmp_path):
    base = tmp_path / "root"
    base.mkdir()
    outside = tmp_path / "outside.txt"
    outside.write_text("OUTSIDE")
    os.symlink(outside, base / "link")

    with pytest.raises(PathViolation):
        resolve_within_root(str(base), "link")


def test_resolve_within_root_blocks_protected_paths(tmp_path):
    spec = get_protected_spec([".git/", "*.lock"])
    with pytest.raises(PathViolation, match="protected"):
        resolve_within_root(str(tmp_path), ".git/config", spec)
    with pytest.raises(PathViolation, match="protected"):
        resolve_within_root(str(tmp_path), "deps/poetry.lock", spec)
    assert resolve_within_root(str(tmp_path), "src/git.txt", spec)
