# autopatch/utils/paths.py
import os
import posixpath
import re
from typing import Optional

import pathspec

from ..errors.path import PathViolation

_DRIVE_RE = re.compile(r"^[A-Za-z]:/")


def sanitize_file_path(raw: Optional[str]) -> Optional[str]:
    """
    Lexically normalize a path payload taken from a file marker.

    Returns the forward-slash relative path, or None when the payload cannot name
    a file (empty, '.', absolute). '..' segments are kept; containment is checked
    later against a concrete root by `resolve_within_root`.
    """
    if raw is None:
        return None
    candidate = raw.strip()
    if not candidate:
        return None

    candidate = candidate.replace("\\", "/")
    if candidate.startswith("/") or _DRIVE_RE.match(candidate):
        return None

    # normpath collapses '.', '//' and 'a/../' without touching the filesystem.
    normalized = posixpath.normpath(candidate)
    if normalized.endswith("/"):
        normalized = normalized[:-1]
    if normalized in ("", "."):
        return None
    return normalized


def path_key(path: str, case_insensitive: bool) -> str:
    """Comparison key for a sanitized path under the active case policy."""
    return path.lower() if case_insensitive else path


def resolve_within_root(
    root: str,
    rel_path: str,
    protected: Optional[pathspec.PathSpec] = None,
) -> str:
    """
    Join a sanitized relative path onto `root` and enforce containment.

    Raises PathViolation when the relative path computed back from the resolved
    target leaves the root, is absolute, or hits a protected pattern.
    Existing targets are resolved through symlinks; new ones lexically.
    """
    root_real = os.path.realpath(root)
    target = os.path.join(root_real, *rel_path.split("/"))
    if os.path.exists(target):
        resolved = os.path.realpath(target)
    else:
        resolved = os.path.abspath(target)

    relative = os.path.relpath(resolved, root_real)
    if (
        relative == os.pardir
        or relative.startswith(os.pardir + os.sep)
        or os.path.isabs(relative)
    ):
        raise PathViolation(
            f'Path traversal detected. Attempted to write to "{rel_path}", which is outside the workspace.'
        )

    if protected is not None:
        probe = relative.replace(os.sep, "/")
        if protected.match_file(probe):
            raise PathViolation(f'Refusing to write to protected path "{rel_path}".')
    return resolved
