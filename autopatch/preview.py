# autopatch/preview.py
import difflib
from typing import Optional
from urllib.parse import quote, unquote

from .utils.text import to_lf


def to_virtual_document_uri(scheme: str, path: str) -> str:
    """
    URI under which a pending change's content is served to a diff viewer.
    Every path segment is percent-encoded so spaces, '#' and '?' survive.
    """
    return f"{scheme}:/{quote(path, safe='/')}"


def from_virtual_document_uri(uri: str) -> str:
    """Recover the relative path from a URI built by `to_virtual_document_uri`."""
    _scheme, sep, rest = uri.partition(":")
    encoded = rest if sep else uri
    if encoded.startswith("/"):
        encoded = encoded[1:]
    try:
        return unquote(encoded, errors="strict")
    except UnicodeDecodeError:
        return encoded


def render_diff(path: str, current: Optional[str], proposed: str, *, context: int = 3) -> str:
    """
    Whole-file unified diff for display. `current` None means the file does
    not exist yet and is shown against /dev/null.
    """
    before = to_lf(current or "").splitlines(keepends=True)
    after = to_lf(proposed).splitlines(keepends=True)
    fromfile = f"a/{path}" if current is not None else "/dev/null"
    return "".join(difflib.unified_diff(before, after, fromfile=fromfile, tofile=f"b/{path}", n=context))
