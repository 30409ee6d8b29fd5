# autopatch/utils/text.py
import re
from typing import List, Optional

_LINE_SPLIT_RE = re.compile(r"\r?\n")
_LEADING_WS_RE = re.compile(r"^\s*")


def split_lines(text: str) -> List[str]:
    """Split on LF or CRLF, treating both as the same line break."""
    return _LINE_SPLIT_RE.split(text)


def to_lf(text: str) -> str:
    return text.replace("\r\n", "\n")


def apply_eol(text: str, eol: str) -> str:
    """Re-emit LF/CRLF text with a single line ending."""
    text = to_lf(text)
    if eol != "\n":
        text = text.replace("\n", eol)
    return text


def normalize_content(raw: str, eol: str = "\n") -> str:
    """
    Clean a fenced body extracted from marked-up text.

    - Removes the indentation shared by every non-blank line.
    - Drops blank lines at the very start and end of the block.
    - Joins lines with `eol`. No trailing newline is added here; that depends on
      the file being replaced (see `apply_trailing_newline`).
    """
    lines = split_lines(raw)
    non_blank = [line for line in lines if line.strip()]
    if not non_blank:
        return ""

    min_indent = min(len(_LEADING_WS_RE.match(line).group(0)) for line in non_blank)
    if min_indent > 0:
        lines = [line[min_indent:] for line in lines]

    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return eol.join(lines)


def trailing_newlines(text: str) -> int:
    """Count line breaks at the end of `text`, capped at two (one blank line)."""
    text = to_lf(text)
    count = 0
    while count < 2 and text.endswith("\n" * (count + 1)):
        count += 1
    return count


def apply_trailing_newline(content: str, existing: Optional[str], eol: str = "\n") -> str:
    """
    Finish normalized content with the trailing line breaks the target expects.

    New files (existing is None) get a single newline unless empty. Existing
    files keep their own ending: none, one newline, or one trailing blank line.
    """
    if not content:
        return content
    if existing is None:
        return content + eol
    return content + eol * trailing_newlines(existing)
