from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedBlock:
    """One marker-delimited region of the source text with its fenced body."""

    raw_path: str
    raw_content: str
    marker_start: int  # index of the start marker's first character
    marker_end: int    # index AFTER the end marker's last character
    language: str = ""


@dataclass(frozen=True)
class FileChange:
    """Full proposed content for a sanitized, forward-slash relative path."""

    path: str
    content: str
