# autopatch/extract/fences.py
from __future__ import annotations

from typing import Optional, Tuple

FENCE = "```"


def _trailing_backticks(text: str) -> int:
    n = 0
    while n < len(text) and text[len(text) - 1 - n] == "`":
        n += 1
    return n


def outer_fence_body(region: str) -> Optional[Tuple[str, str]]:
    """
    Return (language, body) for the outermost fence pair of a marker region.

    The opening fence must be the first non-whitespace text of the region and
    end its line; the closing fence is the last backtick run before the region
    ends. Fence-like runs in between belong to the body.
    Returns None when either fence or the opener's newline is missing.
    """
    lead = len(region) - len(region.lstrip())
    if not region.startswith(FENCE, lead):
        return None

    newline = region.find("\n", lead)
    if newline == -1:
        return None
    info = region[lead:newline].rstrip("\r").lstrip("`").strip()
    body_start = newline + 1

    tail = region.rstrip()
    run = _trailing_backticks(tail)
    if run < len(FENCE):
        return None
    body_end = len(tail) - run
    if body_end < body_start:
        # The only fence on the tail is the opener itself.
        return None

    parts = info.split()
    language = parts[0].lower() if parts else ""
    return language, region[body_start:body_end]
