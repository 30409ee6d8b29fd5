# autopatch/extract/markers.py
from __future__ import annotations

import logging
import re
from typing import List, Tuple

from ..models.marker import MarkerToken

log = logging.getLogger(__name__)

# <!-- FILE_START: path/to/file.ext --> ... <!-- FILE_END: path/to/file.ext -->
_MARKER_RE = re.compile(r"<!--[ \t]*FILE_(?P<kind>START|END)[ \t]*:(?P<path>[^\r\n]*?)-->")


def tokenize_markers(text: str) -> List[MarkerToken]:
    """First pass: collect every start/end marker in source order."""
    tokens: List[MarkerToken] = []
    for m in _MARKER_RE.finditer(text):
        tokens.append(MarkerToken(
            kind=m.group("kind").lower(),
            path=m.group("path").strip(),
            start=m.start(),
            end=m.end(),
        ))
    return tokens


def pair_markers(tokens: List[MarkerToken]) -> List[Tuple[MarkerToken, MarkerToken]]:
    """
    Second pass: pair each start marker with the next end marker naming the
    same path.

    Everything between a pair belongs to that block, so markers quoted inside
    a file's content (a README documenting this format) are not paired on
    their own. A start with no matching end later in the text is dropped and
    scanning resumes at the following marker. Stray end markers are skipped.
    """
    pairs: List[Tuple[MarkerToken, MarkerToken]] = []
    i = 0
    while i < len(tokens):
        tok = tokens[i]
        if tok.kind != "start":
            i += 1
            continue
        j = next(
            (k for k in range(i + 1, len(tokens))
             if tokens[k].kind == "end" and tokens[k].path == tok.path),
            None,
        )
        if j is None:
            log.debug("Dropping block for '%s': no matching FILE_END marker", tok.path)
            i += 1
            continue
        pairs.append((tok, tokens[j]))
        # Markers inside the claimed region are content.
        i = j + 1
    return pairs
