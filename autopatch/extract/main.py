# autopatch/extract/main.py
import logging
from typing import List, Optional

from ..models.blocks import FileChange, ParsedBlock
from ..utils.paths import sanitize_file_path
from ..utils.text import normalize_content
from .fences import outer_fence_body
from .markers import pair_markers, tokenize_markers

log = logging.getLogger(__name__)


def parse_blocks(text: str) -> List[ParsedBlock]:
    """
    Extract every FILE_START/FILE_END delimited block from `text`.

    Pure and deterministic. Malformed blocks (missing or mismatched end marker,
    no fenced body) are dropped individually; the rest are returned in the
    order their markers appear.
    """
    if not text:
        return []

    blocks: List[ParsedBlock] = []
    for start_tok, end_tok in pair_markers(tokenize_markers(text)):
        region = text[start_tok.end:end_tok.start]
        fenced = outer_fence_body(region)
        if fenced is None:
            log.debug("Dropping block for '%s': no complete code fence", start_tok.path)
            continue
        language, body = fenced
        blocks.append(ParsedBlock(
            raw_path=start_tok.path,
            raw_content=body,
            marker_start=start_tok.start,
            marker_end=end_tok.end,
            language=language,
        ))
    return blocks


def extract_file_changes(text: str, eol: str = "\n", *, dropped: Optional[List[ParsedBlock]] = None) -> List[FileChange]:
    """
    Parse, sanitize and normalize blocks into candidate changes.

    Blocks whose path does not survive sanitization are skipped (and appended to
    `dropped` when a list is given). Content is normalized but has no trailing
    newline yet; reconciliation adds it against the current file.
    """
    candidates: List[FileChange] = []
    for block in parse_blocks(text):
        path = sanitize_file_path(block.raw_path)
        if path is None:
            log.debug("Dropping block with invalid path %r", block.raw_path)
            if dropped is not None:
                dropped.append(block)
            continue
        candidates.append(FileChange(path=path, content=normalize_content(block.raw_content, eol)))
    return candidates
