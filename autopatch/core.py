# autopatch/core.py
import logging
from typing import List, Optional

from .extract import extract_file_changes
from .models.blocks import FileChange, ParsedBlock
from .reconcile import Lookup, reconcile

log = logging.getLogger(__name__)


def prepare_changes(
    text: str,
    lookup: Lookup,
    *,
    eol: str = "\n",
    dropped: Optional[List[ParsedBlock]] = None,
) -> List[FileChange]:
    """
    Turn marked-up text into the pending changes worth reviewing.

    raw text -> blocks -> sanitized candidates -> normalized content ->
    reconciled against `lookup`. Bad blocks are dropped one at a time.
    """
    candidates = extract_file_changes(text, eol, dropped=dropped)
    changes = reconcile(candidates, lookup, eol=eol)
    log.debug("Prepared %d of %d candidate change(s)", len(changes), len(candidates))
    return changes
