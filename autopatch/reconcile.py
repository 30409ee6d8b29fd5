# autopatch/reconcile.py
import asyncio
import logging
from typing import Awaitable, Callable, List, Optional

from .models.blocks import FileChange
from .utils.text import apply_trailing_newline, to_lf

log = logging.getLogger(__name__)

Lookup = Callable[[str], Optional[str]]
AsyncLookup = Callable[[str], Awaitable[Optional[str]]]


class _Unreadable:
    """Marker for a lookup that failed with something other than 'not found'."""

    def __init__(self, error: BaseException):
        self.error = error


def _decide(candidate: FileChange, current, eol: str) -> Optional[FileChange]:
    if isinstance(current, _Unreadable):
        # Unreadable target: keep the change, finished like a new file.
        log.warning("Could not read '%s' (%s); keeping proposed change", candidate.path, current.error)
        return FileChange(candidate.path, apply_trailing_newline(candidate.content, None, eol))

    final = apply_trailing_newline(candidate.content, current, eol)
    if current is None:
        if not final:
            log.debug("Skipping '%s': new file with empty content", candidate.path)
            return None
        return FileChange(candidate.path, final)

    if to_lf(current) == to_lf(final):
        log.debug("Skipping '%s': content unchanged", candidate.path)
        return None
    return FileChange(candidate.path, final)


def _fetch(lookup: Lookup, path: str):
    try:
        return lookup(path)
    except FileNotFoundError:
        return None
    except Exception as e:
        return _Unreadable(e)


def reconcile(candidates: List[FileChange], lookup: Lookup, *, eol: str = "\n") -> List[FileChange]:
    """
    Drop candidates that would not change anything on disk.

    `lookup(path)` returns the current text, or None / raises FileNotFoundError
    when the path does not exist. Surviving candidates get the trailing newline
    convention of the file they replace; input order is kept.
    """
    result: List[FileChange] = []
    for candidate in candidates:
        decided = _decide(candidate, _fetch(lookup, candidate.path), eol)
        if decided is not None:
            result.append(decided)
    return result


async def _fetch_async(lookup: AsyncLookup, path: str):
    try:
        return await lookup(path)
    except FileNotFoundError:
        return None
    except Exception as e:
        return _Unreadable(e)


async def reconcile_async(candidates: List[FileChange], lookup: AsyncLookup, *, eol: str = "\n") -> List[FileChange]:
    """Like `reconcile`, awaiting all lookups concurrently."""
    currents = await asyncio.gather(*(_fetch_async(lookup, c.path) for c in candidates))
    result: List[FileChange] = []
    for candidate, current in zip(candidates, currents):
        decided = _decide(candidate, current, eol)
        if decided is not None:
            result.append(decided)
    return result
