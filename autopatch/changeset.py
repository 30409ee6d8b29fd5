# autopatch/changeset.py
import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from .models.blocks import FileChange
from .utils.paths import path_key

log = logging.getLogger(__name__)

Listener = Callable[[str], None]


class ChangeSet:
    """
    Ordered pending changes, unique by path under the active case policy.

    Replacing a path keeps its position; removals never reorder the rest.
    Every mutation notifies listeners once per affected path, after the
    change is visible.
    """

    def __init__(self, *, case_insensitive: bool = False):
        self.case_insensitive = case_insensitive
        self._changes: List[FileChange] = []
        self._listeners: List[Listener] = []

    def _key(self, path: str) -> str:
        return path_key(path, self.case_insensitive)

    def _index_of(self, path: str) -> Optional[int]:
        key = self._key(path)
        for i, change in enumerate(self._changes):
            if self._key(change.path) == key:
                return i
        return None

    # -- listeners ------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register `listener(path)`; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, paths: Iterable[str]) -> None:
        seen = set()
        for path in paths:
            key = self._key(path)
            if key in seen:
                continue
            seen.add(key)
            for listener in list(self._listeners):
                try:
                    listener(path)
                except Exception:
                    log.exception("Change listener failed for '%s'", path)

    # -- mutations ------------------------------------------------------

    def set_changes(self, changes: Iterable[FileChange]) -> None:
        """Replace the whole set. A repeated path keeps its first position and last content."""
        old_paths = [c.path for c in self._changes]
        merged: List[FileChange] = []
        slots: Dict[str, int] = {}
        for change in changes:
            key = self._key(change.path)
            if key in slots:
                merged[slots[key]] = change
            else:
                slots[key] = len(merged)
                merged.append(change)
        self._changes = merged
        self._notify(old_paths + [c.path for c in merged])

    def add_change(self, change: FileChange) -> None:
        """Append `change`, or replace the entry for its path in place."""
        idx = self._index_of(change.path)
        if idx is None:
            self._changes.append(change)
        else:
            self._changes[idx] = change
        self._notify([change.path])

    def remove_change(self, change: FileChange) -> bool:
        """
        Remove the entry for `change.path` if it still holds this change.

        A stale change (its path was since given new content) is left alone.
        Returns True when an entry was removed.
        """
        idx = self._index_of(change.path)
        if idx is None or self._changes[idx].content != change.content:
            return False
        removed = self._changes.pop(idx)
        self._notify([removed.path])
        return True

    def clear(self) -> None:
        old_paths = [c.path for c in self._changes]
        self._changes = []
        self._notify(old_paths)

    # -- queries --------------------------------------------------------

    def find_change(self, path: str) -> Optional[FileChange]:
        idx = self._index_of(path)
        return None if idx is None else self._changes[idx]

    def get_changes(self) -> Tuple[FileChange, ...]:
        return tuple(self._changes)

    @property
    def is_empty(self) -> bool:
        return not self._changes

    def __len__(self) -> int:
        return len(self._changes)

    def __iter__(self) -> Iterator[FileChange]:
        return iter(tuple(self._changes))
