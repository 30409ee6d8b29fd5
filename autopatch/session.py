# autopatch/session.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, MutableMapping, Optional

from ._logging import resolve_logger
from .changeset import ChangeSet
from .commit import CommitSummary, apply_single_change, commit_changes
from .extract import extract_file_changes
from .errors import CommitError, ExtractError
from .models.blocks import FileChange, ParsedBlock
from .providers import PendingChangesProvider
from .reconcile import reconcile
from .settings import PatchSettings
from .system import read_clipboard
from .workspace import Workspace

LAST_INPUT_KEY = "autopatch.lastInput"


@dataclass
class PreviewReport:
    """What a preview produced, for the host to report."""

    changes: List[FileChange] = field(default_factory=list)
    candidates: List[FileChange] = field(default_factory=list)
    dropped: List[ParsedBlock] = field(default_factory=list)
    empty_input: bool = False

    @property
    def no_blocks_found(self) -> bool:
        """Non-empty input held no file blocks at all: likely a format mistake worth surfacing."""
        return not self.empty_input and not self.candidates and not self.dropped


class PatchSession:
    """
    Owns one ChangeSet for one workspace and runs the preview/apply/discard cycle.

    Everything ambient is injected: the root, settings, the clipboard reader
    and `state`, a mapping where the last input is persisted between runs.
    Callers must not run two previews concurrently; the later call wins.
    """

    def __init__(
        self,
        root: str,
        settings: Optional[PatchSettings] = None,
        *,
        changeset: Optional[ChangeSet] = None,
        workspace: Optional[Workspace] = None,
        clipboard: Optional[Callable[[], Optional[str]]] = None,
        state: Optional[MutableMapping[str, str]] = None,
        logger: Optional[logging.Logger] = None,
        log: bool = False,
    ):
        self.settings = settings or PatchSettings()
        self.workspace = workspace or Workspace(root, protected=self.settings.protected)
        self.changeset = changeset or ChangeSet(case_insensitive=self.settings.is_case_insensitive)
        self.provider = PendingChangesProvider(self.changeset, self.workspace)
        self._clipboard = clipboard or read_clipboard
        self.state: MutableMapping[str, str] = state if state is not None else {}
        self.log = resolve_logger(logger=logger, enabled=log, name=__name__)

    @property
    def last_input(self) -> str:
        return self.state.get(LAST_INPUT_KEY, "")

    def save_input(self, text: str) -> None:
        self.state[LAST_INPUT_KEY] = text

    # -- preview ------------------------------------------------------------

    def preview(self, text: str, *, strict: bool = False) -> PreviewReport:
        """
        Parse `text` and replace the pending changes with whatever differs
        from the workspace. With strict=True, non-empty input that yields no
        blocks raises ExtractError after the (now empty) set is published.
        """
        self.save_input(text)
        report = PreviewReport(empty_input=not (text or "").strip())
        eol = self.settings.line_ending
        report.candidates = extract_file_changes(text or "", eol, dropped=report.dropped)
        report.changes = reconcile(report.candidates, self.workspace.read, eol=eol)
        self.changeset.set_changes(report.changes)

        if report.no_blocks_found:
            self.log.info("No valid file changes found in input.")
            if strict:
                raise ExtractError("No valid file changes found in input.")
        else:
            self.log.debug(f"Previewing {len(report.changes)} change(s)")
        return report

    def paste_and_preview(self, *, strict: bool = False) -> PreviewReport:
        text = self._clipboard() or ""
        return self.preview(text, strict=strict)

    # -- apply ----------------------------------------------------------------

    def apply_change(self, change: FileChange) -> str:
        """Write one pending change and drop it from the set. Raises CommitError."""
        try:
            written = apply_single_change(self.workspace, change, atomic=self.settings.atomic)
        except Exception as e:
            self.log.error(f"Failed to apply change to {change.path}: {e}")
            raise CommitError(f"Failed to apply change to {change.path}: {e}", path=change.path) from e
        self.changeset.remove_change(change)
        self.log.info(f"Applied {change.path}")
        return written

    def apply_all(self, mode: Optional[str] = None) -> CommitSummary:
        """
        Write every pending change in order, removing each one that lands.
        The default fail_fast mode aborts the rest after the first failure.
        """
        changes = list(self.changeset.get_changes())
        if not changes:
            self.log.info("No changes to apply.")
            return CommitSummary()

        summary = commit_changes(
            self.workspace,
            changes,
            mode=mode or self.settings.apply_mode,
            atomic=self.settings.atomic,
        )
        for change in summary.applied:
            self.changeset.remove_change(change)

        if summary.failed:
            self.log.warning(
                f"{len(summary.applied)} of {len(changes)} changes applied before an error occurred."
            )
        else:
            self.log.info(f"{len(summary.applied)} changes applied successfully.")
        return summary

    # -- discard --------------------------------------------------------------

    def discard_change(self, change: FileChange) -> bool:
        return self.changeset.remove_change(change)

    def discard_all(self) -> None:
        """Drop every pending change but keep the input text."""
        if not self.changeset.is_empty:
            self.changeset.clear()

    def clear_input(self) -> None:
        self.discard_all()
        self.save_input("")
