# autopatch/commit/core.py
import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from ..models.blocks import FileChange
from ..workspace import Workspace

log = logging.getLogger(__name__)


@dataclass
class CommitSummary:
    """Outcome of a commit operation."""

    success: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    dry_run: bool = False
    # Map relative path -> error string (when failed)
    errors: Dict[str, str] = field(default_factory=dict)
    # Changes actually written, in order
    applied: List[FileChange] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def commit_changes(
    workspace: Workspace,
    changes: Iterable[FileChange],
    *,
    mode: str = "best_effort",
    atomic: bool = False,
    dry_run: bool = False,
) -> CommitSummary:
    """
    Write a batch of whole-file changes below the workspace root.

    Args:
        workspace: Target root plus its protected paths.
        changes: FileChange instances in the order they should be written.
        mode: "best_effort" (default) writes what it can and accumulates failures;
              "fail_fast" stops at the first containment or write error and leaves
              the remaining changes unwritten.
        atomic: Stage each file in a same-directory tempfile, then os.replace().
        dry_run: Validate containment and directory writability only.

    Returns:
        CommitSummary listing written and failed paths.
    """
    if mode not in {"best_effort", "fail_fast"}:
        raise ValueError("mode must be one of {'best_effort','fail_fast'}")

    summary = CommitSummary(dry_run=dry_run)
    for ch in changes:
        try:
            if dry_run:
                dest = workspace.resolve(ch.path)
                dirpath = os.path.dirname(dest)
                if os.path.exists(dirpath) and not os.access(dirpath, os.W_OK):
                    raise PermissionError(f"No write permission for directory '{dirpath}'")
                verb = "modify" if os.path.exists(dest) else "create"
                summary.success.append(f"DRY RUN: Would {verb} file {ch.path} ({len(ch.content)} chars)")
                continue

            workspace.write(ch.path, ch.content, atomic=atomic)
            summary.success.append(ch.path)
            summary.applied.append(ch)
            log.debug("Wrote %s", ch.path)
        except Exception as e:
            summary.failed.append(ch.path)
            summary.errors[ch.path] = str(e)
            log.warning("Failed to apply change to %s: %s", ch.path, e)
            if mode == "fail_fast":
                return summary
    return summary


def apply_single_change(workspace: Workspace, change: FileChange, *, atomic: bool = False) -> str:
    """Write one change; returns the absolute path written. Errors propagate."""
    return workspace.write(change.path, change.content, atomic=atomic)
