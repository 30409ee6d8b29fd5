# autopatch/providers.py
from dataclasses import dataclass
from typing import List, Protocol

from .changeset import ChangeSet
from .errors.path import PathViolation
from .models.blocks import FileChange
from .workspace import Workspace

UNAVAILABLE_TEMPLATE = (
    '// Change for "{path}" is no longer available.\n'
    "// It may have been applied or discarded."
)


@dataclass
class ChangeItem:
    """One row of a pending-changes listing."""

    change: FileChange
    label: str
    status: str  # "new", "modified" or "invalid"
    tooltip: str = ""


class ChangeProvider(Protocol):
    def list_items(self) -> List[ChangeItem]: ...

    def provide_content(self, path: str) -> str: ...

    def stat(self, change: FileChange) -> ChangeItem: ...


class PendingChangesProvider:
    """Exposes a ChangeSet to a tree view and a diff viewer."""

    def __init__(self, changeset: ChangeSet, workspace: Workspace):
        self.changeset = changeset
        self.workspace = workspace

    def stat(self, change: FileChange) -> ChangeItem:
        try:
            self.workspace.resolve(change.path)
        except PathViolation as e:
            return ChangeItem(change, change.path, "invalid", str(e))
        if self.workspace.exists(change.path):
            return ChangeItem(change, change.path, "modified")
        return ChangeItem(change, change.path, "new", "File does not exist and will be created.")

    def list_items(self) -> List[ChangeItem]:
        return [self.stat(c) for c in self.changeset.get_changes()]

    def provide_content(self, path: str) -> str:
        change = self.changeset.find_change(path)
        if change is not None:
            return change.content
        return UNAVAILABLE_TEMPLATE.format(path=path)
