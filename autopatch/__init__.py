from .changeset import ChangeSet
from .commit import CommitSummary, apply_single_change, commit_changes
from .core import prepare_changes
from .errors import CommitError, ExtractError, PathViolation
from .extract import extract_file_changes, parse_blocks
from .models import FileChange, ParsedBlock
from .preview import from_virtual_document_uri, render_diff, to_virtual_document_uri
from .providers import ChangeItem, ChangeProvider, PendingChangesProvider
from .reconcile import reconcile, reconcile_async
from .session import PatchSession, PreviewReport
from .settings import PatchSettings, resolve_eol
from .system import read_clipboard
from .utils.paths import resolve_within_root, sanitize_file_path
from .utils.text import normalize_content
from .workspace import Workspace

__all__ = [
    "parse_blocks",
    "extract_file_changes",
    "prepare_changes",
    "sanitize_file_path",
    "resolve_within_root",
    "normalize_content",
    "reconcile",
    "reconcile_async",
    "ChangeSet",
    "FileChange",
    "ParsedBlock",
    "Workspace",
    "commit_changes",
    "apply_single_change",
    "CommitSummary",
    "PatchSession",
    "PreviewReport",
    "PatchSettings",
    "resolve_eol",
    "ChangeItem",
    "ChangeProvider",
    "PendingChangesProvider",
    "to_virtual_document_uri",
    "from_virtual_document_uri",
    "render_diff",
    "read_clipboard",
    "ExtractError",
    "CommitError",
    "PathViolation",
]
