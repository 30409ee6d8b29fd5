from .core import CommitSummary, apply_single_change, commit_changes

__all__ = ["commit_changes", "apply_single_change", "CommitSummary"]
