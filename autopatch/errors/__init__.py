from .commit import CommitError
from .extract import ExtractError
from .path import PathViolation

__all__ = ["ExtractError", "CommitError", "PathViolation"]
