from typing import Optional


class CommitError(RuntimeError):
    """Writing a single pending change failed."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
