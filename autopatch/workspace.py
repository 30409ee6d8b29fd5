# autopatch/workspace.py
import contextlib
import os
import tempfile
from typing import Iterable, Optional

from .utils.ignore import DEFAULT_PROTECTED, get_protected_spec
from .utils.paths import resolve_within_root


class Workspace:
    """
    Read/write access to files below a single root directory.

    `read` is the content lookup used for reconciliation and previews; `write`
    is the only place files are created or overwritten, and always passes
    through the root containment check first.
    """

    def __init__(self, root: str, protected: Iterable[str] = DEFAULT_PROTECTED):
        self.root = os.path.realpath(root)
        self.protected = get_protected_spec(protected)

    def resolve(self, path: str) -> str:
        """Absolute target for `path`; raises PathViolation if it escapes the root."""
        return resolve_within_root(self.root, path, self.protected)

    def _lexical(self, path: str) -> str:
        return os.path.join(self.root, *path.split("/"))

    def exists(self, path: str) -> bool:
        return os.path.isfile(self._lexical(path))

    def read(self, path: str) -> Optional[str]:
        """
        Current text of `path`, or None when there is no such file.
        Other read errors, PathViolation included, propagate to the caller.
        """
        target = self.resolve(path)
        if not os.path.isfile(target):
            return None
        # newline="" keeps CRLF files byte-faithful.
        with open(target, "r", encoding="utf-8", newline="") as f:
            return f.read()

    def write(self, path: str, content: str, *, atomic: bool = False) -> str:
        """
        Create parent directories and write `content` as UTF-8, overwriting.
        With atomic=True the text is staged in a sibling temp file and promoted
        with os.replace(). Returns the absolute path written.
        """
        dest = self.resolve(path)
        dirpath = os.path.dirname(dest)
        os.makedirs(dirpath, exist_ok=True)

        if not atomic:
            with open(dest, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            return dest

        fd, tmp = tempfile.mkstemp(prefix=".autopatch-", suffix=".tmp", dir=dirpath)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            os.replace(tmp, dest)
        except Exception:
            with contextlib.suppress(OSError):
                os.remove(tmp)
            raise
        return dest
