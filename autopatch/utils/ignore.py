# autopatch/utils/ignore.py
from typing import Iterable, List

import pathspec

DEFAULT_PROTECTED: List[str] = [".git/"]


def get_protected_spec(patterns: Iterable[str] = DEFAULT_PROTECTED) -> pathspec.PathSpec:
    """
    Compile .gitignore-style patterns naming workspace paths that must never be
    written (for example '.git/'). Blank lines and '#' comments are ignored the
    way a .gitignore file treats them.
    """
    lines = [p.strip() for p in patterns if p and p.strip()]
    return pathspec.GitIgnoreSpec.from_lines(lines)
