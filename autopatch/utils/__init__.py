# autopatch/utils/__init__.py
from .ignore import get_protected_spec
from .paths import path_key, resolve_within_root, sanitize_file_path
from .text import apply_eol, apply_trailing_newline, normalize_content

__all__ = [
    "get_protected_spec",
    "path_key",
    "resolve_within_root",
    "sanitize_file_path",
    "apply_eol",
    "apply_trailing_newline",
    "normalize_content",
]
