from .fences import outer_fence_body
from .main import extract_file_changes, parse_blocks
from .markers import pair_markers, tokenize_markers

__all__ = [
    "extract_file_changes",
    "parse_blocks",
    "outer_fence_body",
    "pair_markers",
    "tokenize_markers",
]
