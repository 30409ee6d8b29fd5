from .blocks import FileChange, ParsedBlock
from .marker import MarkerToken

__all__ = ["FileChange", "ParsedBlock", "MarkerToken"]
