from dataclasses import dataclass


@dataclass
class MarkerToken:
    """A FILE_START / FILE_END comment found anywhere in the text."""
    kind: str    # 'start' or 'end'
    path: str    # payload between the colon and '-->', whitespace-trimmed
    start: int   # absolute index of '<!--'
    end: int     # absolute index AFTER '-->'
