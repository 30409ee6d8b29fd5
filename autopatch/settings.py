# autopatch/settings.py
import os
import sys
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .utils.ignore import DEFAULT_PROTECTED

APPLY_MODES = ("fail_fast", "best_effort")

_EOL_ALIASES = {
    "\n": "\n",
    "\r\n": "\r\n",
    "lf": "\n",
    "crlf": "\r\n",
}


def resolve_eol(preference: str = "auto") -> str:
    """Map an EOL preference ('auto', '\\n', '\\r\\n', 'lf', 'crlf') to a line ending."""
    if preference is None or preference == "auto":
        return os.linesep
    eol = _EOL_ALIASES.get(preference) or _EOL_ALIASES.get(preference.lower())
    if eol is None:
        raise ValueError(f"Unknown line ending preference: {preference!r}")
    return eol


def default_case_insensitive() -> bool:
    # Case-preserving but insensitive filesystems by default.
    return sys.platform in ("win32", "darwin")


def _env_flag(name: str) -> Optional[bool]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    return value.strip().lower() in ("1", "true", "yes")


@dataclass
class PatchSettings:
    """Host-supplied knobs for a patch session."""

    eol: str = "auto"
    case_insensitive: Optional[bool] = None
    protected: Tuple[str, ...] = field(default_factory=lambda: tuple(DEFAULT_PROTECTED))
    apply_mode: str = "fail_fast"
    atomic: bool = False

    def __post_init__(self):
        if self.apply_mode not in APPLY_MODES:
            raise ValueError("apply_mode must be one of {'fail_fast','best_effort'}")
        resolve_eol(self.eol)

    @property
    def line_ending(self) -> str:
        return resolve_eol(self.eol)

    @property
    def is_case_insensitive(self) -> bool:
        if self.case_insensitive is None:
            return default_case_insensitive()
        return self.case_insensitive

    @classmethod
    def from_env(cls) -> "PatchSettings":
        protected_env = os.getenv("AUTOPATCH_PROTECTED")
        protected = (
            tuple(p.strip() for p in protected_env.split(",") if p.strip())
            if protected_env is not None
            else tuple(DEFAULT_PROTECTED)
        )
        return cls(
            eol=os.getenv("AUTOPATCH_EOL", "auto"),
            case_insensitive=_env_flag("AUTOPATCH_CASE_INSENSITIVE"),
            protected=protected,
            apply_mode=os.getenv("AUTOPATCH_APPLY_MODE", "fail_fast").lower(),
            atomic=bool(_env_flag("AUTOPATCH_ATOMIC")),
        )
