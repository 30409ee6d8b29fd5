"""
Clipboard access for hosts that paste model output straight into a session.

Public API:
  - read_clipboard() -> str | None
"""
from __future__ import annotations

import logging
import os
import subprocess
from typing import List, Optional

__all__ = ["read_clipboard"]

log = logging.getLogger(__name__)

# Tried in order; the first command found on PATH wins.
_PASTE_COMMANDS: List[List[str]] = [
    ["pbpaste"],                                            # macOS
    ["powershell", "-NoProfile", "-Command", "Get-Clipboard"],  # Windows
    ["wl-paste", "--no-newline"],                           # Wayland
    ["xclip", "-selection", "clipboard", "-o"],             # X11
    ["xsel", "--clipboard", "--output"],
]


def read_clipboard() -> Optional[str]:
    """
    Read text from the system clipboard using best-effort, cross-platform fallbacks.
    Returns None when no clipboard tool is available or the read fails.
    """
    for cmd in _PASTE_COMMANDS:
        if not _which(cmd[0]):
            continue
        try:
            proc = subprocess.run(cmd, capture_output=True, check=False)
        except OSError as e:
            log.debug("Clipboard command %s failed: %s", cmd[0], e)
            continue
        if proc.returncode != 0:
            log.debug("Clipboard command %s exited with %s", cmd[0], proc.returncode)
            continue
        return proc.stdout.decode("utf-8", errors="replace")
    return None


def _which(cmd: str) -> bool:
    """Minimal shutil.which to avoid import overhead."""
    paths = os.environ.get("PATH", "").split(os.pathsep)
    exts = [""]
    if os.name == "nt":
        pathext = os.environ.get("PATHEXT", ".EXE;.BAT;.CMD").split(";")
        exts = [e.lower() for e in pathext if e]
    for folder in paths:
        full = os.path.join(folder, cmd)
        if os.path.isfile(full) and os.access(full, os.X_OK):
            return True
        # Windows: try with PATHEXT
        for e in exts:
            full_ext = full + e
            if os.path.isfile(full_ext) and os.access(full_ext, os.X_OK):
                return True
    return False
