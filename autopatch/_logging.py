"""
Lightweight, opt-in logging utilities for the library.

Usage in library code (see PatchSession):
    from autopatch._logging import resolve_logger

    class PatchSession:
        def __init__(self, root, settings=None, *, changeset=None, workspace=None,
                     clipboard=None, state=None, logger=None, log=False):
            self.log = resolve_logger(logger=logger, enabled=log, name=__name__)

        def preview(self, text, *, strict=False):
            self.log.info("No valid file changes found in input.")  # no-op unless opted in

Design goals:
- No stdout/stderr prints in library code.
- Zero-noise by default; consumers opt in by passing a logger or enabled flag.
- Safe to import without configuring global logging.
"""
from __future__ import annotations

import logging


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.INFO,
) -> logging.Logger | NoopLogger:
    """
    Return a usable logger according to opt-in policy.

    - If `logger` is provided, use it.
    - Else if `enabled` is True, create/get a named logger.
    - Else return a NoopLogger that ignores calls.
    """
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or "autopatch")
        lg.setLevel(level)
        # Bubble to the root so pytest's caplog (or the host app) sees records.
        lg.propagate = True
        return lg
    return NoopLogger()
