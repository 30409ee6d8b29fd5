# conftest.py - pytest configuration
import pytest

from autopatch.settings import PatchSettings


@pytest.fixture
def lf_settings():
    """Deterministic settings regardless of the host platform."""
    return PatchSettings(eol="\n", case_insensitive=False)


@pytest.fixture
def read():
    def _read(path):
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    return _read
