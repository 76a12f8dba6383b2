"""Shared fixtures for ni_utils tests."""

import pytest

from ni_utils.config import TEMP_DIR_ENV


@pytest.fixture(autouse=True)
def staging_dir(tmp_path, monkeypatch):
    """Point the shared temp directory at a per-test location.

    Keeps tests out of the real <tmp>/antfu-ni and lets them assert that
    no temp files are left behind.
    """
    staging = tmp_path / "staging"
    monkeypatch.setenv(TEMP_DIR_ENV, str(staging))
    return staging


@pytest.fixture
def staged_files(staging_dir):
    """Factory returning the files currently in the staging directory."""
    def _list():
        if not staging_dir.exists():
            return []
        return sorted(staging_dir.iterdir())
    return _list
