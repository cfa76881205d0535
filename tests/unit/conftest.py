"""Unit test configuration - isolate tests from local .env files"""

import pytest


@pytest.fixture(autouse=True)
def clean_search_env(monkeypatch, tmp_path):
    """
    Remove search-related env vars and run in an empty directory.

    Env files are looked up in the working directory, so a .env in the
    checkout must not leak into tests. Tests that need a value set it
    explicitly with monkeypatch.setenv or write an env file to tmp_path.
    """
    for name in ("MEMORY_SEARCH_POOL_SIZE", "MEMORY_SEARCH_DEFAULT_LIMIT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
