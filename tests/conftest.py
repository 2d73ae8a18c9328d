"""Pytest configuration and fixtures."""

from __future__ import annotations

import logging
import os

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Adjust logging for opt-in real/e2e tests.

    Botocore logs credential resolution at INFO level (e.g. "Found credentials
    in environment variables"), which creates noise for the common skip path.
    """

    if os.environ.get("LEV_RUN_REAL_TESTS") != "1":
        return

    for name in [
        "botocore.credentials",
        "botocore",
        "boto3",
    ]:
        logging.getLogger(name).setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def _isolate_lev_env(request, monkeypatch, tmp_path):
    """Keep LEV_* variables, .env and lev.yml of the developer out of unit tests."""
    if request.node.get_closest_marker("e2e"):
        return
    for key in list(os.environ):
        if key.startswith("LEV_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
