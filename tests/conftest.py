import sys

import pytest
from loguru import logger

INPUT_VARS = (
    "INPUT_CLAUDE_ACCESS_TOKEN",
    "INPUT_CLAUDE_REFRESH_TOKEN",
    "INPUT_CLAUDE_EXPIRES_AT",
    "INPUT_TOKEN_URL",
    "INPUT_TIMEOUT",
    "INPUT_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_inputs(monkeypatch):
    for name in INPUT_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("GITHUB_OUTPUT", raising=False)


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)
