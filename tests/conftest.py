"""
Pytest Configuration and Fixtures for the virtualpad_control project.

This module provides a mocked CommandInvoker for the Pad Control API tests
and a small stand-in for the `virtualpad-admin` tool, so the real
subprocess path can be exercised on any development machine.
"""

import logging
import shlex
import sys
import textwrap
from unittest.mock import AsyncMock

import pytest

from virtualpad_control.client.invoker import CommandInvoker
from virtualpad_control.client.models import ProcessOutput

# --- Fake admin tool for subprocess tests ---

# Echoes its argv back as JSON, unless the first word asks for a failure mode.
FAKE_ADMIN_TOOL = textwrap.dedent(
    """
    import json
    import sys
    import time

    args = sys.argv[1:]
    if args[:1] == ["fail"]:
        sys.stderr.write("boom")
        sys.exit(int(args[1]) if len(args) > 1 else 2)
    if args[:1] == ["garbage"]:
        print("not json")
        sys.exit(0)
    if args[:1] == ["sleep"]:
        time.sleep(float(args[1]))
    print(json.dumps({"type": "response", "argv": args}))
    """
)


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """
    Configures the Python logging framework globally for all tests.
    Because tests bypass main.py, this ensures our logs are formatted
    and visible during test runs.
    """
    formatter = logging.Formatter(fmt="%(levelname)-8s %(message)s - %(funcName)s:%(lineno)d ")
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(formatter)
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)


@pytest.fixture
def admin_tool(tmp_path) -> str:
    """Writes the fake admin tool and returns an `admin_tool` config value running it."""
    script = tmp_path / "virtualpad_admin.py"
    script.write_text(FAKE_ADMIN_TOOL)
    return shlex.join([sys.executable, str(script)])


@pytest.fixture
def mock_invoker(mocker):
    """
    Mocks the CommandInvoker so Pad Control API tests can assert exactly
    which admin commands were (or were not) run.
    """
    invoker = mocker.MagicMock(spec=CommandInvoker)
    invoker.run = AsyncMock(return_value=ProcessOutput(stdout='{"type": "response", "code": "server:ok"}', stderr="", exit_code=0))
    return invoker
