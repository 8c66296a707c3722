"""
Admin Tool Command Invoker.

This module contains the `CommandInvoker` class, the only place where a
process is spawned. It is responsible for:
- Building a shell command line for the configured admin tool, escaping every word.
- Running that command without blocking the event loop.
- Capturing the exit code and both output streams, uninterpreted.
- Turning spawn errors and timeouts into TransportFailure values instead of exceptions.
"""
import asyncio
import logging
import os
import shlex
import signal
from typing import List, Optional

from virtualpad_control.client.models import CommandTimeout, InvocationOutcome, LaunchFailure, ProcessOutput

DEFAULT_ADMIN_TOOL = "virtualpad-admin"
DEFAULT_TIMEOUT = 10.0

logger = logging.getLogger(__name__)


class CommandInvoker:
    admin_tool: List[str]
    timeout: Optional[float]

    """
    Runs one admin tool command per call. Holds only configuration,
    so any number of calls may be in flight at the same time.
    """
    def __init__(self, config: Optional[dict] = None):
        config = config or {}

        # `admin_tool` may carry leading words, e.g. "python3 /opt/virtualpad/admin.py"
        tool = config.get('admin_tool') or DEFAULT_ADMIN_TOOL
        self.admin_tool = shlex.split(tool) if isinstance(tool, str) else [str(word) for word in tool]

        # None (null in YAML) disables the timeout
        timeout = config.get('timeout', DEFAULT_TIMEOUT)
        self.timeout = float(timeout) if timeout is not None else None

    def command_line(self, *args) -> str:
        """Returns the escaped shell command line for the given subcommand words."""
        return shlex.join([*self.admin_tool, *(str(arg) for arg in args)])

    async def run(self, *args) -> InvocationOutcome:
        """
        Executes `<admin-tool> <args...>` and waits for it to exit.
        A non-zero exit code is a regular ProcessOutput, not an error.
        """
        command = self.command_line(*args)
        logger.debug(f"Running admin command: {command}")

        try:
            process = await asyncio.create_subprocess_shell(
                command,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                start_new_session=True,
            )
        except OSError as e:
            logger.warning(f"Failed to launch '{command}': {e}")
            return LaunchFailure(reason=str(e))

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Admin command '{command}' timed out after {self.timeout}s. Killing it.")
            await self._kill(process)
            return CommandTimeout()

        logger.debug(f"Admin command '{command}' exited with code {process.returncode}")
        return ProcessOutput(
            stdout=stdout.decode('utf-8', errors='replace'),
            stderr=stderr.decode('utf-8', errors='replace'),
            exit_code=process.returncode,
        )

    @staticmethod
    async def _kill(process: asyncio.subprocess.Process):
        """
        Kills a timed out command together with everything it started and reaps it.
        The shell runs in its own session, so its process group holds the admin
        tool and any children that keep the output pipes open.
        """
        try:
            if os.name == "nt":
                process.kill()
            else:
                os.killpg(process.pid, signal.SIGKILL)
        except ProcessLookupError:
            # Exited between the timeout and the kill
            pass
        await process.wait()
