"""
Pad Control API.

This module contains the `PadController` class, the public face of the
package. Each operation validates its own arguments, runs one admin tool
command through the CommandInvoker and hands the outcome to the decoder.
Operations always return an OperationResult and never raise, so the caller
decides whether to retry, surface or ignore a failure.

Business-level codes inside decoded payloads (e.g. "server:already-running")
are passed through untouched.
"""
import logging
from collections.abc import Iterable
from typing import Any, List, Optional

from virtualpad_control.client.decoder import decode_response
from virtualpad_control.client.invoker import CommandInvoker
from virtualpad_control.client.models import (
    ALL_PADS,
    PAD_COUNT,
    InvalidPadEnvelope,
    OperationResult,
    parse_pad_index,
)

logger = logging.getLogger(__name__)

# The admin tool prints nothing structured on clear-all.
CLEAR_ALL_SUCCESS = {"type": "response", "status": "pad:ok"}


def normalize_pad_selector(pads: Any) -> List[int]:
    """
    Expands a pad selector into an ordered list of unique canonical indices.

    Accepts "all", a single pad index or an iterable of pad indices.
    Invalid entries are dropped silently; falsy selectors yield [].
    """
    if not pads:
        return []
    if pads == ALL_PADS:
        return list(range(PAD_COUNT))

    single = parse_pad_index(pads)
    if single is not None:
        return [single]
    if isinstance(pads, str) or not isinstance(pads, Iterable):
        return []

    indices: List[int] = []
    for pad in pads:
        index = parse_pad_index(pad)
        if index is not None and index not in indices:
            indices.append(index)
    return indices


class PadController:
    invoker: CommandInvoker

    """
    Control-plane client for the virtual gamepad server.
    """
    def __init__(self, invoker: CommandInvoker):
        self.invoker = invoker

    @classmethod
    def from_config(cls, config: Optional[dict] = None) -> "PadController":
        return cls(invoker=CommandInvoker(config=config))

    async def _run(self, *args, **decode_options) -> OperationResult:
        outcome = await self.invoker.run(*args)
        result = decode_response(outcome, **decode_options)
        logger.debug(f"{' '.join(str(arg) for arg in args)} -> {result}")
        return result

    async def start_server(self) -> OperationResult:
        """
        Starts the VirtualPad server. Possible successful details:
        - {"type": "response", "code": "server:ok", "status": [["empty", ""], ...]}
        - {"type": "response", "code": "server:already-running"}
        """
        return await self._run("server", "start")

    async def stop_server(self) -> OperationResult:
        """
        Stops the VirtualPad server. Possible successful details:
        - {"type": "response", "code": "server:ok"}
        - {"type": "response", "code": "server:not-running"}
        """
        return await self._run("server", "stop")

    async def check_server(self) -> OperationResult:
        """
        Checks whether the VirtualPad server runs. Successful details look like
        {"type": "response", "code": "server:is-running", "value": <bool>}.
        """
        return await self._run("server", "check")

    async def clear_pad(self, pad: Any) -> OperationResult:
        """
        Clears one pad (0 to 7, int or decimal string) or all of them ("all").

        Anything else is rejected with an InvalidPadEnvelope and code 1,
        without running the admin tool.
        """
        if pad == ALL_PADS:
            return await self._run("pad", "clear-all", parse=False, success=dict(CLEAR_ALL_SUCCESS))

        index = parse_pad_index(pad)
        if index is None:
            logger.warning(f"Refusing to clear invalid pad index: {pad!r}")
            return OperationResult(code=1, details=InvalidPadEnvelope(index=pad))
        return await self._run("pad", "clear", index)

    async def status(self) -> OperationResult:
        """
        Gets the status of all pads. Successful details look like:
        {"type": "response", "code": "pad:status", "value": {
            "pads": [["empty", ""], ...], "passwords": ["xyku", "xoap", ...]}}
        """
        return await self._run("pad", "status")

    async def reset_passwords(self, pads: Any = None) -> OperationResult:
        """
        Resets the passwords of the chosen pads: "all", one index or several.

        When nothing valid is selected no command runs and the result is a
        bare OperationResult(code=0) without details.
        """
        indices = normalize_pad_selector(pads)
        if not indices:
            logger.debug(f"No valid pads in {pads!r}; nothing to reset.")
            return OperationResult(code=0)
        return await self._run("pad", "reset-passwords", *indices)
