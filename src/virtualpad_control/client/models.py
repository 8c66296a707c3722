"""
Data Models for Admin Tool Invocations and Operation Results.

Defines the shapes that flow between the Command Invoker, the Response
Decoder and the Pad Control API, so every layer agrees on what an
invocation produced and what a caller receives.
"""
from dataclasses import dataclass, field, asdict
import json
from typing import Any, Dict, Optional, Union

PAD_COUNT = 8
ALL_PADS = "all"

# Accepted textual forms of a pad index, mapped to their canonical int.
_PAD_STRINGS = {str(index): index for index in range(PAD_COUNT)}


def parse_pad_index(value: Any) -> Optional[int]:
    """
    Returns the canonical int for a pad index given as 0..7 or "0".."7",
    or None when the value does not denote a pad slot.
    """
    # bool is an int subclass, but True is not pad 1.
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if 0 <= value < PAD_COUNT else None
    if isinstance(value, str):
        return _PAD_STRINGS.get(value)
    return None


# --- Invocation outcomes (what the invoker hands to the decoder) ---

@dataclass(frozen=True)
class ProcessOutput:
    """The admin tool ran to completion; its exit code is not interpreted."""
    stdout: str
    stderr: str
    exit_code: Optional[int] = 0


@dataclass(frozen=True)
class TransportFailure:
    """The admin tool could not deliver an exit status at all."""
    reason: str


@dataclass(frozen=True)
class LaunchFailure(TransportFailure):
    """The process could not be spawned (binary missing, permissions, ...)."""


@dataclass(frozen=True)
class CommandTimeout(TransportFailure):
    """The process exceeded the configured timeout and was killed."""
    reason: str = "timeout"


InvocationOutcome = Union[ProcessOutput, TransportFailure]


# --- Envelopes (what a caller finds in `details` when something went wrong) ---

@dataclass(frozen=True, kw_only=True)
class Envelope:
    """Base class for the locally built error envelopes."""
    status: str = "error"
    hint: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        """Converts the envelope to a JSON string."""
        return json.dumps(self.to_dict(), default=str)


@dataclass(frozen=True, kw_only=True)
class ErrorEnvelope(Envelope):
    """The admin tool failed or its output could not be decoded."""
    hint: str = "unknown"
    dump: str = ""


@dataclass(frozen=True, kw_only=True)
class InvalidPadEnvelope(Envelope):
    """A pad argument was rejected before anything was run."""
    hint: str = "pad:invalid-index"
    index: Any = None


# --- The result every Pad Control API operation returns ---

@dataclass(frozen=True)
class OperationResult:
    """
    Uniform `{code, details}` result of a pad control operation.

    `details` is either the payload decoded from the admin tool, an
    Envelope, or None for the reset-passwords no-op. A None `details`
    is left out of `to_dict()` entirely.
    """
    code: int = 0
    details: Any = field(default=None)

    @property
    def ok(self) -> bool:
        return self.code == 0 and not isinstance(self.details, Envelope)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"code": self.code}
        if self.details is not None:
            if isinstance(self.details, Envelope):
                result["details"] = self.details.to_dict()
            else:
                result["details"] = self.details
        return result

    def to_json(self) -> str:
        """Converts the result to a JSON string."""
        return json.dumps(self.to_dict(), default=str)
