"""
Response Decoder.

Classifies the outcome of one admin tool invocation into an OperationResult.
Everything here is pure: malformed input degrades to an ErrorEnvelope, it
never raises.
"""
import json
import logging
from typing import Any

from virtualpad_control.client.models import (
    ErrorEnvelope,
    InvocationOutcome,
    OperationResult,
    TransportFailure,
)

logger = logging.getLogger(__name__)


def parse_json(value: str) -> Any:
    """
    Parses a JSON document. On failure returns an ErrorEnvelope whose
    dump is the original, unparsed text.
    """
    try:
        return json.loads(value)
    except (TypeError, ValueError):
        logger.debug(f"Admin tool output is not JSON: {value!r}")
        return ErrorEnvelope(hint="unknown", dump=value)


def decode_response(outcome: InvocationOutcome, parse: bool = True, success: Any = None) -> OperationResult:
    """
    Turns an invocation outcome into an OperationResult.

    - A TransportFailure becomes code 1 with the failure reason as dump.
    - A non-zero exit code is kept as the code, with stderr as dump.
    - A zero exit code yields the JSON parsed from stdout, or an envelope
      dumping the raw stdout when it does not parse. With `parse=False`
      stdout is ignored and `success` is returned as details instead.
    """
    if isinstance(outcome, TransportFailure):
        return OperationResult(code=1, details=ErrorEnvelope(hint="unknown", dump=outcome.reason))

    code = outcome.exit_code or 0
    if code:
        return OperationResult(code=code, details=ErrorEnvelope(hint="unknown", dump=outcome.stderr))

    if not parse:
        return OperationResult(code=0, details=success)
    return OperationResult(code=0, details=parse_json(outcome.stdout))
