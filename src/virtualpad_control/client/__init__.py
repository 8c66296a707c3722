"""
Client-side components for the VirtualPad admin tool.
This package turns pad control calls into admin tool invocations
and their output into uniform OperationResult values.
"""
from virtualpad_control.client.invoker import CommandInvoker
from virtualpad_control.client.models import (
    CommandTimeout,
    ErrorEnvelope,
    InvalidPadEnvelope,
    LaunchFailure,
    OperationResult,
    ProcessOutput,
)
from virtualpad_control.client.pads import PadController

__all__ = [
    "CommandInvoker",
    "CommandTimeout",
    "ErrorEnvelope",
    "InvalidPadEnvelope",
    "LaunchFailure",
    "OperationResult",
    "PadController",
    "ProcessOutput",
]
