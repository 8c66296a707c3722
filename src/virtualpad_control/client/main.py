"""
Command-line entry point for the VirtualPad control client.

This module is responsible for:
- Parsing command-line arguments.
- Loading the configuration (YAML) and setting up logging.
- Wiring the CommandInvoker into a PadController.
- Running exactly one pad control operation and printing its result as JSON.
"""

import argparse
import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional

from virtualpad_control.client.config_loader import DEFAULT_CONFIG_PATH, load_config
from virtualpad_control.client.invoker import CommandInvoker
from virtualpad_control.client.models import OperationResult
from virtualpad_control.client.pads import PadController

def setup_logging(level: str = "INFO"):
    """
    Configures the global logging settings for the entire application.
    Logs go to stderr so stdout only carries the JSON result.
    """
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s [%(levelname)-8s] %(name)s.%(funcName)s: %(message)s',
        stream=sys.stderr,
        force=True,
    )

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="virtualpad-control",
        description="Manage the VirtualPad server through its admin tool.",
    )
    parser.add_argument("--config", default=str(DEFAULT_CONFIG_PATH), help="path to config.yaml")
    parser.add_argument("--log-level", default=None, help="overrides log_level from the config")

    groups = parser.add_subparsers(dest="group", required=True)

    server = groups.add_parser("server", help="server lifecycle")
    server.add_argument("action", choices=["start", "stop", "check"])

    pad = groups.add_parser("pad", help="pad slots")
    pad_actions = pad.add_subparsers(dest="action", required=True)
    pad_actions.add_parser("status", help="show pads and passwords")
    clear = pad_actions.add_parser("clear", help="clear one pad (0-7) or all")
    clear.add_argument("pad")
    reset = pad_actions.add_parser("reset-passwords", help="rotate pad passwords")
    reset.add_argument("pads", nargs="*", help="pad indices, or 'all'")
    return parser

async def execute(controller: PadController, args: argparse.Namespace) -> OperationResult:
    """Dispatches the parsed arguments to the matching PadController operation."""
    if args.group == "server":
        operations = {
            "start": controller.start_server,
            "stop": controller.stop_server,
            "check": controller.check_server,
        }
        return await operations[args.action]()

    if args.action == "status":
        return await controller.status()
    if args.action == "clear":
        return await controller.clear_pad(args.pad)

    pads: Any = args.pads
    if pads == ["all"]:
        pads = "all"
    return await controller.reset_passwords(pads)

async def main_application_runner(argv: Optional[List[str]] = None) -> OperationResult:
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level or "INFO")
    config: Dict[str, Any] = load_config(args.config)
    if not args.log_level and config.get("log_level"):
        setup_logging(config["log_level"])

    invoker = CommandInvoker(config=config)
    controller = PadController(invoker=invoker)

    result = await execute(controller, args)
    if not result.ok:
        logger.warning(f"Operation finished with code {result.code}: {result.to_json()}")
    print(result.to_json())
    return result

def exit_status(code: int) -> int:
    """
    Maps an operation code to a process exit status. A command killed by
    signal N reports -N, which the shell convention spells 128 + N.
    """
    return 128 - code if code < 0 else code

def run(argv: Optional[List[str]] = None) -> int:
    """Console script entry point. The exit status is derived from the operation's code."""
    try:
        result = asyncio.run(main_application_runner(argv))
    except KeyboardInterrupt:
        return 130
    return exit_status(result.code)


if __name__ == "__main__":
    sys.exit(run())
