# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Command line entry point: authenticate and send log records.

Usage:
    evallog --level warn --package api --message "Slow response"
    evallog --examples [--verbose]

Credentials and the base URL are read from ``EVALLOG_*`` environment
variables (see ``evallog.settings``).

Exit codes:
    0  Every record was delivered
    1  Authentication or delivery failed
    2  Usage or configuration error
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from evallog.clients import EvaluationServiceClient
from evallog.demo import LoggingDemo
from evallog.enums import EnumLogLevel, EnumLogPackage
from evallog.errors import ConfigurationError
from evallog.settings import EvaluationServiceSettings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="evallog",
        description="Send structured log records to the evaluation service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "--message",
        help="Message text of a single log record",
    )
    mode.add_argument(
        "--examples",
        action="store_true",
        default=False,
        help="Send the five canned example records",
    )
    parser.add_argument(
        "--level",
        type=str.lower,
        choices=[m.value for m in EnumLogLevel],
        default=EnumLogLevel.INFO.value,
        help="Severity level (default: info)",
    )
    parser.add_argument(
        "--package",
        type=str.lower,
        choices=[m.value for m in EnumLogPackage],
        default=EnumLogPackage.UTILS.value,
        help="Package tag (default: utils)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


async def run(
    args: argparse.Namespace,
    settings: EvaluationServiceSettings,
    client: EvaluationServiceClient | None = None,
) -> int:
    """Authenticate, send the requested records and report outcomes."""
    credentials = settings.to_credentials()
    client = client or EvaluationServiceClient(settings.to_client_config())

    async with client:
        demo = LoggingDemo(client)
        notice = await demo.authenticate(credentials)
        print(f"{notice.title}: {notice.description}")
        if notice.is_error:
            return EXIT_FAILURE

        if args.examples:
            notices = await demo.send_examples()
        else:
            notices = [await demo.send_log(args.level, args.package, args.message)]

    for entry in reversed(list(demo.history)):
        print(
            f"[{entry.status}] {entry.level.value.upper():<5} "
            f"{entry.package.value:<10} {entry.entry_id}  {entry.message}"
        )
    return EXIT_FAILURE if any(n.is_error for n in notices) else EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Returns:
        0 on success, 1 on failure, 2 on usage or configuration error.
    """
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = EvaluationServiceSettings()
        return asyncio.run(run(args, settings))
    except (ConfigurationError, ValidationError) as exc:
        print(f"[evallog] configuration error: {exc}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
