# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Shared protocol definitions for evallog.

The client reports every success and failure to a diagnostic sink instead
of writing to the console directly. A ``logging.Logger`` satisfies the
protocol and is the default; tests inject a mock to assert on or suppress
the output.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolDiagnosticSink(Protocol):
    """Receiver of informational client diagnostics.

    Methods mirror ``logging.Logger`` so a logger can be passed as-is.
    Messages use ``%``-style placeholders with lazy arguments.
    """

    def info(self, msg: str, *args: object) -> None:
        """Record a successful operation."""
        ...

    def warning(self, msg: str, *args: object) -> None:
        """Record a recoverable condition."""
        ...

    def error(self, msg: str, *args: object) -> None:
        """Record a failed operation."""
        ...


__all__ = ["ProtocolDiagnosticSink"]
