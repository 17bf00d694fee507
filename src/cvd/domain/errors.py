"""Error taxonomy for device selection.

Every error is terminal for the invocation. Only the CLI adapter turns them
into an exit status.
"""

from __future__ import annotations


class CVDError(Exception):
    """Base class for all device selection failures."""


class ToolNotFoundError(CVDError):
    """The query tool is not on the search path."""

    def __init__(self, tool: str) -> None:
        super().__init__(f"command not found: {tool}")
        self.tool = tool


class QueryExecutionError(CVDError):
    """The query tool was found but could not run to completion."""

    def __init__(self, tool: str, reason: str) -> None:
        super().__init__(f"failed to execute {tool}: {reason}")
        self.tool = tool
        self.reason = reason


class QueryOutputDecodeError(CVDError):
    """The query tool produced output that is not valid text."""

    def __init__(self, tool: str, encoding: str) -> None:
        super().__init__(f"failed to decode output of {tool} as {encoding}")
        self.tool = tool
        self.encoding = encoding


class NoDevicesAvailableError(CVDError):
    """No device is eligible for selection."""

    def __init__(self, empty_only: bool = False) -> None:
        if empty_only:
            message = "no empty devices available"
        else:
            message = "no devices available"
        super().__init__(message)
        self.empty_only = empty_only


class InsufficientDevicesError(CVDError):
    """More devices were requested than are eligible."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            f"requested {requested} devices but only {available} available"
        )
        self.requested = requested
        self.available = available
