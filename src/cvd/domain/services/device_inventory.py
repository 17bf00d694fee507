"""Device inventory backed by a GPU query tool.

The inventory asks the query port for the installed devices and, on demand,
for the devices that currently host a compute workload. Both listings are
line-oriented text with one identifier per line and no header.
"""

from __future__ import annotations

import logging

from cvd.domain.errors import QueryOutputDecodeError, ToolNotFoundError
from cvd.domain.value_objects.device_identifiers import (
    DeviceSet,
    QueryMode,
    create_device_set,
)
from cvd.ports.outbound import DeviceQueryPort

logger = logging.getLogger(__name__)


def parse_device_ids(text: str) -> DeviceSet:
    """Parse query output into a device set.

    Each non-blank line is one identifier. Surrounding whitespace and
    carriage returns are stripped; repeated identifiers collapse.

    Args:
        text: Decoded stdout of the query tool.

    Returns:
        Set of device identifiers found in the output.
    """
    return create_device_set(
        line.strip() for line in text.splitlines() if line.strip()
    )


class DeviceInventory:
    """Snapshot source for total and in-use device sets."""

    def __init__(self, query: DeviceQueryPort, encoding: str = "utf-8") -> None:
        """Initialize the inventory.

        Args:
            query: Port used to run the query tool.
            encoding: Encoding of the tool's stdout.
        """
        self._query = query
        self._encoding = encoding

    @property
    def tool_name(self) -> str:
        return self._query.tool_name

    def is_available(self) -> bool:
        """Check whether the query tool is on the search path."""
        return self._query.is_available()

    def ensure_available(self) -> None:
        """Fail fast when the query tool is missing.

        Raises:
            ToolNotFoundError: If the tool is not on the search path.
        """
        if not self.is_available():
            raise ToolNotFoundError(self.tool_name)

    def query_total_devices(self) -> DeviceSet:
        """List every installed device.

        Raises:
            QueryExecutionError: If the tool fails to run.
            QueryOutputDecodeError: If the output is not valid text.
        """
        devices = self._run(QueryMode.ALL_DEVICES)
        logger.debug(f"Found {len(devices)} installed devices")
        return devices

    def query_used_devices(self) -> DeviceSet:
        """List devices hosting at least one compute workload.

        Raises:
            QueryExecutionError: If the tool fails to run.
            QueryOutputDecodeError: If the output is not valid text.
        """
        devices = self._run(QueryMode.COMPUTE_APPS)
        logger.debug(f"Found {len(devices)} devices with compute workloads")
        return devices

    def _run(self, mode: QueryMode) -> DeviceSet:
        raw = self._query.query(mode)
        try:
            text = raw.decode(self._encoding)
        except UnicodeDecodeError as e:
            raise QueryOutputDecodeError(self.tool_name, self._encoding) from e
        return parse_device_ids(text)
