"""Outbound ports - interfaces for external dependencies.

The only external dependency of device selection is the GPU query tool.
Adapters implement this port with a real subprocess (nvidia-smi) or with
in-memory data for tests and development.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from cvd.domain.value_objects.device_identifiers import QueryMode


@runtime_checkable
class DeviceQueryPort(Protocol):
    """Protocol for the GPU query capability.

    Implementations only move bytes: they neither decode nor parse the
    output. That is the inventory's job.
    """

    @property
    @abstractmethod
    def tool_name(self) -> str:
        """Return the name of the query tool, used in diagnostics."""
        ...

    @abstractmethod
    def is_available(self) -> bool:
        """Check whether the tool can be located, without running it.

        Returns:
            True if an executable of the expected name is on the search path.
        """
        ...

    @abstractmethod
    def query(self, mode: QueryMode) -> bytes:
        """Run the tool in the given listing mode.

        Args:
            mode: Which listing to produce.

        Returns:
            Raw stdout bytes, one identifier per line, no header.

        Raises:
            QueryExecutionError: If the tool cannot be launched or fails.
        """
        ...


__all__ = [
    "DeviceQueryPort",
]
