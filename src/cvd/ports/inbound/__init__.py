"""Inbound port interfaces.

Inbound ports define what the system offers to external clients.
The CLI adapter drives these.
"""

from __future__ import annotations

from typing import Protocol

from cvd.domain.entities.selection import SelectionRequest, SelectionResult


class DeviceSelectorAPI(Protocol):
    """Main API offered by cvd."""

    def select(self, request: SelectionRequest) -> SelectionResult:
        """Select devices to expose to a downstream process.

        Args:
            request: Empty-only flag and optional count.

        Returns:
            Sorted identifiers.

        Raises:
            CVDError: Any failure in the error taxonomy.
        """
        ...


__all__ = [
    "DeviceSelectorAPI",
]
