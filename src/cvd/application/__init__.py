"""Application layer for cvd.

Orchestrates domain services to provide device selection.
"""

from cvd.application.coordinator import DeviceSelectionCoordinator

__all__ = [
    "DeviceSelectionCoordinator",
]
