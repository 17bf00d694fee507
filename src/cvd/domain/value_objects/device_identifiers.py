"""Device-related type-safe identifiers.

Identifiers are opaque strings (GPU UUIDs as reported by nvidia-smi). They are
only compared for set membership and lexicographic order.
"""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Iterable, NewType

# GPU unique identifier (e.g. "GPU-8c1f0d4e-...")
DeviceId = NewType("DeviceId", str)

# Unordered, duplicate-free snapshot of devices from one query
DeviceSet = FrozenSet[DeviceId]


class QueryMode(Enum):
    """Which listing the query tool should produce."""
    ALL_DEVICES = "all_devices"       # one line per installed device
    COMPUTE_APPS = "compute_apps"     # one line per active compute workload


def create_device_set(identifiers: Iterable[str]) -> DeviceSet:
    """Create a device set from raw identifier strings."""
    return frozenset(DeviceId(identifier) for identifier in identifiers)
