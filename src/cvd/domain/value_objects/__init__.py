"""Value objects for the device selection domain.

Exports:
    - DeviceId: Type-safe device identifier
    - DeviceSet: Frozen set of device identifiers
    - QueryMode: Listing modes understood by the query tool
"""

from cvd.domain.value_objects.device_identifiers import (
    DeviceId,
    DeviceSet,
    QueryMode,
    create_device_set,
)

__all__ = [
    "DeviceId",
    "DeviceSet",
    "QueryMode",
    "create_device_set",
]
