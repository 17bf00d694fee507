"""Domain services for device selection.

- DeviceInventory: total and in-use device sets from the query tool
- select_devices: eligible set, ordering and bounded count
"""

from cvd.domain.services.device_inventory import DeviceInventory, parse_device_ids
from cvd.domain.services.selector import (
    UsedDevicesProvider,
    eligible_devices,
    select_devices,
)

__all__ = [
    "DeviceInventory",
    "parse_device_ids",
    "UsedDevicesProvider",
    "eligible_devices",
    "select_devices",
]
