"""Ports - interfaces between the domain and the outside world."""

from cvd.ports.inbound import DeviceSelectorAPI
from cvd.ports.outbound import DeviceQueryPort

__all__ = [
    "DeviceSelectorAPI",
    "DeviceQueryPort",
]
