"""Outbound adapters - implementations of outbound ports.

- NvidiaSmiQuery: runs nvidia-smi as a subprocess
- InMemoryDeviceQuery: fixed device lists for tests and dev mode
"""

from cvd.adapters.outbound.memory_query import InMemoryDeviceQuery
from cvd.adapters.outbound.nvidia_smi import NvidiaSmiQuery

__all__ = [
    "InMemoryDeviceQuery",
    "NvidiaSmiQuery",
]
