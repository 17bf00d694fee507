"""Selection request and result entities.

A request describes what the caller wants (all devices or only idle ones,
optionally capped to a count). A result is the ordered list of identifiers
handed to ``CUDA_VISIBLE_DEVICES``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from cvd.domain.value_objects.device_identifiers import DeviceId


@dataclass(frozen=True)
class SelectionRequest:
    """What to select.

    ``count=None`` and ``count=0`` are different requests: the former asks
    for every eligible device, the latter for none.
    """
    empty_only: bool = False        # Exclude devices running compute apps
    count: Optional[int] = None     # Exact number of devices wanted

    def __post_init__(self) -> None:
        if self.count is not None and self.count < 0:
            raise ValueError(f"count must be non-negative, got {self.count}")

    @property
    def has_count(self) -> bool:
        """Check if an explicit count was requested."""
        return self.count is not None


@dataclass(frozen=True)
class SelectionResult:
    """Selected devices, sorted ascending."""
    devices: tuple[DeviceId, ...] = ()

    def __len__(self) -> int:
        return len(self.devices)

    def __iter__(self) -> Iterator[DeviceId]:
        return iter(self.devices)

    @property
    def is_empty(self) -> bool:
        return not self.devices

    def to_visible_devices(self, separator: str = ",") -> str:
        """Render the result as a ``CUDA_VISIBLE_DEVICES`` value."""
        return separator.join(self.devices)
