"""Device selection.

Selection is a pure transformation of two device sets and a request:

1. Eligible set: all devices, or all minus in-use when empty-only is set
2. Deterministic order: ascending by identifier string
3. Bounded count: everything eligible, or exactly ``count`` devices

The in-use set is passed as a provider and only evaluated in empty-only
mode, since producing it spawns a process.
"""

from __future__ import annotations

import logging
from typing import Callable

from cvd.domain.entities.selection import SelectionRequest, SelectionResult
from cvd.domain.errors import InsufficientDevicesError, NoDevicesAvailableError
from cvd.domain.value_objects.device_identifiers import DeviceSet

logger = logging.getLogger(__name__)

UsedDevicesProvider = Callable[[], DeviceSet]


def eligible_devices(
    total: DeviceSet,
    used_provider: UsedDevicesProvider,
    empty_only: bool,
) -> DeviceSet:
    """Compute the devices a request may select from.

    Args:
        total: Every installed device.
        used_provider: Returns the in-use devices; called only if empty_only.
        empty_only: Exclude devices hosting compute workloads.

    Returns:
        ``total`` or ``total - used``.
    """
    if not empty_only:
        return total
    return total - used_provider()


def select_devices(
    total: DeviceSet,
    request: SelectionRequest,
    used_provider: UsedDevicesProvider,
) -> SelectionResult:
    """Select devices for a request.

    Args:
        total: Every installed device.
        request: Empty-only flag and optional count.
        used_provider: Returns the in-use devices; called only if empty_only.

    Returns:
        The ``count`` (or all) lexicographically smallest eligible devices.

    Raises:
        NoDevicesAvailableError: If nothing is eligible, whatever the count.
        InsufficientDevicesError: If count exceeds the eligible devices.
    """
    eligible = sorted(eligible_devices(total, used_provider, request.empty_only))
    available = len(eligible)

    if available == 0:
        raise NoDevicesAvailableError(empty_only=request.empty_only)

    target = available if request.count is None else request.count
    if target > available:
        raise InsufficientDevicesError(requested=target, available=available)

    logger.debug(f"Selecting {target} of {available} eligible devices")
    return SelectionResult(devices=tuple(eligible[:target]))
