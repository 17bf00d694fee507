"""In-memory device query adapter.

A fake implementation of DeviceQueryPort that serves fixed device lists.
Used by the test suite and by dev mode on machines without GPUs. Every
query is recorded so callers can check which modes were requested.

Usage:
    query = InMemoryDeviceQuery(devices=["GPU-a", "GPU-b"], busy=["GPU-a"])
    query.query(QueryMode.COMPUTE_APPS)  # b"GPU-a\\n"
"""

from __future__ import annotations

from typing import Iterable, Optional

from cvd.domain.errors import QueryExecutionError
from cvd.domain.value_objects.device_identifiers import QueryMode


class InMemoryDeviceQuery:
    """In-memory implementation of DeviceQueryPort."""

    def __init__(
        self,
        devices: Iterable[str] = (),
        busy: Iterable[str] = (),
        available: bool = True,
        tool_name: str = "nvidia-smi",
        failing_mode: Optional[QueryMode] = None,
        raw_output: Optional[dict[QueryMode, bytes]] = None,
    ) -> None:
        """Initialize the fake.

        Args:
            devices: Installed device identifiers.
            busy: One entry per compute workload; repeats are allowed.
            available: What is_available() reports.
            tool_name: Name used in diagnostics.
            failing_mode: Mode whose query raises QueryExecutionError.
            raw_output: Bytes returned verbatim for a mode, bypassing the
                device lists.
        """
        self._devices = list(devices)
        self._busy = list(busy)
        self._available = available
        self._tool_name = tool_name
        self._failing_mode = failing_mode
        self._raw_output = dict(raw_output or {})
        self.calls: list[QueryMode] = []

    @property
    def tool_name(self) -> str:
        return self._tool_name

    def is_available(self) -> bool:
        return self._available

    def query(self, mode: QueryMode) -> bytes:
        self.calls.append(mode)
        if mode is self._failing_mode:
            raise QueryExecutionError(self._tool_name, "simulated failure")
        if mode in self._raw_output:
            return self._raw_output[mode]

        lines = self._devices if mode is QueryMode.ALL_DEVICES else self._busy
        return "".join(f"{line}\n" for line in lines).encode()
