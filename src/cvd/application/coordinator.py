"""Device selection coordinator.

Implements DeviceSelectorAPI by running the inventory queries and the
selector in order:

1. Availability check (no query is issued if the tool is missing)
2. Total device query
3. Selection, with the in-use query deferred to the selector
"""

from __future__ import annotations

from typing import Optional

import structlog
from opentelemetry import trace

from cvd.domain.entities.selection import SelectionRequest, SelectionResult
from cvd.domain.services.device_inventory import DeviceInventory
from cvd.domain.services.selector import select_devices
from cvd.domain.value_objects.device_identifiers import DeviceSet
from cvd.infrastructure.tracing import trace_span

logger = structlog.get_logger(__name__)


class DeviceSelectionCoordinator:
    """Select devices from a live inventory."""

    def __init__(
        self,
        inventory: DeviceInventory,
        tracer: Optional[trace.Tracer] = None,
    ) -> None:
        """Initialize the coordinator.

        Args:
            inventory: Source of total and in-use device sets.
            tracer: Tracer for spans, the global one by default.
        """
        self._inventory = inventory
        self._tracer = tracer

    def select(self, request: SelectionRequest) -> SelectionResult:
        """Select devices for a request.

        Raises:
            ToolNotFoundError: If the query tool is not on the search path.
            QueryExecutionError: If a query fails to run.
            QueryOutputDecodeError: If query output is not valid text.
            NoDevicesAvailableError: If nothing is eligible.
            InsufficientDevicesError: If the count exceeds the eligible devices.
        """
        attributes = {
            "cvd.empty_only": request.empty_only,
            "cvd.count": -1 if request.count is None else request.count,
        }
        with trace_span("cvd.select", attributes, tracer=self._tracer) as span:
            with trace_span("cvd.availability_check", tracer=self._tracer):
                self._inventory.ensure_available()

            total = self._query_total()
            result = select_devices(total, request, self._query_used)

            span.set_attribute("cvd.selected", len(result))
            logger.info(
                "devices_selected",
                total=len(total),
                selected=len(result),
                empty_only=request.empty_only,
                count=request.count,
            )
            return result

    def _query_total(self) -> DeviceSet:
        with trace_span("cvd.query_total_devices", tracer=self._tracer) as span:
            devices = self._inventory.query_total_devices()
            span.set_attribute("cvd.devices", len(devices))
            return devices

    def _query_used(self) -> DeviceSet:
        with trace_span("cvd.query_used_devices", tracer=self._tracer) as span:
            devices = self._inventory.query_used_devices()
            span.set_attribute("cvd.devices", len(devices))
            return devices
