"""Dependency injection container for cvd."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

import structlog
from opentelemetry import trace

from cvd.adapters.outbound.memory_query import InMemoryDeviceQuery
from cvd.adapters.outbound.nvidia_smi import NvidiaSmiQuery
from cvd.application.coordinator import DeviceSelectionCoordinator
from cvd.domain.services.device_inventory import DeviceInventory
from cvd.infrastructure.config import Config, get_config
from cvd.infrastructure.logging import setup_logging
from cvd.infrastructure.tracing import setup_tracing
from cvd.ports.inbound import DeviceSelectorAPI
from cvd.ports.outbound import DeviceQueryPort


def build_query_port(config: Config) -> DeviceQueryPort:
    """Pick the query adapter for the configured mode."""
    if config.inventory.dev_mode:
        return InMemoryDeviceQuery(
            devices=config.inventory.simulated_devices,
            busy=config.inventory.simulated_busy_devices,
            tool_name=config.query_tool.executable,
        )
    return NvidiaSmiQuery(config.query_tool)


@dataclass
class Container:
    """Dependency injection container for cvd components."""

    config: Config
    logger: structlog.stdlib.BoundLogger
    tracer: trace.Tracer
    selector: DeviceSelectorAPI

    _instance: ClassVar[Optional[Container]] = None

    @classmethod
    def create(cls, config: Optional[Config] = None) -> Container:
        """Create and initialize the container with all dependencies."""
        if cls._instance is not None:
            return cls._instance

        config = config or get_config()
        logger = setup_logging(config.observability)
        tracer = setup_tracing(config.observability)

        inventory = DeviceInventory(
            build_query_port(config),
            encoding=config.query_tool.encoding,
        )

        cls._instance = cls(
            config=config,
            logger=logger,
            tracer=tracer,
            selector=DeviceSelectionCoordinator(inventory, tracer=tracer),
        )

        logger.debug(
            "cvd_container_initialized",
            tool=config.query_tool.executable,
            dev_mode=config.inventory.dev_mode,
        )

        return cls._instance

    @classmethod
    def get(cls) -> Container:
        """Get the singleton container instance."""
        if cls._instance is None:
            return cls.create()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the container (useful for testing)."""
        cls._instance = None
