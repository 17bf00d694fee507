"""Pytest configuration and shared fixtures for cvd tests."""

from __future__ import annotations

from typing import Generator

import pytest

from cvd.adapters.outbound.memory_query import InMemoryDeviceQuery
from cvd.domain.services.device_inventory import DeviceInventory
from cvd.infrastructure.config import Config, InventoryConfig, get_config
from cvd.infrastructure.container import Container

GPU_A = "GPU-1a2b3c4d-0000-0000-0000-000000000000"
GPU_B = "GPU-5e6f7a8b-0000-0000-0000-000000000001"
GPU_C = "GPU-9c0d1e2f-0000-0000-0000-000000000002"


@pytest.fixture(autouse=True)
def reset_container() -> Generator[None, None, None]:
    """Reset the DI container and cached config around each test."""
    Container.reset()
    get_config.cache_clear()
    yield
    Container.reset()
    get_config.cache_clear()


@pytest.fixture
def test_config() -> Config:
    """Provide a dev-mode configuration with three simulated GPUs."""
    return Config(
        inventory=InventoryConfig(
            dev_mode=True,
            simulated_devices=[GPU_C, GPU_A, GPU_B],
            simulated_busy_devices=[GPU_A, GPU_A],
        ),
    )


@pytest.fixture
def fake_query() -> InMemoryDeviceQuery:
    """Provide a fake query tool with three GPUs, one of them busy twice."""
    return InMemoryDeviceQuery(devices=[GPU_B, GPU_A, GPU_C], busy=[GPU_A, GPU_A])


@pytest.fixture
def inventory(fake_query: InMemoryDeviceQuery) -> DeviceInventory:
    """Provide an inventory backed by the fake query tool."""
    return DeviceInventory(fake_query)


# Pytest markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
