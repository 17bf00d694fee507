"""Configuration for cvd."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class QueryToolConfig(BaseModel):
    """GPU query tool configuration."""

    executable: str = Field(default="nvidia-smi", description="Executable looked up on PATH")
    all_devices_args: list[str] = Field(
        default_factory=lambda: ["--query-gpu=uuid", "--format=csv,noheader"],
        description="Arguments listing every installed device",
    )
    compute_apps_args: list[str] = Field(
        default_factory=lambda: ["--query-compute-apps=gpu_uuid", "--format=csv,noheader"],
        description="Arguments listing the device of every compute workload",
    )
    timeout_seconds: float | None = Field(
        default=None, gt=0, description="Per-query timeout, unbounded when unset"
    )
    encoding: str = Field(default="utf-8", description="Encoding of the tool's stdout")


class InventoryConfig(BaseModel):
    """Device inventory configuration."""

    dev_mode: bool = Field(default=False, description="Use simulated devices instead of the tool")
    simulated_devices: list[str] = Field(
        default_factory=lambda: [
            "GPU-00000000-0000-0000-0000-000000000000",
            "GPU-00000000-0000-0000-0000-000000000001",
        ]
    )
    simulated_busy_devices: list[str] = Field(default_factory=list)


class OutputConfig(BaseModel):
    """Output configuration."""

    separator: str = Field(default=",", min_length=1)


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="console", description="Log format")
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(default="cvd", description="Service name for tracing")
    trace_console_export: bool = Field(default=False, description="Print spans to stderr")


class Config(BaseSettings):
    """Main configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CVD_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    query_tool: QueryToolConfig = Field(default_factory=QueryToolConfig)
    inventory: InventoryConfig = Field(default_factory=InventoryConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
