"""Inbound adapters - drive the DeviceSelectorAPI port."""

from cvd.adapters.inbound.cli import build_parser, main

__all__ = [
    "build_parser",
    "main",
]
