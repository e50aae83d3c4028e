"""Telemetry and observability helpers.

This package emits run events for deterministic auditing of cleaning runs.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
