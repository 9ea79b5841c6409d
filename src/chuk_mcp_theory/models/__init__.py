"""
Pydantic models for the theory server.

This module provides:
- InstrumentState: Key, transpose and voicing for a slot-based instrument
- InstrumentPreset: Named, YAML-backed instrument configuration
- PresetMetadata: Lightweight listing form of a preset
"""

from chuk_mcp_theory.models.instrument import InstrumentState
from chuk_mcp_theory.models.preset import InstrumentPreset, PresetMetadata

__all__ = [
    "InstrumentPreset",
    "InstrumentState",
    "PresetMetadata",
]
