"""
Preset library - saved instrument configurations.

Presets are YAML bundles of a starting key, transpose, voicing switch
and button-to-chord-type modifiers.
"""

from chuk_mcp_theory.presets.loader import PresetLoader

__all__ = ["PresetLoader"]
