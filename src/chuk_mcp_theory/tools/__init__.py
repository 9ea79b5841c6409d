"""
MCP tool implementations.

Tools are organized by domain:
- theory - Scales, chords, inversion, transposition, detection
- instrument - Presets and slot resolution
"""

from chuk_mcp_theory.tools.instrument import register_instrument_tools
from chuk_mcp_theory.tools.theory import register_theory_tools

__all__ = [
    "register_instrument_tools",
    "register_theory_tools",
]
