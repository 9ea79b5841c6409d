"""
CHUK Theory - a music theory engine with an MCP tool surface.

Spelled scales, chords with generic inversion, diatonic harmony with a
compact voicing policy, and chord detection from sounding notes.
"""

__version__ = "0.1.0"
