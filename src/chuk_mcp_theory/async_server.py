#!/usr/bin/env python3
"""
Async Theory MCP Server using chuk-mcp-server

This server exposes the theory engine as MCP tools. A controller or UI
layer sends note names, modes and chord types and gets spelled notes
and chord labels back.

The server provides tools for:
- Scale spelling in the seven diatonic modes and chromatic
- Chord building with generic inversion
- Diatonic chords with Roman numerals and compact voicing
- Chord name detection from sounding notes
- Instrument presets and slot resolution
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_theory.presets import PresetLoader
from chuk_mcp_theory.tools import register_instrument_tools, register_theory_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-theory")

# Paths - project presets from CHUK_THEORY_PRESETS_DIR, else ./presets
PRESETS_DIR = Path(os.environ.get("CHUK_THEORY_PRESETS_DIR", Path.cwd() / "presets"))
PRESETS_LIBRARY_PATH = Path(__file__).parent / "presets" / "library"

preset_loader = PresetLoader(
    library_path=PRESETS_LIBRARY_PATH,
    project_path=PRESETS_DIR,
)

# Register all tools
theory_tools = register_theory_tools(mcp)
instrument_tools = register_instrument_tools(mcp, preset_loader)

# Export tool functions for direct access
theory_scale_notes = theory_tools["theory_scale_notes"]
theory_chord_notes = theory_tools["theory_chord_notes"]
theory_invert_chord = theory_tools["theory_invert_chord"]
theory_transpose = theory_tools["theory_transpose"]
theory_diatonic_chords = theory_tools["theory_diatonic_chords"]
theory_detect_chord = theory_tools["theory_detect_chord"]

instrument_list_presets = instrument_tools["instrument_list_presets"]
instrument_describe_preset = instrument_tools["instrument_describe_preset"]
instrument_play_slot = instrument_tools["instrument_play_slot"]

logger.info("CHUK Theory MCP Server initialized")
logger.info(f"  Preset library: {PRESETS_LIBRARY_PATH}")
logger.info(f"  Project presets: {PRESETS_DIR}")
