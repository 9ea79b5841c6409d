"""
Instrument tools - MCP tools for preset discovery and slot resolution.

A controller layer picks a preset, selects a slot (scale degree) and
optionally holds a modifier button; these tools return what to sound.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.constants import UNKNOWN_CHORD, ErrorMessages
from chuk_mcp_theory.core import detect_chord
from chuk_mcp_theory.presets import PresetLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_instrument_tools(
    mcp: ChukMCPServer,
    preset_loader: PresetLoader,
) -> dict[str, Any]:
    """
    Register instrument tools with the MCP server.

    Args:
        mcp: The MCP server instance
        preset_loader: The preset loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def instrument_list_presets() -> str:
        """
        List available instrument presets.

        Returns:
            JSON string with list of preset summaries

        Example:
            instrument_list_presets()
        """
        try:
            presets = preset_loader.list_presets()
            return json.dumps(
                {
                    "status": "success",
                    "presets": [
                        {
                            "name": p.name,
                            "description": p.description,
                            "root": p.root,
                            "mode": p.mode.value,
                        }
                        for p in presets
                    ],
                    "count": len(presets),
                }
            )
        except Exception as e:
            logger.exception("Failed to list presets")
            return json.dumps({"status": "error", "message": str(e)})

    tools["instrument_list_presets"] = instrument_list_presets

    @mcp.tool  # type: ignore[arg-type]
    async def instrument_describe_preset(name: str) -> str:
        """
        Get a preset with its slot layout.

        Args:
            name: Preset name

        Returns:
            JSON string with preset settings, slot labels and the
            Roman numeral of each slot's default chord

        Example:
            instrument_describe_preset(name="default")
        """
        try:
            preset = preset_loader.get_preset(name)
            if preset is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.PRESET_NOT_FOUND.format(name=name)}
                )

            state = preset.to_state()
            return json.dumps(
                {
                    "status": "success",
                    "preset": preset.to_yaml_dict(),
                    "slots": [
                        {
                            "slot": slot,
                            "label": label,
                            "numeral": state.chord_label_for_slot(slot),
                        }
                        for slot, label in enumerate(state.scale_labels())
                    ],
                },
                ensure_ascii=False,
            )
        except Exception as e:
            logger.exception("Failed to describe preset")
            return json.dumps({"status": "error", "message": str(e)})

    tools["instrument_describe_preset"] = instrument_describe_preset

    @mcp.tool  # type: ignore[arg-type]
    async def instrument_play_slot(
        preset: str,
        slot: int,
        button: str | None = None,
        transpose: int = 0,
    ) -> str:
        """
        Resolve what a slot sounds.

        Returns the single note and the chord for the slot. Holding a
        modifier button forces that button's chord type; otherwise the
        diatonic chord of the degree is used.

        Args:
            preset: Preset name
            slot: Slot index (scale degree, 0-based)
            button: Held modifier button (e.g., 'a'), if any
            transpose: Extra transpose in semitones on top of the preset

        Returns:
            JSON string with note, chord notes, chord name and numeral

        Example:
            instrument_play_slot(preset="default", slot=4, button="y")
        """
        try:
            loaded = preset_loader.get_preset(preset)
            if loaded is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.PRESET_NOT_FOUND.format(name=preset),
                    }
                )

            chord_type = None
            if button:
                chord_type = loaded.modifier_for(button)
                if chord_type is None:
                    return json.dumps(
                        {
                            "status": "error",
                            "message": ErrorMessages.UNKNOWN_BUTTON.format(
                                button=button, name=loaded.name
                            ),
                        }
                    )

            state = loaded.to_state().shift_transpose(transpose)
            chord = state.chord_for_slot(slot, chord_type)
            detected = detect_chord(chord)

            return json.dumps(
                {
                    "status": "success",
                    "slot": slot,
                    "note": str(state.note_for_slot(slot)),
                    "chord": [str(note) for note in chord],
                    "chord_type": state.chord_type_for_slot(slot, chord_type).value,
                    "name": str(detected) if detected else UNKNOWN_CHORD,
                    "numeral": state.chord_label_for_slot(slot, chord_type),
                },
                ensure_ascii=False,
            )
        except Exception as e:
            logger.exception("Failed to resolve slot")
            return json.dumps({"status": "error", "message": str(e)})

    tools["instrument_play_slot"] = instrument_play_slot

    return tools
