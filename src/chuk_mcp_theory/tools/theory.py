"""
Theory tools - MCP tools over the core engine.

Tools for scales, chords, inversions, transposition, diatonic harmony
and chord detection. Inputs and outputs are note-name strings.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_theory.core import (
    apply_generic_inversion,
    detect_chord_name,
    get_chord_notes,
    get_diatonic_chords,
    get_scale_notes,
    parse_chord_type,
    parse_mode,
    transpose,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_theory_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register music theory tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_scale_notes(root: str, mode: str = "Ionian", octaves: int = 1) -> str:
        """
        Get the notes of a scale.

        Diatonic modes are spelled with one letter per degree (D major has
        F# and C#, F major has Bb). Chromatic uses sharps.

        Args:
            root: Root note with octave (e.g., 'C4', 'F#3', 'Bb4')
            mode: Ionian, Dorian, Phrygian, Lydian, Mixolydian, Aeolian,
                Locrian or Chromatic
            octaves: Number of octaves (default: 1)

        Returns:
            JSON string with the scale notes in degree order

        Example:
            theory_scale_notes(root="D4", mode="Dorian", octaves=2)
        """
        try:
            scale_mode = parse_mode(mode)
            notes = get_scale_notes(root, scale_mode, octaves)
            return json.dumps(
                {
                    "status": "success",
                    "root": root,
                    "mode": scale_mode.value,
                    "notes": notes,
                }
            )
        except Exception as e:
            logger.exception("Failed to build scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_scale_notes"] = theory_scale_notes

    @mcp.tool  # type: ignore[arg-type]
    async def theory_chord_notes(root: str, chord_type: str = "maj", inversion: int = 0) -> str:
        """
        Build a chord on a root note.

        Args:
            root: Root note with octave (e.g., 'C4')
            chord_type: maj, min, dim, aug, sus2, sus4, 7, maj7 or min7
            inversion: Inversion steps; positive moves the lowest note up
                an octave per step, negative the highest note down

        Returns:
            JSON string with the chord notes (ascending) and detected name

        Example:
            theory_chord_notes(root="A3", chord_type="min7", inversion=1)
        """
        try:
            ct = parse_chord_type(chord_type)
            notes = get_chord_notes(root, ct, inversion)
            return json.dumps(
                {
                    "status": "success",
                    "chord_type": ct.value,
                    "inversion": inversion,
                    "notes": notes,
                    "name": detect_chord_name(notes),
                }
            )
        except Exception as e:
            logger.exception("Failed to build chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_chord_notes"] = theory_chord_notes

    @mcp.tool  # type: ignore[arg-type]
    async def theory_invert_chord(notes: list[str], steps: int) -> str:
        """
        Invert a set of notes.

        Args:
            notes: Note names with octave
            steps: Inversion steps (positive up, negative down)

        Returns:
            JSON string with the inverted notes (ascending)

        Example:
            theory_invert_chord(notes=["C4", "E4", "G4"], steps=-1)
        """
        try:
            inverted = apply_generic_inversion(notes, steps)
            return json.dumps(
                {
                    "status": "success",
                    "notes": inverted,
                    "name": detect_chord_name(inverted),
                }
            )
        except Exception as e:
            logger.exception("Failed to invert chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_invert_chord"] = theory_invert_chord

    @mcp.tool  # type: ignore[arg-type]
    async def theory_transpose(notes: list[str], semitones: int) -> str:
        """
        Transpose notes by a number of semitones.

        Args:
            notes: Note names with octave
            semitones: Shift in semitones (negative for down)

        Returns:
            JSON string with the transposed notes (sharp spelling)

        Example:
            theory_transpose(notes=["C4", "E4"], semitones=3)
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "semitones": semitones,
                    "notes": [transpose(n, semitones) for n in notes],
                }
            )
        except Exception as e:
            logger.exception("Failed to transpose notes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_transpose"] = theory_transpose

    @mcp.tool  # type: ignore[arg-type]
    async def theory_diatonic_chords(root: str, mode: str = "Ionian", voicing: bool = True) -> str:
        """
        Get the chord on every degree of a scale.

        Triad qualities are measured from the scale, so every mode gets
        its own pattern (I ii iii IV V vi vii° for Ionian).

        Args:
            root: Root note with octave (e.g., 'C4')
            mode: Scale mode
            voicing: Drop the fifth below the root from the fourth degree up

        Returns:
            JSON string with one entry per degree

        Example:
            theory_diatonic_chords(root="A3", mode="Aeolian")
        """
        try:
            chords = get_diatonic_chords(root, mode, voicing)
            return json.dumps(
                {
                    "status": "success",
                    "chords": [
                        {
                            "degree": chord.degree,
                            "numeral": chord.numeral,
                            "chord_type": chord.chord_type.value,
                            "notes": chord.note_names(),
                            "name": detect_chord_name(chord.note_names()),
                        }
                        for chord in chords
                    ],
                },
                ensure_ascii=False,
            )
        except Exception as e:
            logger.exception("Failed to build diatonic chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_diatonic_chords"] = theory_diatonic_chords

    @mcp.tool  # type: ignore[arg-type]
    async def theory_detect_chord(notes: list[str]) -> str:
        """
        Name the chord formed by a set of notes.

        Order and octave duplicates do not matter. Inversions are
        written with a slash bass (C/E). Unknown shapes return '?'.

        Args:
            notes: Note names (e.g., ["E4", "G4", "C5"])

        Returns:
            JSON string with the chord name

        Example:
            theory_detect_chord(notes=["A3", "C4", "E4"])
        """
        try:
            return json.dumps({"status": "success", "name": detect_chord_name(notes)})
        except Exception as e:
            logger.exception("Failed to detect chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_detect_chord"] = theory_detect_chord

    return tools
