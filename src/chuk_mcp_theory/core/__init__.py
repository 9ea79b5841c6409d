"""
Core theory engine - the Radix layer.

These are the pure functions everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Note: A spelled pitch (letter, accidental, octave) and its name codec
- Scale: A spelled root plus a mode, generating letter-correct notes
- Chord: Interval stacks on a root, with generic inversion
- Diatonic harmony: triads on scale degrees, voicing policies, Roman numerals
- Detection: sounding notes back to a chord symbol

Functions named get_* and the detect/transpose helpers take and return
note-name strings; the rest work on Note values.
"""

from chuk_mcp_theory.core.chord import (
    Chord,
    apply_generic_inversion,
    build_chord,
    get_chord_notes,
    invert,
    parse_chord_type,
)
from chuk_mcp_theory.core.detect import DetectedChord, detect_chord, detect_chord_name
from chuk_mcp_theory.core.diatonic import (
    DiatonicChord,
    compact_voicing,
    diatonic_chord,
    diatonic_chord_type,
    get_diatonic_chord,
    get_diatonic_chord_type,
    get_diatonic_chords,
    roman_numeral,
    root_position,
)
from chuk_mcp_theory.core.pitch import (
    Note,
    PitchClass,
    from_index,
    note_index,
    parse_note,
    spell,
    transpose,
)
from chuk_mcp_theory.core.scale import Scale, build_scale, get_scale_notes, parse_mode

__all__ = [
    # Pitch
    "PitchClass",
    "Note",
    "parse_note",
    "note_index",
    "from_index",
    "spell",
    "transpose",
    # Scale
    "Scale",
    "parse_mode",
    "build_scale",
    "get_scale_notes",
    # Chord
    "Chord",
    "parse_chord_type",
    "build_chord",
    "invert",
    "apply_generic_inversion",
    "get_chord_notes",
    # Diatonic
    "DiatonicChord",
    "compact_voicing",
    "root_position",
    "diatonic_chord",
    "diatonic_chord_type",
    "get_diatonic_chord",
    "get_diatonic_chord_type",
    "get_diatonic_chords",
    "roman_numeral",
    # Detection
    "DetectedChord",
    "detect_chord",
    "detect_chord_name",
]
