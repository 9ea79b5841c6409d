"""
Constants and enums for the theory engine.

No magic strings - use enums for constrained values.
"""

from enum import Enum


class ScaleMode(str, Enum):
    """
    Supported scale modes.

    The seven diatonic rotations of the major scale, plus Chromatic.
    Values are the display names used at the API boundary.
    """

    IONIAN = "Ionian"  # Major
    DORIAN = "Dorian"
    PHRYGIAN = "Phrygian"
    LYDIAN = "Lydian"
    MIXOLYDIAN = "Mixolydian"
    AEOLIAN = "Aeolian"  # Natural minor
    LOCRIAN = "Locrian"
    CHROMATIC = "Chromatic"


class ChordType(str, Enum):
    """Supported chord types (triads and tetrads)."""

    MAJOR = "maj"
    MINOR = "min"
    DIMINISHED = "dim"
    AUGMENTED = "aug"
    SUS2 = "sus2"
    SUS4 = "sus4"
    DOMINANT_7 = "7"
    MAJOR_7 = "maj7"
    MINOR_7 = "min7"


# Semitone offsets from the root, strictly increasing
MODE_INTERVALS: dict[ScaleMode, tuple[int, ...]] = {
    ScaleMode.IONIAN: (0, 2, 4, 5, 7, 9, 11),
    ScaleMode.DORIAN: (0, 2, 3, 5, 7, 9, 10),
    ScaleMode.PHRYGIAN: (0, 1, 3, 5, 7, 8, 10),
    ScaleMode.LYDIAN: (0, 2, 4, 6, 7, 9, 11),
    ScaleMode.MIXOLYDIAN: (0, 2, 4, 5, 7, 9, 10),
    ScaleMode.AEOLIAN: (0, 2, 3, 5, 7, 8, 10),
    ScaleMode.LOCRIAN: (0, 1, 3, 5, 6, 8, 10),
    ScaleMode.CHROMATIC: (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11),
}

CHORD_INTERVALS: dict[ChordType, tuple[int, ...]] = {
    ChordType.MAJOR: (0, 4, 7),
    ChordType.MINOR: (0, 3, 7),
    ChordType.DIMINISHED: (0, 3, 6),
    ChordType.AUGMENTED: (0, 4, 8),
    ChordType.SUS2: (0, 2, 7),
    ChordType.SUS4: (0, 5, 7),
    ChordType.DOMINANT_7: (0, 4, 7, 10),
    ChordType.MAJOR_7: (0, 4, 7, 11),
    ChordType.MINOR_7: (0, 3, 7, 10),
}

# Interval signature (from an assumed root) -> chord symbol suffix
CHORD_SIGNATURES: dict[tuple[int, ...], str] = {
    (0, 4, 7): "",
    (0, 3, 7): "m",
    (0, 3, 6): "dim",
    (0, 4, 8): "aug",
    (0, 2, 7): "sus2",
    (0, 5, 7): "sus4",
    (0, 4, 7, 11): "maj7",
    (0, 4, 7, 10): "7",
    (0, 3, 7, 10): "m7",
    (0, 3, 6, 9): "dim7",
    (0, 3, 6, 10): "m7b5",  # Half-diminished
}

# Natural letters in ascending order within an octave
LETTERS: tuple[str, ...] = ("C", "D", "E", "F", "G", "A", "B")

ROMAN_NUMERALS: tuple[str, ...] = ("I", "II", "III", "IV", "V", "VI", "VII")

# Octave assumed when a note name carries none
DEFAULT_OCTAVE = 4

# Returned for note text that does not parse
DEFAULT_NOTE = "C4"

# Sentinel label when no chord signature matches
UNKNOWN_CHORD = "?"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_MODE = "Invalid mode: '{mode}'. Expected one of: {choices}."
    INVALID_CHORD_TYPE = "Invalid chord type: '{chord_type}'. Expected one of: {choices}."
    PRESET_NOT_FOUND = "Preset '{name}' not found."
    PRESET_EXISTS = "Preset already exists in project: {name}"
    NO_PROJECT_PATH = "No project path configured"
    UNKNOWN_BUTTON = "Button '{button}' has no chord modifier in preset '{name}'."
    INVALID_SLOT = "Invalid slot: {slot}. Preset has {count} slots."
