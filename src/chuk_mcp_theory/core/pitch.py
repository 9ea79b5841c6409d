"""
Pitch primitives - PitchClass, Note, and the note-name codec.

These are the foundational types for all pitch-related operations.
PitchClass represents the 12 chromatic pitches (octave-independent).
Note is a spelled pitch: letter, accidental and octave.

Note names are parsed and rendered only at the string boundary
(parse_note, from_index, spell, transpose). Everything inside the
engine works on Note values.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import IntEnum

from chuk_mcp_theory.constants import DEFAULT_NOTE, DEFAULT_OCTAVE, LETTERS

logger = logging.getLogger(__name__)

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]
# Root names that avoid double accidentals around the circle of fifths
_PREFERRED_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "F#",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

_LETTER_PITCHES: dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}
_ACCIDENTAL_OFFSETS: dict[str, int] = {"": 0, "#": 1, "##": 2, "b": -1, "bb": -2}
_OFFSET_ACCIDENTALS: dict[int, str] = {v: k for k, v in _ACCIDENTAL_OFFSETS.items()}

# Letter, optional single/double accidental, optional signed octave
_NOTE_PATTERN = re.compile(r"([A-G])(#{1,2}|b{1,2})?(-?[0-9]+)?")


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Spelling is a display concern, handled at serialization.
    Internally, we use sharp names (Cs, Ds, etc.).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def interval_to(self, other: PitchClass) -> int:
        """Get the ascending distance in semitones to another pitch class."""
        return (other.value - self.value) % 12

    def circle_of_fifths(self, direction: int) -> PitchClass:
        """
        Step around the circle of fifths.

        Clockwise (1) adds a fifth: C -> G -> D ...
        Counter-clockwise (-1) adds a fourth: C -> F -> Bb ...
        """
        if direction not in (1, -1):
            raise ValueError(f"Direction must be 1 or -1, got {direction}")
        return self.transpose(7 if direction == 1 else 5)

    def spell(self, preferred: bool = False) -> str:
        """
        Get human-readable name.

        Sharp names by default; with preferred=True, the root-name table
        used for chord symbols (flats for black keys, except F#).
        """
        names = _PREFERRED_NAMES if preferred else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db'."""
        name = name.strip()

        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))

        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        # Try enum names (C, Cs, D, Ds, etc.)
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise ValueError(f"Unknown pitch class: {name}")


def note_index(letter: str, accidental: str = "") -> int:
    """
    Get the pitch class (0-11) of a letter plus accidental.

    Examples:
        note_index("C", "#") == 1
        note_index("C", "b") == 11
        note_index("E", "##") == 6
    """
    if letter not in _LETTER_PITCHES:
        raise ValueError(f"Unknown note letter: {letter}")
    if accidental not in _ACCIDENTAL_OFFSETS:
        raise ValueError(f"Unknown accidental: {accidental}")
    return (_LETTER_PITCHES[letter] + _ACCIDENTAL_OFFSETS[accidental]) % 12


def from_index(index: int, octave_base: int = 0) -> str:
    """
    Render a semitone index as a sharp-spelled note name.

    The index may exceed one octave (or be negative); the overflow
    is carried into the octave number.

    Examples:
        from_index(1, 4) == "C#4"
        from_index(50, 0) == "D4"
        from_index(-1, 4) == "B3"
    """
    return f"{_SHARP_NAMES[index % 12]}{octave_base + index // 12}"


def spell(pitch_class: int, letter: str) -> str:
    """
    Spell a pitch class using a given letter.

    Uses at most a double accidental. Spellings that would need more
    fall back to the sharp name of the pitch class.

    Examples:
        spell(6, "G") == "Gb"
        spell(5, "E") == "E#"
        spell(6, "C") == "F#"  (C#### is not a spelling)
    """
    pitch_class %= 12
    diff = pitch_class - _LETTER_PITCHES[letter]
    if diff > 6:
        diff -= 12
    if diff < -6:
        diff += 12

    accidental = _OFFSET_ACCIDENTALS.get(diff)
    if accidental is None:
        return _SHARP_NAMES[pitch_class]
    return f"{letter}{accidental}"


@dataclass(frozen=True)
class Note:
    """
    A spelled pitch: letter, accidental and octave.

    The absolute value is octave * 12 + pitch class, so C4 = 48.
    Notes with equal absolute values are enharmonic (C#4 and Db4)
    but compare unequal, since spelling is part of the value.

    Immutable and hashable.
    """

    letter: str
    accidental: str = ""
    octave: int = DEFAULT_OCTAVE

    def __post_init__(self) -> None:
        if self.letter not in _LETTER_PITCHES:
            raise ValueError(f"Letter must be one of {''.join(LETTERS)}, got {self.letter!r}")
        if self.accidental not in _ACCIDENTAL_OFFSETS:
            raise ValueError(f"Accidental must be '', #, ##, b or bb, got {self.accidental!r}")

    @property
    def name(self) -> str:
        """Letter plus accidental, without octave (e.g. 'F#')."""
        return f"{self.letter}{self.accidental}"

    @property
    def pitch_class(self) -> PitchClass:
        return PitchClass(note_index(self.letter, self.accidental))

    @property
    def absolute(self) -> int:
        """Semitone value used for ordering and interval arithmetic."""
        return self.octave * 12 + self.pitch_class.value

    @property
    def letter_index(self) -> int:
        """Position of the letter in C D E F G A B."""
        return LETTERS.index(self.letter)

    def transpose(self, semitones: int) -> Note:
        """Shift by a number of semitones, re-spelled with sharps."""
        return Note.from_absolute(self.absolute + semitones)

    @classmethod
    def from_absolute(cls, value: int) -> Note:
        """Build a sharp-spelled note from an absolute semitone value."""
        name = _SHARP_NAMES[value % 12]
        return cls(name[0], name[1:], value // 12)

    @classmethod
    def parse(cls, text: str) -> Note:
        """
        Parse a note from a string like 'C4', 'F#', 'Ebb-1'.

        A missing octave defaults to 4. Text that does not match the
        grammar yields C4 rather than raising.
        """
        match = _NOTE_PATTERN.fullmatch(text)
        if not match:
            logger.debug(f"Unparseable note {text!r}, using {DEFAULT_NOTE}")
            return cls("C", "", DEFAULT_OCTAVE)

        letter, accidental, octave = match.groups()
        return cls(
            letter,
            accidental or "",
            int(octave) if octave is not None else DEFAULT_OCTAVE,
        )

    def __str__(self) -> str:
        return f"{self.name}{self.octave}"


def parse_note(text: str) -> Note:
    """Parse a note name; unparseable text becomes C4."""
    return Note.parse(text)


def transpose(note: str, semitones: int) -> str:
    """
    Transpose a note name by a number of semitones.

    The result uses sharp spelling; the octave is recovered from
    the combined semitone index.

    Examples:
        transpose("C4", 2) == "D4"
        transpose("Bb3", 2) == "C4"
        transpose("E4", -12) == "E3"
    """
    return str(Note.parse(note).transpose(semitones))
