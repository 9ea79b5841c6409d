"""
Chord primitives - Chord, the chord builder and generic inversion.

Chords are interval stacks on a root note. Inversion is a single generic
operation: move the lowest note up an octave (positive steps) or the
highest note down an octave (negative steps), one note per step.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from chuk_mcp_theory.constants import CHORD_INTERVALS, ChordType, ErrorMessages

from .pitch import Note, PitchClass

# Chord symbol suffix per chord type (C, Cm, Cdim, C7, ...)
CHORD_SYMBOLS: dict[ChordType, str] = {
    ChordType.MAJOR: "",
    ChordType.MINOR: "m",
    ChordType.DIMINISHED: "dim",
    ChordType.AUGMENTED: "aug",
    ChordType.SUS2: "sus2",
    ChordType.SUS4: "sus4",
    ChordType.DOMINANT_7: "7",
    ChordType.MAJOR_7: "maj7",
    ChordType.MINOR_7: "m7",
}


def parse_chord_type(chord_type: ChordType | str) -> ChordType:
    """
    Resolve a chord type from an enum member, its value or its name.

    Accepts 'min', 'MIN', 'minor_7' style names as well as values.
    """
    if isinstance(chord_type, ChordType):
        return chord_type

    text = chord_type.strip()
    for member in ChordType:
        if text.lower() in (member.value.lower(), member.name.lower()):
            return member

    choices = ", ".join(m.value for m in ChordType)
    raise ValueError(ErrorMessages.INVALID_CHORD_TYPE.format(chord_type=chord_type, choices=choices))


def build_chord(root: Note, chord_type: ChordType | str = ChordType.MAJOR) -> list[Note]:
    """
    Build a root-position chord on a root note.

    Notes are sharp-spelled and ascending by construction.

    Args:
        root: The root note (its octave anchors the chord)
        chord_type: The chord type

    Returns:
        One note per interval of the chord type
    """
    base = root.octave * 12 + root.pitch_class.value
    intervals = CHORD_INTERVALS[parse_chord_type(chord_type)]
    return [Note.from_absolute(base + interval) for interval in intervals]


def invert(notes: Sequence[Note], steps: int) -> list[Note]:
    """
    Apply a generic inversion.

    Positive steps repeatedly move the lowest note up an octave; negative
    steps repeatedly move the highest note down an octave. The pitch-class
    content and the note count never change, only octave placement.

    Args:
        notes: Chord notes, in any order
        steps: Number of inversion steps (0 returns the input unchanged)

    Returns:
        Sharp-spelled notes, ascending by pitch
    """
    if steps == 0:
        return list(notes)

    values = sorted(note.absolute for note in notes)
    for _ in range(abs(steps)):
        if not values:
            break
        if steps > 0:
            values.append(values.pop(0) + 12)
        else:
            values.insert(0, values.pop() - 12)
        values.sort()

    return [Note.from_absolute(value) for value in values]


def apply_generic_inversion(notes: Sequence[str], steps: int) -> list[str]:
    """
    Apply a generic inversion to note names.

    Examples:
        apply_generic_inversion(["C4", "E4", "G4"], 1) == ["E4", "G4", "C5"]
        apply_generic_inversion(["C4", "E4", "G4"], -1) == ["G3", "C4", "E4"]
    """
    if steps == 0:
        return list(notes)
    return [str(note) for note in invert([Note.parse(n) for n in notes], steps)]


def get_chord_notes(
    root: str,
    chord_type: ChordType | str = ChordType.MAJOR,
    inversion: int = 0,
) -> list[str]:
    """
    Get chord note names for a root note name.

    Examples:
        get_chord_notes("C4", "maj") == ["C4", "E4", "G4"]
        get_chord_notes("A3", "min7") == ["A3", "C4", "E4", "G4"]
        get_chord_notes("C4", "maj", 2) == ["G4", "C5", "E5"]
    """
    notes = invert(build_chord(Note.parse(root), chord_type), inversion)
    return [str(note) for note in notes]


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord: root note, chord type and inversion steps.

    This is the resolved form - an actual voicing that can be played.
    """

    root: Note
    chord_type: ChordType
    inversion: int = 0

    def notes(self) -> list[Note]:
        """Get the voiced notes, ascending."""
        return invert(build_chord(self.root, self.chord_type), self.inversion)

    def pitch_classes(self) -> list[PitchClass]:
        """Get the pitch classes in chord-tone order (root first)."""
        return [note.pitch_class for note in build_chord(self.root, self.chord_type)]

    @property
    def bass(self) -> Note:
        """The lowest sounding note."""
        return min(self.notes(), key=lambda note: note.absolute)

    @property
    def symbol(self) -> str:
        """Chord symbol with slash bass for inversions (e.g. 'Am/C')."""
        result = f"{self.root.name}{CHORD_SYMBOLS[self.chord_type]}"
        bass = self.bass
        if bass.pitch_class != self.root.pitch_class:
            result += f"/{bass.name}"
        return result

    def __str__(self) -> str:
        return self.symbol
