"""
Chord name detection - from sounding notes back to a chord symbol.

Every distinct pitch class is tried as the root, in ascending pitch-class
order, and the first one whose interval set matches a known signature wins.
This is a fixed tie-break, not a search for the most likely root: the
augmented triad C E G# is always named from C, and C F G is Csus4 rather
than Fsus2.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from chuk_mcp_theory.constants import CHORD_SIGNATURES, UNKNOWN_CHORD

from .pitch import Note, PitchClass


@dataclass(frozen=True)
class DetectedChord:
    """
    A detected chord: root pitch class, symbol suffix and bass note.

    The root is named from the preferred-spelling table (Db, Eb, F#, Ab, Bb
    for black keys); the bass keeps the spelling it was played with, so a
    C# bass under a Db chord still reads as a slash (Db/C#).
    """

    root: PitchClass
    quality: str
    bass: Note

    @property
    def root_name(self) -> str:
        return self.root.spell(preferred=True)

    @property
    def is_inversion(self) -> bool:
        """True when the bass is spelled differently from the root name."""
        return self.bass.name != self.root_name

    def __str__(self) -> str:
        result = f"{self.root_name}{self.quality}"
        if self.is_inversion:
            result += f"/{self.bass.name}"
        return result


def interval_signature(pitch_classes: Sequence[int], root: int) -> tuple[int, ...]:
    """Get the sorted, de-duplicated intervals of pitch classes above a root."""
    return tuple(sorted({(pc - root) % 12 for pc in pitch_classes}))


def detect_chord(notes: Sequence[Note]) -> DetectedChord | None:
    """
    Detect the chord formed by a set of notes.

    Order and octave duplication do not matter; the lowest note is the bass.

    Args:
        notes: Sounding notes

    Returns:
        The detected chord, or None when nothing matches (or no notes)
    """
    if not notes:
        return None

    bass = min(notes, key=lambda note: note.absolute)
    pitch_classes = sorted({note.pitch_class.value for note in notes})

    for root in pitch_classes:
        quality = CHORD_SIGNATURES.get(interval_signature(pitch_classes, root))
        if quality is not None:
            return DetectedChord(PitchClass(root), quality, bass)

    return None


def detect_chord_name(notes: Sequence[str]) -> str:
    """
    Name the chord formed by note names.

    Examples:
        detect_chord_name(["C4", "E4", "G4"]) == "C"
        detect_chord_name(["E4", "G4", "C5"]) == "C/E"
        detect_chord_name(["A3", "C4", "E4"]) == "Am"
        detect_chord_name(["C4", "D4", "E4"]) == "?"
        detect_chord_name([]) == ""
    """
    if not notes:
        return ""

    detected = detect_chord([Note.parse(n) for n in notes])
    if detected is None:
        return UNKNOWN_CHORD
    return str(detected)
