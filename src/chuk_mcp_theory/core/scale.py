"""
Scale primitives - Scale and the scale note generator.

Scales are interval patterns applied to a spelled root. Diatonic modes
use each of the seven letters exactly once per octave, anchored on the
root's letter, so D major is spelled with F# rather than Gb and
Gb major with Cb rather than B.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_theory.constants import LETTERS, MODE_INTERVALS, ErrorMessages, ScaleMode

from .pitch import Note, PitchClass, spell


def parse_mode(mode: ScaleMode | str) -> ScaleMode:
    """
    Resolve a scale mode from an enum member or its name.

    Matching is case-insensitive ('dorian', 'Dorian', 'DORIAN').
    """
    if isinstance(mode, ScaleMode):
        return mode

    for member in ScaleMode:
        if member.value.lower() == mode.strip().lower():
            return member

    choices = ", ".join(m.value for m in ScaleMode)
    raise ValueError(ErrorMessages.INVALID_MODE.format(mode=mode, choices=choices))


@dataclass(frozen=True)
class Scale:
    """
    A scale is a spelled root note plus a mode.

    Examples:
        Scale(Note("C"), ScaleMode.IONIAN) = C major from C4
        Scale(Note("F", "#", 3), ScaleMode.DORIAN) = F# dorian from F#3
    """

    root: Note
    mode: ScaleMode

    @property
    def intervals(self) -> tuple[int, ...]:
        """Semitone offsets of each degree from the root."""
        return MODE_INTERVALS[self.mode]

    @property
    def is_chromatic(self) -> bool:
        return self.mode == ScaleMode.CHROMATIC

    @property
    def degree_count(self) -> int:
        """Notes per octave (7, or 12 for chromatic)."""
        return len(self.intervals)

    def pitch_classes(self) -> list[PitchClass]:
        """Get the pitch classes of one octave, in degree order."""
        return [self.root.pitch_class.transpose(interval) for interval in self.intervals]

    def notes(self, octaves: int = 1) -> list[Note]:
        """
        Get the notes of the scale across one or more octaves.

        Notes come in scale-degree order; degree 0 is always the root.
        Diatonic notes move to the next octave number once the letter
        sequence wraps past B. Chromatic notes are spelled with sharps and
        all carry the octave number of their pass (A4 ... B4, C4 ... G#4).

        Args:
            octaves: Number of octaves to generate

        Returns:
            degree_count * octaves notes (empty for octaves <= 0)
        """
        root_pitch = self.root.pitch_class.value
        root_letter_index = self.root.letter_index
        notes: list[Note] = []

        for i in range(octaves):
            base = self.root.octave + i

            if self.is_chromatic:
                for interval in self.intervals:
                    notes.append(Note.from_absolute((root_pitch + interval) % 12 + base * 12))
                continue

            for degree, interval in enumerate(self.intervals):
                letter_index = (root_letter_index + degree) % len(LETTERS)
                name = spell((root_pitch + interval) % 12, LETTERS[letter_index])
                octave = base + 1 if letter_index < root_letter_index else base
                notes.append(Note(name[0], name[1:], octave))

        return notes

    def __str__(self) -> str:
        return f"{self.root.name} {self.mode.value}"

    def __repr__(self) -> str:
        return f"Scale({str(self.root)!r}, ScaleMode.{self.mode.name})"


def build_scale(root: Note, mode: ScaleMode | str = ScaleMode.IONIAN, octaves: int = 1) -> list[Note]:
    """Get scale notes as Note values."""
    return Scale(root, parse_mode(mode)).notes(octaves)


def get_scale_notes(
    root: str,
    mode: ScaleMode | str = ScaleMode.IONIAN,
    octaves: int = 1,
) -> list[str]:
    """
    Get scale note names for a root note name.

    Examples:
        get_scale_notes("C4") == ["C4", "D4", "E4", "F4", "G4", "A4", "B4"]
        get_scale_notes("B3", "Ionian")[:2] == ["B3", "C#4"]
        get_scale_notes("F4", "Ionian")[3] == "Bb4"
    """
    return [str(note) for note in build_scale(Note.parse(root), mode, octaves)]
