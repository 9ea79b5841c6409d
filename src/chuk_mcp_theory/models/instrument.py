"""
Instrument model - the player's mental model.

An instrument state is what a controller layer holds between button
presses: the key (root + mode), a global transpose and the voicing switch.
Each scale degree is a "slot" the player can select to sound a single note
or a chord. All resolution is delegated to the core engine.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_theory.constants import DEFAULT_OCTAVE, ChordType, ErrorMessages, ScaleMode
from chuk_mcp_theory.core.chord import build_chord, parse_chord_type
from chuk_mcp_theory.core.diatonic import diatonic_chord, diatonic_chord_type, roman_numeral
from chuk_mcp_theory.core.pitch import Note, PitchClass
from chuk_mcp_theory.core.scale import Scale, parse_mode


def coerce_pitch_class(v: Any) -> Any:
    """Accept pitch class names ('F#', 'Bb') as well as integers."""
    if isinstance(v, str):
        return int(v) if v.strip().isdigit() else PitchClass.parse(v)
    return v


def coerce_mode(v: Any) -> Any:
    """Accept mode names case-insensitively."""
    if isinstance(v, str):
        return parse_mode(v)
    return v


class InstrumentState(BaseModel):
    """
    Key, transpose and voicing for a slot-based instrument.

    Immutable - navigation methods return a new state.
    """

    root: PitchClass = Field(PitchClass.C, description="Root pitch class (0-11 or name)")
    mode: ScaleMode = Field(ScaleMode.IONIAN, description="Scale mode")
    transpose: int = Field(0, description="Global transpose in semitones")
    base_octave: int = Field(DEFAULT_OCTAVE, description="Octave of the scale root")
    voicing: bool = Field(True, description="Apply compact voicing to diatonic chords")

    model_config = {"frozen": True}

    @field_validator("root", mode="before")
    @classmethod
    def validate_root(cls, v: Any) -> Any:
        return coerce_pitch_class(v)

    @field_validator("mode", mode="before")
    @classmethod
    def validate_mode(cls, v: Any) -> Any:
        return coerce_mode(v)

    @property
    def root_note(self) -> Note:
        """The scale root at the base octave, sharp-spelled."""
        return Note.from_absolute(self.base_octave * 12 + self.root.value)

    @property
    def scale(self) -> Scale:
        return Scale(self.root_note, self.mode)

    @property
    def slot_count(self) -> int:
        """Selectable slots (7, or 12 for chromatic)."""
        return self.scale.degree_count

    def _shift(self, note: Note) -> Note:
        # Untransposed notes keep their scale spelling (F major shows Bb);
        # any transpose re-spells with sharps
        if self.transpose == 0:
            return note
        return note.transpose(self.transpose)

    def _check_slot(self, slot: int) -> None:
        if not 0 <= slot < self.slot_count:
            raise ValueError(ErrorMessages.INVALID_SLOT.format(slot=slot, count=self.slot_count))

    def scale_notes(self) -> list[Note]:
        """One octave of the scale, before transpose."""
        return self.scale.notes(1)

    def scale_labels(self) -> list[str]:
        """Slot labels: transposed note names without octave."""
        return [self._shift(note).name for note in self.scale_notes()]

    def note_for_slot(self, slot: int) -> Note:
        """The single note a slot sounds."""
        self._check_slot(slot)
        return self._shift(self.scale_notes()[slot])

    def chord_type_for_slot(self, slot: int, chord_type: ChordType | str | None = None) -> ChordType:
        """
        Resolve the chord type a slot plays.

        A forced chord type wins; chromatic slots play major; otherwise
        the diatonic triad quality of the degree.
        """
        self._check_slot(slot)
        if chord_type is not None:
            return parse_chord_type(chord_type)
        if self.scale.is_chromatic:
            return ChordType.MAJOR
        return diatonic_chord_type(self.scale_notes(), slot)

    def chord_for_slot(self, slot: int, chord_type: ChordType | str | None = None) -> list[Note]:
        """
        The chord a slot sounds.

        Args:
            slot: Scale degree (0-based)
            chord_type: Forced chord type (a modifier button), or None
                for the diatonic chord of the degree

        Returns:
            Chord notes
        """
        self._check_slot(slot)
        root = self.note_for_slot(slot)

        if chord_type is not None:
            return build_chord(root, chord_type)
        if self.scale.is_chromatic:
            return build_chord(root, ChordType.MAJOR)

        # Two octaves so upper degrees have a third and fifth to stack
        extended = [self._shift(note) for note in self.scale.notes(2)]
        return diatonic_chord(extended, slot, self.voicing)

    def chord_label_for_slot(self, slot: int, chord_type: ChordType | str | None = None) -> str:
        """Roman numeral for a slot's chord ('' past the seventh degree)."""
        return roman_numeral(slot, self.chord_type_for_slot(slot, chord_type))

    def step_root(self, direction: int) -> InstrumentState:
        """Move the root up or down a semitone."""
        return self.model_copy(update={"root": self.root.transpose(direction)})

    def step_circle_of_fifths(self, direction: int) -> InstrumentState:
        """Move the root clockwise (1) or counter-clockwise (-1) around the circle of fifths."""
        return self.model_copy(update={"root": self.root.circle_of_fifths(direction)})

    def step_mode(self, direction: int) -> InstrumentState:
        """Cycle through the scale modes."""
        modes = list(ScaleMode)
        index = (modes.index(self.mode) + direction) % len(modes)
        return self.model_copy(update={"mode": modes[index]})

    def shift_transpose(self, delta: int) -> InstrumentState:
        return self.model_copy(update={"transpose": self.transpose + delta})
