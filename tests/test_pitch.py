"""
Tests for pitch primitives.

Tests cover:
- PitchClass (transpose, circle of fifths, spelling, parsing)
- Note value type and the note-name parser
- note_index, from_index, spell
- transpose on note names
"""

import logging

import pytest

from chuk_mcp_theory.constants import LETTERS
from chuk_mcp_theory.core import (
    Note,
    PitchClass,
    from_index,
    note_index,
    parse_note,
    spell,
    transpose,
)


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.D == 2
        assert PitchClass.E == 4
        assert PitchClass.F == 5
        assert PitchClass.G == 7
        assert PitchClass.A == 9
        assert PitchClass.B == 11

    def test_transpose_wraps(self) -> None:
        """Transposing wraps around the octave in both directions."""
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.C.transpose(-1) == PitchClass.B
        assert PitchClass.G.transpose(7) == PitchClass.D

    def test_interval_to(self) -> None:
        """Ascending distance between pitch classes."""
        assert PitchClass.C.interval_to(PitchClass.G) == 7
        assert PitchClass.G.interval_to(PitchClass.C) == 5
        assert PitchClass.D.interval_to(PitchClass.F) == 3

    def test_circle_of_fifths(self) -> None:
        """Clockwise adds a fifth, counter-clockwise a fourth."""
        assert PitchClass.C.circle_of_fifths(1) == PitchClass.G
        assert PitchClass.C.circle_of_fifths(-1) == PitchClass.F
        assert PitchClass.F.circle_of_fifths(-1) == PitchClass.As

    def test_circle_of_fifths_visits_all_roots(self) -> None:
        """Twelve clockwise steps visit every pitch class once."""
        seen = []
        current = PitchClass.C
        for _ in range(12):
            seen.append(current)
            current = current.circle_of_fifths(1)
        assert sorted(seen) == list(PitchClass)
        assert current == PitchClass.C

    def test_circle_of_fifths_invalid_direction(self) -> None:
        """Only 1 and -1 are directions."""
        with pytest.raises(ValueError):
            PitchClass.C.circle_of_fifths(0)

    def test_spell(self) -> None:
        """Sharp names by default, preferred root names on request."""
        assert PitchClass.Cs.spell() == "C#"
        assert PitchClass.Cs.spell(preferred=True) == "Db"
        assert PitchClass.Fs.spell(preferred=True) == "F#"
        assert PitchClass.As.spell(preferred=True) == "Bb"

    def test_parse(self) -> None:
        """Parse pitch class from string."""
        assert PitchClass.parse("C") == PitchClass.C
        assert PitchClass.parse("C#") == PitchClass.Cs
        assert PitchClass.parse("Db") == PitchClass.Cs
        assert PitchClass.parse(" Bb ") == PitchClass.As
        assert PitchClass.parse("fs") == PitchClass.Fs

    def test_parse_invalid(self) -> None:
        """Unknown names raise."""
        with pytest.raises(ValueError):
            PitchClass.parse("H")


class TestNoteIndex:
    """Tests for note_index."""

    def test_naturals(self) -> None:
        assert [note_index(letter) for letter in LETTERS] == [0, 2, 4, 5, 7, 9, 11]

    def test_accidentals(self) -> None:
        """Single and double accidentals, normalized into 0-11."""
        assert note_index("C", "#") == 1
        assert note_index("C", "b") == 11
        assert note_index("B", "#") == 0
        assert note_index("E", "##") == 6
        assert note_index("D", "bb") == 0

    def test_invalid(self) -> None:
        with pytest.raises(ValueError):
            note_index("H")
        with pytest.raises(ValueError):
            note_index("C", "###")


class TestFromIndex:
    """Tests for from_index."""

    def test_within_octave(self) -> None:
        assert from_index(0, 4) == "C4"
        assert from_index(1, 4) == "C#4"
        assert from_index(11, 4) == "B4"

    def test_octave_carry(self) -> None:
        """Indices past 11 carry into the octave."""
        assert from_index(50, 0) == "D4"
        assert from_index(12, 4) == "C5"

    def test_negative(self) -> None:
        """Negative indices borrow from the octave."""
        assert from_index(-1, 4) == "B3"
        assert from_index(-13, 0) == "B-2"


class TestSpell:
    """Tests for spell."""

    def test_natural(self) -> None:
        assert spell(0, "C") == "C"
        assert spell(9, "A") == "A"

    def test_single_accidentals(self) -> None:
        assert spell(6, "G") == "Gb"
        assert spell(6, "F") == "F#"
        assert spell(5, "E") == "E#"
        assert spell(0, "B") == "B#"
        assert spell(11, "C") == "Cb"

    def test_double_accidentals(self) -> None:
        assert spell(9, "B") == "Bbb"
        assert spell(4, "D") == "D##"

    def test_out_of_reach_falls_back_to_sharps(self) -> None:
        """Spellings beyond a double accidental use the sharp name."""
        assert spell(6, "C") == "F#"
        assert spell(3, "G") == "D#"

    def test_round_trip(self) -> None:
        """Every spelling resolves back to the requested pitch class."""
        for pc in range(12):
            for letter in LETTERS:
                name = spell(pc, letter)
                assert note_index(name[0], name[1:]) == pc


class TestNote:
    """Tests for the Note value type."""

    def test_defaults(self) -> None:
        note = Note("C")
        assert note.accidental == ""
        assert note.octave == 4
        assert str(note) == "C4"

    def test_absolute(self) -> None:
        """Absolute value is octave * 12 + pitch class."""
        assert Note("C", "", 4).absolute == 48
        assert Note("A", "", 4).absolute == 57
        assert Note("C", "#", -1).absolute == -11

    def test_enharmonic(self) -> None:
        """Enharmonic notes share absolute value but not identity."""
        sharp = Note("C", "#", 4)
        flat = Note("D", "b", 4)
        assert sharp.absolute == flat.absolute
        assert sharp.pitch_class == flat.pitch_class
        assert sharp != flat

    def test_invalid_letter(self) -> None:
        with pytest.raises(ValueError):
            Note("H")

    def test_invalid_accidental(self) -> None:
        with pytest.raises(ValueError):
            Note("C", "x")

    def test_frozen(self) -> None:
        note = Note("C")
        with pytest.raises(AttributeError):
            note.octave = 5  # type: ignore[misc]

    def test_from_absolute(self) -> None:
        assert str(Note.from_absolute(61)) == "C#5"
        assert str(Note.from_absolute(-1)) == "B-1"

    def test_transpose(self) -> None:
        """Transposing re-spells with sharps."""
        assert str(Note("B", "b", 3).transpose(2)) == "C4"
        assert str(Note("E", "b", 4).transpose(0)) == "D#4"
        assert str(Note("E", "", 4).transpose(-12)) == "E3"

    def test_letter_index(self) -> None:
        assert Note("C").letter_index == 0
        assert Note("B", "b").letter_index == 6


class TestParseNote:
    """Tests for the note-name parser."""

    def test_parse_with_octave(self) -> None:
        assert Note.parse("C4") == Note("C", "", 4)
        assert Note.parse("F#3") == Note("F", "#", 3)
        assert Note.parse("Ebb-1") == Note("E", "bb", -1)
        assert Note.parse("G##10") == Note("G", "##", 10)

    def test_missing_octave_defaults_to_4(self) -> None:
        assert Note.parse("G") == Note("G", "", 4)
        assert Note.parse("Bb") == Note("B", "b", 4)

    @pytest.mark.parametrize(
        "text", ["", "H4", "c4", "C###4", "C#b4", "C4.5", "4C", " C4", "D4\n", "D\u0665"]
    )
    def test_unparseable_defaults_to_c4(self, text: str) -> None:
        """Text outside the grammar becomes C4."""
        assert Note.parse(text) == Note("C", "", 4)

    def test_unparseable_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """The fallback leaves a debug record."""
        with caplog.at_level(logging.DEBUG, logger="chuk_mcp_theory.core.pitch"):
            parse_note("nonsense")
        assert "Unparseable note" in caplog.text

    def test_flat_pitch_wraps_without_octave_change(self) -> None:
        """Cb keeps its written octave; its pitch class is 11."""
        note = Note.parse("Cb4")
        assert note.pitch_class == PitchClass.B
        assert note.absolute == 59


class TestTranspose:
    """Tests for transpose on note names."""

    def test_up_and_down(self) -> None:
        assert transpose("C4", 2) == "D4"
        assert transpose("B4", 1) == "C5"
        assert transpose("C4", -1) == "B3"
        assert transpose("E4", -12) == "E3"

    def test_flats_become_sharps(self) -> None:
        assert transpose("Bb3", 2) == "C4"
        assert transpose("Db4", 0) == "C#4"

    def test_unparseable_starts_from_c4(self) -> None:
        assert transpose("xyz", 0) == "C4"
        assert transpose("xyz", 7) == "G4"

    def test_group_law(self) -> None:
        """Two shifts equal one combined shift."""
        for start in ("C4", "F#3", "Bb-1", "E##5"):
            for a in range(-14, 15, 3):
                for b in range(-14, 15, 5):
                    stepwise = Note.parse(transpose(transpose(start, a), b))
                    combined = Note.parse(transpose(start, a + b))
                    assert stepwise.absolute == combined.absolute
