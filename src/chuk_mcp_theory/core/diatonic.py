"""
Diatonic harmony - triads stacked from a scale, voicing policies, Roman numerals.

Chord quality is measured from the scale itself (root to third, root to
fifth) rather than looked up per mode, so it holds for every mode.

Voicing is a policy function: it receives the scale degree and the
root-position triad and returns the notes to sound. compact_voicing keeps
chords on degree 3 and above from climbing an octave over the I-III
chords by dropping the fifth below the root.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from chuk_mcp_theory.constants import ROMAN_NUMERALS, ChordType, ScaleMode

from .chord import build_chord, parse_chord_type
from .pitch import Note
from .scale import Scale, parse_mode

VoicingPolicy = Callable[[int, list[Note]], list[Note]]

# (fifth interval, third interval) -> triad quality
_TRIAD_QUALITIES: dict[tuple[int, int], ChordType] = {
    (7, 4): ChordType.MAJOR,
    (7, 3): ChordType.MINOR,
    (6, 3): ChordType.DIMINISHED,
    (8, 4): ChordType.AUGMENTED,
}

# First scale degree (0-based) that compact_voicing drops
COMPACT_VOICING_DEGREE = 3


def root_position(degree: int, triad: list[Note]) -> list[Note]:
    """Leave every triad as root, third, fifth."""
    return list(triad)


def compact_voicing(degree: int, triad: list[Note]) -> list[Note]:
    """
    Drop the fifth an octave below the root from degree 3 upward.

    Degrees 0-2 stay in root position. From degree 3 the result is
    [fifth - 12, root, third], a second-inversion shape that sits in
    the same register as the lower chords.
    """
    if degree < COMPACT_VOICING_DEGREE or len(triad) < 3:
        return list(triad)
    root, third, fifth = triad[:3]
    return [fifth.transpose(-12), root, third]


def diatonic_chord_type(scale: Sequence[Note], degree: int) -> ChordType:
    """
    Classify the triad built on a scale degree.

    Third and fifth are taken two and four steps above the degree,
    wrapping around the scale. Anything other than a major, minor,
    diminished or augmented triad reports as major.

    Args:
        scale: Scale notes in degree order
        degree: 0-based scale degree

    Returns:
        The triad's chord type
    """
    if not scale:
        return ChordType.MAJOR

    size = len(scale)
    root = scale[degree % size]
    third = scale[(degree + 2) % size]
    fifth = scale[(degree + 4) % size]

    third_interval = (third.absolute - root.absolute) % 12
    fifth_interval = (fifth.absolute - root.absolute) % 12
    return _TRIAD_QUALITIES.get((fifth_interval, third_interval), ChordType.MAJOR)


def diatonic_chord(
    scale: Sequence[Note],
    degree: int,
    apply_voicing: bool = True,
    policy: VoicingPolicy = compact_voicing,
) -> list[Note]:
    """
    Stack a diatonic triad on a scale degree.

    The scale is indexed directly (no wraparound), so callers that want
    full triads on every degree pass two octaves of scale. When the third
    or fifth falls off the end only the root is returned.

    Args:
        scale: Scale notes in degree order
        degree: 0-based scale degree
        apply_voicing: Whether to apply the voicing policy
        policy: Voicing policy (compact_voicing by default)

    Returns:
        [root, third, fifth] or its voiced form; [root] for a short scale;
        [] when the degree is outside the scale
    """
    if degree < 0 or degree >= len(scale):
        return []

    root = scale[degree]
    if degree + 4 >= len(scale):
        return [root]

    triad = [root, scale[degree + 2], scale[degree + 4]]
    if not apply_voicing:
        return triad
    return policy(degree, triad)


def roman_numeral(degree: int, chord_type: ChordType | str) -> str:
    """
    Label a chord by scale degree.

    Upper case for major-family chords, lower case for minor and
    diminished, with quality suffixes.

    Examples:
        roman_numeral(0, "maj") == "I"
        roman_numeral(1, "min") == "ii"
        roman_numeral(6, "dim") == "vii°"
        roman_numeral(4, "7") == "V7"
        roman_numeral(7, "maj") == ""
    """
    if degree < 0 or degree >= len(ROMAN_NUMERALS):
        return ""

    base = ROMAN_NUMERALS[degree]
    chord_type = parse_chord_type(chord_type)

    if chord_type in (ChordType.MINOR, ChordType.MINOR_7):
        return base.lower()
    elif chord_type == ChordType.DIMINISHED:
        return f"{base.lower()}°"
    elif chord_type == ChordType.AUGMENTED:
        return f"{base}+"
    elif chord_type == ChordType.DOMINANT_7:
        return f"{base}7"
    elif chord_type in (ChordType.SUS2, ChordType.SUS4):
        return f"{base}{chord_type.value}"
    return base


def get_diatonic_chord_type(scale_notes: Sequence[str], degree: int) -> ChordType:
    """Classify the triad on a degree of a scale given as note names."""
    return diatonic_chord_type([Note.parse(n) for n in scale_notes], degree)


def get_diatonic_chord(
    scale_notes: Sequence[str],
    degree: int,
    apply_voicing: bool = True,
) -> list[str]:
    """
    Stack a diatonic triad on a scale given as note names.

    Examples:
        scale = get_scale_notes("C4", "Ionian", 2)
        get_diatonic_chord(scale, 0) == ["C4", "E4", "G4"]
        get_diatonic_chord(scale, 3) == ["C4", "F4", "A4"]
    """
    scale = [Note.parse(n) for n in scale_notes]
    return [str(note) for note in diatonic_chord(scale, degree, apply_voicing)]


@dataclass(frozen=True)
class DiatonicChord:
    """One chord of a key: degree, Roman numeral, quality and voiced notes."""

    degree: int
    numeral: str
    chord_type: ChordType
    notes: tuple[Note, ...]

    def note_names(self) -> list[str]:
        return [str(note) for note in self.notes]


def get_diatonic_chords(
    root: str,
    mode: ScaleMode | str = ScaleMode.IONIAN,
    apply_voicing: bool = True,
) -> list[DiatonicChord]:
    """
    Get the chord on every degree of a scale.

    Diatonic modes stack triads over a two-octave scale. The chromatic
    mode has no diatonic harmony, so each of its 12 degrees gets a
    major chord and no numeral.

    Args:
        root: Root note name (e.g. 'D4')
        mode: Scale mode
        apply_voicing: Whether to apply compact voicing

    Returns:
        One DiatonicChord per scale degree
    """
    scale = Scale(Note.parse(root), parse_mode(mode))

    if scale.is_chromatic:
        return [
            DiatonicChord(degree, "", ChordType.MAJOR, tuple(build_chord(note)))
            for degree, note in enumerate(scale.notes(1))
        ]

    notes = scale.notes(2)
    chords = []
    for degree in range(scale.degree_count):
        chord_type = diatonic_chord_type(notes, degree)
        chords.append(
            DiatonicChord(
                degree=degree,
                numeral=roman_numeral(degree, chord_type),
                chord_type=chord_type,
                notes=tuple(diatonic_chord(notes, degree, apply_voicing)),
            )
        )
    return chords
