#!/usr/bin/env python3
"""
Example: Exploring the Theory Engine.

Walks through scale spelling, chords and inversions, the diatonic chords
of a few keys, and naming chords from sounding notes.

Usage:
    python examples/explore_theory.py
"""

from chuk_mcp_theory.constants import ScaleMode
from chuk_mcp_theory.core import (
    apply_generic_inversion,
    detect_chord_name,
    get_chord_notes,
    get_diatonic_chords,
    get_scale_notes,
    transpose,
)


def main() -> None:
    """Demonstrate the core engine."""
    print("CHUK Theory Engine Demo")
    print("=" * 40)
    print()

    # Scales are spelled one letter per degree
    print("Scales:")
    for root, mode in [("D4", "Ionian"), ("F4", "Ionian"), ("Gb4", "Ionian"), ("A3", "Aeolian")]:
        print(f"  {root} {mode}: {' '.join(get_scale_notes(root, mode))}")
    print(f"  C4 Chromatic: {' '.join(get_scale_notes('C4', ScaleMode.CHROMATIC))}")
    print()

    # Chords and generic inversion
    print("Chords:")
    for steps in (-1, 0, 1, 2):
        notes = get_chord_notes("C4", "maj", steps)
        print(f"  C major, {steps:+d} steps: {' '.join(notes):<12} -> {detect_chord_name(notes)}")
    seventh = get_chord_notes("A3", "min7")
    print(f"  A min7: {' '.join(seventh)} -> {detect_chord_name(seventh)}")
    print(f"  inverted twice: {' '.join(apply_generic_inversion(seventh, 2))}")
    print()

    # Diatonic chords with compact voicing
    for root, mode in [("C4", ScaleMode.IONIAN), ("D4", ScaleMode.DORIAN)]:
        print(f"Diatonic chords of {root[:-1]} {mode.value}:")
        for chord in get_diatonic_chords(root, mode):
            names = chord.note_names()
            print(f"  {chord.numeral:<5} {' '.join(names):<12} {detect_chord_name(names)}")
        print()

    # Transposition re-spells with sharps
    print("Transpose:")
    melody = ["E4", "G4", "Bb4", "C5"]
    print(f"  {' '.join(melody)} up 5 -> {' '.join(transpose(n, 5) for n in melody)}")


if __name__ == "__main__":
    main()
