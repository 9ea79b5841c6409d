#!/usr/bin/env python3
"""
Example: Playing an Instrument Preset.

Loads a built-in preset, prints what each slot sounds, then holds a
modifier button and steps around the circle of fifths the way a
controller would.

Usage:
    python examples/use_presets.py
"""

import tempfile
from pathlib import Path

from chuk_mcp_theory.core import detect_chord
from chuk_mcp_theory.models import InstrumentState
from chuk_mcp_theory.presets import PresetLoader


def show_slots(state: InstrumentState, button_chord: str | None = None) -> None:
    for slot, label in enumerate(state.scale_labels()):
        chord = state.chord_for_slot(slot, button_chord)
        detected = detect_chord(chord)
        numeral = state.chord_label_for_slot(slot, button_chord)
        print(
            f"  {slot}: {label:<3} {numeral:<6} {' '.join(str(n) for n in chord):<16} "
            f"{detected or '?'}"
        )


def main() -> None:
    """Demonstrate presets and slot resolution."""
    print("CHUK Theory Preset Demo")
    print("=" * 40)
    print()

    library_path = Path(__file__).parent.parent / "src/chuk_mcp_theory/presets/library"

    with tempfile.TemporaryDirectory() as tmp:
        loader = PresetLoader(library_path=library_path, project_path=Path(tmp))

        print("Available presets:")
        for meta in loader.list_presets():
            print(f"  {meta.name}: {meta.root} {meta.mode.value} - {meta.description}")
        print()

        preset = loader.get_preset("dorian-pads")
        if preset is None:
            print("dorian-pads preset missing")
            return

        state = preset.to_state()
        print(f"{preset.name} ({state.scale}):")
        show_slots(state)
        print()

        held = preset.modifier_for("a")
        print(f"Holding 'a' ({held.value if held else 'none'}):")
        show_slots(state, held)
        print()

        state = state.step_circle_of_fifths(1)
        print(f"One step clockwise ({state.scale}):")
        show_slots(state)
        print()

        # Customize a copy in the project directory
        dest = loader.copy_to_project("default")
        print(f"Copied default preset to {dest}")


if __name__ == "__main__":
    main()
