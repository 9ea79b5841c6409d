"""
Preset models - saved instrument configurations.

A preset bundles a starting instrument state with a modifier map that
binds controller buttons to forced chord types. Presets are stored as
YAML and loaded by PresetLoader.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_theory.constants import DEFAULT_OCTAVE, ChordType, ScaleMode
from chuk_mcp_theory.core.chord import parse_chord_type
from chuk_mcp_theory.core.pitch import PitchClass
from chuk_mcp_theory.models.instrument import InstrumentState, coerce_mode, coerce_pitch_class


class InstrumentPreset(BaseModel):
    """
    A named instrument configuration.

    Modifiers map a button name to the chord type it forces while held.
    """

    schema_version: str = Field("preset/v1", alias="schema")
    name: str = Field(..., description="Preset name")
    description: str = Field("", description="Preset description")

    root: PitchClass = Field(PitchClass.C, description="Root pitch class")
    mode: ScaleMode = Field(ScaleMode.IONIAN, description="Scale mode")
    transpose: int = Field(0, description="Global transpose in semitones")
    base_octave: int = Field(DEFAULT_OCTAVE, description="Octave of the scale root")
    voicing: bool = Field(True, description="Apply compact voicing to diatonic chords")

    modifiers: dict[str, ChordType] = Field(
        default_factory=dict,
        description="Button name -> forced chord type",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure preset name is a usable file stem."""
        if not v or not v.replace("_", "").replace("-", "").isalnum():
            raise ValueError(f"Invalid preset name: {v}")
        return v.lower()

    @field_validator("root", mode="before")
    @classmethod
    def validate_root(cls, v: Any) -> Any:
        return coerce_pitch_class(v)

    @field_validator("mode", mode="before")
    @classmethod
    def validate_mode(cls, v: Any) -> Any:
        return coerce_mode(v)

    @field_validator("modifiers", mode="before")
    @classmethod
    def validate_modifiers(cls, v: Any) -> Any:
        """Normalize button names and resolve chord type names."""
        if not isinstance(v, dict):
            return v
        return {str(button).lower(): parse_chord_type(str(ct)) for button, ct in v.items()}

    def to_state(self) -> InstrumentState:
        """Create the starting instrument state."""
        return InstrumentState(
            root=self.root,
            mode=self.mode,
            transpose=self.transpose,
            base_octave=self.base_octave,
            voicing=self.voicing,
        )

    def modifier_for(self, button: str) -> ChordType | None:
        """Get the chord type a button forces, if any."""
        return self.modifiers.get(button.lower())

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "root": self.root.spell(),
            "mode": self.mode.value,
            "transpose": self.transpose,
            "base_octave": self.base_octave,
            "voicing": self.voicing,
            "modifiers": {button: ct.value for button, ct in self.modifiers.items()},
        }


class PresetMetadata(BaseModel):
    """Lightweight metadata for listing presets."""

    name: str
    description: str
    root: str
    mode: ScaleMode

    model_config = {"frozen": True}

    @classmethod
    def from_preset(cls, preset: InstrumentPreset) -> PresetMetadata:
        """Create metadata from a preset."""
        return cls(
            name=preset.name,
            description=preset.description,
            root=preset.root.spell(),
            mode=preset.mode,
        )
