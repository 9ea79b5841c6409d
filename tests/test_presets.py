"""
Tests for instrument presets.

Tests cover:
- InstrumentPreset validation and conversion
- PresetLoader discovery, project overrides and caching
- Copying and saving presets to a project directory
"""

import logging
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from chuk_mcp_theory.constants import ChordType, ScaleMode
from chuk_mcp_theory.core import PitchClass
from chuk_mcp_theory.models import InstrumentPreset, PresetMetadata
from chuk_mcp_theory.presets import PresetLoader


class TestInstrumentPreset:
    """Tests for the preset model."""

    def test_minimal(self) -> None:
        preset = InstrumentPreset(name="basic")
        assert preset.schema_version == "preset/v1"
        assert preset.root == PitchClass.C
        assert preset.mode == ScaleMode.IONIAN
        assert preset.modifiers == {}

    def test_schema_alias(self) -> None:
        preset = InstrumentPreset.model_validate({"schema": "preset/v2", "name": "x"})
        assert preset.schema_version == "preset/v2"

    def test_name_normalized(self) -> None:
        assert InstrumentPreset(name="My-Preset_2").name == "my-preset_2"

    @pytest.mark.parametrize("name", ["", "bad name", "a/b", "x.yaml"])
    def test_invalid_name(self, name: str) -> None:
        with pytest.raises(ValidationError):
            InstrumentPreset(name=name)

    def test_modifiers_normalized(self) -> None:
        preset = InstrumentPreset(name="p", modifiers={"A": "MIN7", "x": 7})
        assert preset.modifiers == {"a": ChordType.MINOR_7, "x": ChordType.DOMINANT_7}
        assert preset.modifier_for("A") == ChordType.MINOR_7
        assert preset.modifier_for("b") is None

    def test_invalid_modifier(self) -> None:
        with pytest.raises(ValidationError):
            InstrumentPreset(name="p", modifiers={"a": "add9"})

    def test_to_state(self) -> None:
        preset = InstrumentPreset(name="p", root="Eb", mode="aeolian", transpose=-2, voicing=False)
        state = preset.to_state()
        assert state.root == PitchClass.Ds
        assert state.mode == ScaleMode.AEOLIAN
        assert state.transpose == -2
        assert state.voicing is False

    def test_to_yaml_dict(self) -> None:
        preset = InstrumentPreset(name="p", root="Bb", modifiers={"x": "7"})
        data = preset.to_yaml_dict()
        assert data["schema"] == "preset/v1"
        assert data["root"] == "A#"
        assert data["mode"] == "Ionian"
        assert data["modifiers"] == {"x": "7"}
        assert InstrumentPreset.model_validate(data) == preset

    def test_metadata(self) -> None:
        preset = InstrumentPreset(name="p", description="desc", root="G", mode="Mixolydian")
        meta = PresetMetadata.from_preset(preset)
        assert meta.name == "p"
        assert meta.description == "desc"
        assert meta.root == "G"
        assert meta.mode == ScaleMode.MIXOLYDIAN


class TestPresetLoader:
    """Tests for PresetLoader."""

    def test_list_library(self, library_path: Path) -> None:
        loader = PresetLoader(library_path)
        names = [p.name for p in loader.list_presets()]
        assert names == ["chromatic-lab", "default", "dorian-pads"]

    def test_default_library_path(self) -> None:
        loader = PresetLoader()
        assert loader.get_preset("default") is not None

    def test_get_preset(self, library_path: Path) -> None:
        loader = PresetLoader(library_path)
        preset = loader.get_preset("dorian-pads")
        assert preset is not None
        assert preset.root == PitchClass.D
        assert preset.mode == ScaleMode.DORIAN
        assert preset.base_octave == 3
        assert preset.modifier_for("x") == ChordType.DOMINANT_7

    def test_get_missing(self, library_path: Path) -> None:
        assert PresetLoader(library_path).get_preset("nope") is None

    def test_cached(self, library_path: Path) -> None:
        loader = PresetLoader(library_path)
        assert loader.get_preset("default") is loader.get_preset("default")
        loader.clear_cache()
        assert loader._cache == {}

    def test_project_overrides_library(self, library_path: Path, temp_dir: Path) -> None:
        (temp_dir / "default.yaml").write_text("name: default\nroot: G\nmode: Lydian\n")
        loader = PresetLoader(library_path, temp_dir)

        preset = loader.get_preset("default")
        assert preset is not None
        assert preset.root == PitchClass.G

        listed = {p.name: p for p in loader.list_presets()}
        assert len(listed) == 3
        assert listed["default"].mode == ScaleMode.LYDIAN

    def test_invalid_files_skipped(
        self, library_path: Path, temp_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        (temp_dir / "broken.yaml").write_text("name: [unclosed\n")
        (temp_dir / "listy.yaml").write_text("- a\n- b\n")
        (temp_dir / "badmode.yaml").write_text("name: badmode\nmode: bebop\n")
        loader = PresetLoader(library_path, temp_dir)

        with caplog.at_level(logging.WARNING):
            names = [p.name for p in loader.list_presets()]
            assert loader.get_preset("badmode") is None

        assert "broken" not in names
        assert "badmode" not in names
        assert "Skipping preset file" in caplog.text

    def test_copy_to_project(self, library_path: Path, temp_dir: Path) -> None:
        project = temp_dir / "presets"
        loader = PresetLoader(library_path, project)

        dest = loader.copy_to_project("default")
        assert dest == project / "default.yaml"
        assert dest.exists()

        with pytest.raises(ValueError, match="already exists"):
            loader.copy_to_project("default")

        assert loader.copy_to_project("nope") is None

    def test_copy_without_project(self, library_path: Path) -> None:
        with pytest.raises(ValueError, match="No project path"):
            PresetLoader(library_path).copy_to_project("default")

    def test_save_preset(self, library_path: Path, temp_dir: Path) -> None:
        preset = InstrumentPreset(
            name="my-keys",
            description="Minor keys",
            root="A",
            mode="Aeolian",
            modifiers={"a": "maj"},
        )
        path = PresetLoader(library_path, temp_dir).save_preset(preset)

        data = yaml.safe_load(path.read_text())
        assert data["name"] == "my-keys"
        assert data["mode"] == "Aeolian"

        reloaded = PresetLoader(library_path, temp_dir).get_preset("my-keys")
        assert reloaded == preset

    def test_save_without_project(self, library_path: Path) -> None:
        with pytest.raises(ValueError, match="No project path"):
            PresetLoader(library_path).save_preset(InstrumentPreset(name="x"))
