"""
Preset loader - discovers and loads instrument presets.

Presets can come from:
1. Built-in library (shipped with package)
2. Project presets (user's project/presets directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_theory.constants import ErrorMessages
from chuk_mcp_theory.models.preset import InstrumentPreset, PresetMetadata

logger = logging.getLogger(__name__)


class PresetLoader:
    """
    Discovers and loads preset definitions.

    Presets are loaded from YAML files in the library and project directories.
    Project presets override library presets with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the preset loader.

        Args:
            library_path: Path to built-in preset library
            project_path: Path to project presets directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, InstrumentPreset] = {}

    def list_presets(self) -> list[PresetMetadata]:
        """
        List all available presets.

        Returns presets from both library and project, with project
        presets taking precedence.
        """
        presets: dict[str, PresetMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                preset = self._load_preset_file(path)
                if preset:
                    presets[preset.name] = PresetMetadata.from_preset(preset)

        return list(presets.values())

    def get_preset(self, name: str) -> InstrumentPreset | None:
        """
        Get a preset by name.

        Project presets take precedence over library presets.

        Args:
            name: Preset name

        Returns:
            InstrumentPreset if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        candidates = [self.library_path / f"{name}.yaml"]
        if self.project_path:
            candidates.insert(0, self.project_path / f"{name}.yaml")

        for path in candidates:
            if path.exists():
                preset = self._load_preset_file(path)
                if preset:
                    self._cache[name] = preset
                    return preset

        return None

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library preset to the project for customization.

        Args:
            name: Preset name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError(ErrorMessages.NO_PROJECT_PATH)

        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(ErrorMessages.PRESET_EXISTS.format(name=name))

        dest_file.write_text(library_file.read_text())

        # Invalidate cache
        self._cache.pop(name, None)

        return dest_file

    def save_preset(self, preset: InstrumentPreset) -> Path:
        """
        Write a preset to the project directory.

        Args:
            preset: The preset to save

        Returns:
            Path of the written file
        """
        if not self.project_path:
            raise ValueError(ErrorMessages.NO_PROJECT_PATH)

        self.project_path.mkdir(parents=True, exist_ok=True)
        path = self.project_path / f"{preset.name}.yaml"
        with open(path, "w") as f:
            yaml.safe_dump(preset.to_yaml_dict(), f, sort_keys=False, allow_unicode=True)

        self._cache[preset.name] = preset
        return path

    def _load_preset_file(self, path: Path) -> InstrumentPreset | None:
        """Load a preset from a YAML file, skipping unreadable or invalid files."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse_preset(data)
        except (OSError, yaml.YAMLError, ValidationError, ValueError) as e:
            logger.warning(f"Skipping preset file {path}: {e}")
            return None

    def _parse_preset(self, data: dict[str, Any] | None) -> InstrumentPreset:
        """Parse preset from YAML data."""
        if not isinstance(data, dict):
            raise ValueError("Preset file must contain a mapping")
        return InstrumentPreset.model_validate(data)

    def clear_cache(self) -> None:
        """Clear the preset cache."""
        self._cache.clear()
