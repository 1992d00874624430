"""
Copyright (c) 2024 Idiap Research Institute
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

"""
Centralized configuration management for digital_geometry.

This module provides a single source of truth for:
- Project paths (config, results)
- Configuration file loading (settings, named reference polytopes)
- Logging setup for scripts
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_SETTINGS = {
    "logging": {
        "level": "WARNING",
        "format": "%(asctime)s %(name)s %(levelname)s: %(message)s",
    },
}


class Config:
    """Centralized configuration management for digital_geometry."""

    _project_root: Optional[Path] = None

    @classmethod
    def get_project_root(cls) -> Path:
        """
        Get the project root directory.

        This method calculates the project root once and caches it.
        The project root is determined by going up from this file's location
        until we find the directory containing 'src/digital_geometry'.

        Returns:
            Path: The project root directory
        """
        if cls._project_root is None:
            # This file is in: src/digital_geometry/core/config.py
            # So project root is 3 levels up: ../../../
            cls._project_root = Path(__file__).resolve().parents[3]

        return cls._project_root

    @classmethod
    def get_config_dir(cls) -> Path:
        """Get the config directory path."""
        return cls.get_project_root() / "config"

    @classmethod
    def get_results_dir(cls) -> Path:
        """Get the results directory path."""
        return cls.get_project_root() / "results"

    @classmethod
    def get_settings_path(cls) -> Path:
        """Get the general settings file path."""
        return cls.get_config_dir() / "settings.yaml"

    @classmethod
    def get_polytopes_config_path(cls) -> Path:
        """Get the reference polytopes configuration file path."""
        return cls.get_config_dir() / "polytopes.yaml"

    @classmethod
    def load_settings(cls) -> Dict[str, Any]:
        """
        Load the general settings, falling back to defaults.

        Missing sections and keys are filled from DEFAULT_SETTINGS, so the
        settings file may be absent or only override a few entries.

        Returns:
            Dict containing the merged settings
        """
        settings = {key: dict(value) for key, value in DEFAULT_SETTINGS.items()}
        settings_path = cls.get_settings_path()
        if not settings_path.exists():
            return settings

        with open(settings_path, "r") as file:
            loaded = yaml.safe_load(file) or {}

        for section, values in loaded.items():
            if isinstance(values, dict):
                settings.setdefault(section, {}).update(values)
            else:
                settings[section] = values
        return settings

    @classmethod
    def load_polytope_config(cls, object_name: str) -> Dict[str, Any]:
        """
        Load configuration for a specific reference polytope.

        Args:
            object_name: Name of the polytope to load config for

        Returns:
            Dict containing 'vertices' and optionally 'cuts'

        Raises:
            FileNotFoundError: If config file doesn't exist
            KeyError: If object_name not found in config
        """
        config_path = cls.get_polytopes_config_path()

        with open(config_path, "r") as file:
            config = yaml.safe_load(file)

        if object_name not in config:
            raise KeyError(f"Object '{object_name}' not found in polytopes config")

        return config[object_name]

    @classmethod
    def list_polytopes(cls) -> list:
        """Names of all reference polytopes in the configuration file."""
        with open(cls.get_polytopes_config_path(), "r") as file:
            config = yaml.safe_load(file) or {}
        return sorted(config)

    @classmethod
    def build_polytope(cls, object_name: str):
        """
        Build a reference polytope from its configuration entry.

        Each cut entry is either {'normal': [...], 'offset': b} or
        {'axis': k, 'positive': bool, 'offset': b}.

        Args:
            object_name: Name of the polytope in polytopes.yaml

        Returns:
            BoundedLatticePolytope: the polytope with all its cuts applied
        """
        from ..geometry import BoundedLatticePolytope

        entry = cls.load_polytope_config(object_name)
        polytope = BoundedLatticePolytope(vertices=entry["vertices"])
        for cut in entry.get("cuts", []):
            if "axis" in cut:
                polytope.cut_axis(cut["axis"], cut.get("positive", True), cut["offset"])
            else:
                polytope.cut(cut["normal"], cut["offset"])
        return polytope

    @classmethod
    def configure_logging(cls, level: Optional[str] = None) -> None:
        """
        Configure the root logger for scripts.

        Library modules only create loggers; handlers are installed here.

        Args:
            level: Overrides the level read from settings.yaml
        """
        log_settings = cls.load_settings()["logging"]
        logging.basicConfig(
            level=(level or log_settings["level"]).upper(),
            format=log_settings["format"],
        )

    @classmethod
    def ensure_directories_exist(cls) -> None:
        """Create necessary directories if they don't exist."""
        directories = [
            cls.get_config_dir(),
            cls.get_results_dir(),
        ]

        for directory in directories:
            directory.mkdir(parents=True, exist_ok=True)

    @classmethod
    def get_info(cls) -> Dict[str, str]:
        """
        Get configuration information for debugging.

        Returns:
            Dict with current path configurations
        """
        return {
            "project_root": str(cls.get_project_root()),
            "config_dir": str(cls.get_config_dir()),
            "results_dir": str(cls.get_results_dir()),
            "settings": str(cls.get_settings_path()),
            "polytopes_config": str(cls.get_polytopes_config_path()),
        }
