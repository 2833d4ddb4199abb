"""
Config loader utility for Phasebook.

Loads YAML curriculum configuration from the config/ directory.
"""

from pathlib import Path
from typing import Any
import yaml

from phasebook.schemas import CurriculumConfig


# Default config directory (relative to project root)
CONFIG_DIR = Path(__file__).parent.parent.parent / "config"


def load_config_file(file_path: Path) -> CurriculumConfig:
    """
    Load a curriculum configuration from an explicit YAML path.

    Keys missing from the file keep their defaults.

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If YAML parsing fails
        pydantic.ValidationError: If values don't validate
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Curriculum config not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        raw: dict[str, Any] = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Curriculum config must be a mapping: {file_path}")
    return CurriculumConfig(**raw)


def load_config(name: str = "curriculum", config_dir: Path | None = None) -> CurriculumConfig:
    """
    Load a curriculum configuration by name.

    Args:
        name: Config name without .yaml extension (e.g., "curriculum")
        config_dir: Optional custom config directory

    Returns:
        Validated CurriculumConfig
    """
    dir_path = config_dir or CONFIG_DIR
    return load_config_file(dir_path / f"{name}.yaml")


def get_available_configs(config_dir: Path | None = None) -> list[str]:
    """List config names (without .yaml extension)."""
    dir_path = config_dir or CONFIG_DIR
    if not dir_path.exists():
        return []
    return sorted(p.stem for p in dir_path.glob("*.yaml"))
