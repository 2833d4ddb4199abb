"""Tests for YAML config loading."""

import pytest
from pydantic import ValidationError

from phasebook.schemas import CurriculumConfig, Difficulty
from phasebook.utils import get_available_configs, load_config, load_config_file


class TestLoadConfig:

    def test_bundled_config_matches_defaults(self):
        assert load_config() == CurriculumConfig()

    def test_partial_override(self, tmp_path):
        (tmp_path / "short.yaml").write_text(
            "title: Short Course\n"
            "phase_directories:\n"
            "  - Phase-0-Intro\n"
            "  - Phase-1-Next\n"
            "capitalization_exceptions:\n"
            "  github: GitHub\n",
            encoding="utf-8",
        )
        config = load_config("short", config_dir=tmp_path)
        assert config.title == "Short Course"
        assert config.phase_directories == ("Phase-0-Intro", "Phase-1-Next")
        assert config.capitalization_exceptions == {"github": "GitHub"}
        assert config.default_difficulty == Difficulty.ADVANCED

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config_file(path) == CurriculumConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config("nope", config_dir=tmp_path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("capitalization_exceptions:\n  api: REST\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_config_file(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_config_file(path)

    def test_available_configs(self, tmp_path):
        (tmp_path / "b.yaml").write_text("{}", encoding="utf-8")
        (tmp_path / "a.yaml").write_text("{}", encoding="utf-8")
        (tmp_path / "notes.txt").write_text("", encoding="utf-8")
        assert get_available_configs(tmp_path) == ["a", "b"]
        assert get_available_configs(tmp_path / "missing") == []
