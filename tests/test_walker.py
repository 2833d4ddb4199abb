"""Tests for the phase directory walker."""

from pathlib import Path

from phasebook.classroom import DocumentRef, walk_curriculum
from phasebook.schemas import CurriculumConfig

PHASE_0 = "Phase-0-Absolute-Beginnings"
PHASE_2 = "Phase-2-React-Development-Mastery"
PHASE_6 = "Phase-6-Build-Tools-and-Development-Workflow"


class TestWalkCurriculum:

    def test_pairs_in_canonical_then_lexical_order(self, curriculum_root):
        refs = walk_curriculum(curriculum_root)
        assert refs == [
            DocumentRef(PHASE_0, "Core-Syntax-Overview.md"),
            DocumentRef(PHASE_0, "Module-0.1-Development-Environment-Setup.md"),
            DocumentRef(PHASE_0, "Module-0.2-HTML-and-CSS-Basics.md"),
            DocumentRef(PHASE_2, "Module-2.1-React-Intro.md"),
            DocumentRef(PHASE_6, "Module-6.1-Modern-Build-Tools.md"),
        ]

    def test_readme_and_other_files_excluded(self, curriculum_root):
        names = {ref.filename for ref in walk_curriculum(curriculum_root)}
        assert "README.md" not in names
        assert "Draft.md" not in names
        assert "notes.txt" not in names

    def test_directories_matching_pattern_excluded(self, curriculum_root):
        (curriculum_root / PHASE_0 / "Module-0.9-Folder.md").mkdir()
        names = {ref.filename for ref in walk_curriculum(curriculum_root)}
        assert "Module-0.9-Folder.md" not in names

    def test_missing_root_is_empty(self, tmp_path):
        assert walk_curriculum(tmp_path / "nowhere") == []

    def test_missing_phase_logged(self, curriculum_root, caplog):
        with caplog.at_level("INFO"):
            walk_curriculum(curriculum_root)
        assert "Skipping Phase-3-Geographic-Information-Systems" in caplog.text

    def test_order_follows_config_not_filesystem(self, curriculum_root):
        config = CurriculumConfig(phase_directories=(PHASE_6, PHASE_0))
        refs = walk_curriculum(curriculum_root, config)
        assert [ref.phase_directory for ref in refs] == [PHASE_6, PHASE_0, PHASE_0, PHASE_0]

    def test_no_file_visited_twice(self, curriculum_root):
        config = CurriculumConfig(phase_directories=(PHASE_2, PHASE_2))
        refs = walk_curriculum(curriculum_root, config)
        assert refs == [DocumentRef(PHASE_2, "Module-2.1-React-Intro.md")]

    def test_ref_path(self, curriculum_root):
        ref = DocumentRef(PHASE_2, "Module-2.1-React-Intro.md")
        assert ref.path(curriculum_root) == Path(curriculum_root) / PHASE_2 / "Module-2.1-React-Intro.md"
        assert ref.path(curriculum_root).is_file()
