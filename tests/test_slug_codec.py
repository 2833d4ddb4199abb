"""Tests for the filename <-> slug codec."""

import pytest

from phasebook.schemas import CurriculumConfig
from phasebook.utils import SlugCodec, decode_slug, encode_filename
from phasebook.utils.slug_codec import capitalize_word, strip_extension

CONVENTION_FILENAMES = [
    "Module-0.1-Development-Environment-Setup.md",
    "Module-0.2-HTML-and-CSS-Basics.md",
    "Module-1.3-JavaScript-Fundamentals.md",
    "Module-3.2-GIS-Data-Formats.md",
    "Module-6.1-Modern-Build-Tools.md",
    "Module-7.4-CI-CD-with-GitHub-Actions.md",
    "Module-10.12-Advanced-API-Design.md",
    "Module-4.1-3D-Scenes.md",
    "Module-2.1.md",
    "Core-Syntax-Overview.md",
]


@pytest.fixture
def codec():
    return SlugCodec.from_config(CurriculumConfig())


class TestEncode:

    def test_example(self, codec):
        assert codec.encode("Module-0.1-Development-Environment-Setup.md") == \
            "module-0-1-development-environment-setup"

    def test_overview_document(self, codec):
        assert codec.encode("Core-Syntax-Overview.md") == "core-syntax-overview"

    def test_without_extension_keeps_module_number(self, codec):
        assert codec.encode("Module-0.1-Intro") == "module-0-1-intro"

    def test_only_last_extension_stripped(self):
        assert strip_extension("Module-0.1-Intro.md") == "Module-0.1-Intro"
        assert strip_extension("archive.tar.gz") == "archive.tar"

    def test_deterministic(self, codec):
        name = "Module-5.2-Database-Design.md"
        assert codec.encode(name) == codec.encode(name)


class TestDecode:

    def test_example(self, codec):
        assert codec.decode("module-6-1-modern-build-tools") == "Module-6.1-Modern-Build-Tools.md"

    def test_overview_bypasses_general_rule(self, codec):
        assert codec.decode("core-syntax-overview") == "Core-Syntax-Overview.md"

    def test_exception_table(self, codec):
        assert codec.decode("module-0-2-html-and-css-basics") == "Module-0.2-HTML-And-CSS-Basics.md"
        assert codec.decode("module-7-4-ci-cd-with-devops") == "Module-7.4-CI-CD-With-DevOps.md"

    def test_unlisted_compound_word_is_lossy(self, codec):
        # "GitHub" is not in the table, so only the first letter comes back
        assert codec.decode("module-7-4-github-actions") == "Module-7.4-Github-Actions.md"

    def test_no_title_words(self, codec):
        assert codec.decode("module-2-1") == "Module-2.1.md"

    def test_non_module_slug_falls_back(self, codec):
        assert codec.decode("cheat-sheet") == "cheat-sheet.md"
        assert codec.decode("module-intro-setup") == "module-intro-setup.md"

    def test_injected_exceptions(self):
        codec = SlugCodec(exceptions={"github": "GitHub"})
        assert codec.decode("module-7-4-github-actions") == "Module-7.4-GitHub-Actions.md"

    def test_capitalize_word(self):
        assert capitalize_word("tools", {}) == "Tools"
        assert capitalize_word("3d", {}) == "3d"
        assert capitalize_word("", {}) == ""
        assert capitalize_word("npm", {"npm": "NPM"}) == "NPM"

    def test_capitalize_word_keeps_unreversible_letter(self):
        assert capitalize_word("ßeta", {}) == "ßeta"


class TestRoundTrip:

    @pytest.mark.parametrize("filename", CONVENTION_FILENAMES)
    def test_slug_round_trip(self, codec, filename):
        slug = codec.encode(filename)
        assert codec.encode(codec.decode(slug)) == slug

    def test_slug_round_trip_with_eszett(self, codec):
        slug = codec.encode("Module-1.2-ßeta.md")
        assert slug == "module-1-2-ßeta"
        assert codec.decode(slug) == "Module-1.2-ßeta.md"
        assert codec.encode(codec.decode(slug)) == slug

    @pytest.mark.parametrize("filename", [
        "Module-0.1-Development-Environment-Setup.md",
        "Module-1.3-JavaScript-Fundamentals.md",
        "Module-6.1-Modern-Build-Tools.md",
        "Core-Syntax-Overview.md",
    ])
    def test_filename_round_trip_for_known_words(self, codec, filename):
        assert codec.decode(codec.encode(filename)) == filename


class TestModuleHelpers:

    def test_default_config_helpers(self):
        assert encode_filename("Module-6.1-Modern-Build-Tools.md") == "module-6-1-modern-build-tools"
        assert decode_slug("module-6-1-modern-build-tools") == "Module-6.1-Modern-Build-Tools.md"

    def test_config_changes_overview(self):
        config = CurriculumConfig(overview_document="Cheat-Sheet.md", overview_id="cheat-sheet")
        assert decode_slug("cheat-sheet", config) == "Cheat-Sheet.md"
