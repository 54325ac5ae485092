"""Unit tests for makefile adapter."""

from pathlib import Path

import pytest

from drush_make_parser.adapters.makefile_adapter import MakefileAdapter, load_top_level
from drush_make_parser.core.exceptions import ManifestLoadError


class TestLoadTopLevel:
    def test_core_and_api(self) -> None:
        text = "; comment\ncore = 7.x\napi = 2\nprojects[views] = 3.1\n"

        top_level = load_top_level(text)

        assert top_level["core"] == "7.x"
        assert top_level["api"] == "2"

    def test_quoted_value(self) -> None:
        assert load_top_level('core = "7.x"\n')["core"] == "7.x"

    def test_repeated_keys_and_free_text(self) -> None:
        """繰り返しキーや値の無い行があっても読み込めること."""
        text = (
            "core = 7.x\n"
            'projects[x][patch][] = "http://example.com/1.patch"\n'
            'projects[x][patch][] = "http://example.com/2.patch"\n'
            "some free text\n"
            "projects[]=\n"
        )

        top_level = load_top_level(text)

        assert top_level["core"] == "7.x"
        assert "some free text" not in top_level

    def test_indented_line_after_free_text(self) -> None:
        """値の無い行の後にインデント行があっても読み込めること."""
        text = "core = 7.x\nsome free text\n  projects[views] = 3.1\n    api = 2\n"

        top_level = load_top_level(text)

        assert top_level["core"] == "7.x"
        assert top_level["projects[views]"] == "3.1"
        assert top_level["api"] == "2"

    def test_inline_comment_stripped(self) -> None:
        """行末の ; コメントが値に含まれないこと."""
        top_level = load_top_level("core = 7.x ; pinned\napi = 2 ;\n")

        assert top_level["core"] == "7.x"
        assert top_level["api"] == "2"

    def test_percent_in_value(self) -> None:
        """URL中の % が補間されないこと."""
        text = 'core = 7.x\nprojects[x][patch][] = "http://example.com/a%20b.patch"\n'

        assert load_top_level(text)["projects[x][patch][]"] == "http://example.com/a%20b.patch"


class TestMakefileAdapter:
    def test_read(self, tmp_path: Path) -> None:
        makefile = tmp_path / "site.make"
        makefile.write_text("core = 7.x\nprojects[views] = 3.1\n", encoding="utf-8")

        source = MakefileAdapter(makefile).read()

        assert source.path == makefile
        assert source.text == "core = 7.x\nprojects[views] = 3.1\n"
        assert source.top_level["core"] == "7.x"

    def test_read_nonexistent_file(self, tmp_path: Path) -> None:
        """存在しないファイルは ManifestLoadError になること."""
        with pytest.raises(ManifestLoadError, match="file not found") as exc_info:
            MakefileAdapter(tmp_path / "missing.make").read()

        assert exc_info.value.path == str(tmp_path / "missing.make")

    def test_read_undecodable_file(self, tmp_path: Path) -> None:
        makefile = tmp_path / "broken.make"
        makefile.write_bytes(b"core = 7.x\n\xff\xfe\xfa\n")

        with pytest.raises(ManifestLoadError, match="Failed to load makefile"):
            MakefileAdapter(makefile).read()

    def test_read_directory(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestLoadError):
            MakefileAdapter(tmp_path).read()

    def test_validate(self, tmp_path: Path) -> None:
        with_core = tmp_path / "with_core.make"
        with_core.write_text("core = 7.x\n", encoding="utf-8")
        without_core = tmp_path / "without_core.make"
        without_core.write_text("projects[views] = 3.1\n", encoding="utf-8")

        adapter = MakefileAdapter(with_core)
        assert adapter.validate(adapter.read()) is True

        adapter = MakefileAdapter(without_core)
        assert adapter.validate(adapter.read()) is False
