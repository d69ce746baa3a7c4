"""Tests for loading documentation units from content directories."""

import logging
from pathlib import Path

import pytest

from doc_xref.core.content import list_units, load_source_file, load_unit
from tests.conftest import COUNTER_README


class TestLoadUnit:
    def test_loads_readme_and_files(self, counter_unit_dir: Path) -> None:
        unit = load_unit(counter_unit_dir)
        assert unit.id == "fhe-counter"
        assert unit.readme == COUNTER_README
        assert [f.name for f in unit.files] == ["FHECounter.sol", "FHECounter.ts"]
        assert [f.language for f in unit.files] == ["solidity", "typescript"]

    def test_contracts_come_first(self, tmp_path: Path) -> None:
        (tmp_path / "README.md").write_text("# x", encoding="utf-8")
        (tmp_path / "a.ts").write_text("a", encoding="utf-8")
        (tmp_path / "Z.sol").write_text("z", encoding="utf-8")
        (tmp_path / "b.sh").write_text("b", encoding="utf-8")
        unit = load_unit(tmp_path)
        assert [f.name for f in unit.files] == ["Z.sol", "a.ts", "b.sh"]

    def test_skips_dotfiles_and_subdirectories(self, counter_unit_dir: Path) -> None:
        (counter_unit_dir / ".DS_Store").write_text("", encoding="utf-8")
        (counter_unit_dir / "nested").mkdir()
        unit = load_unit(counter_unit_dir)
        assert len(unit.files) == 2

    def test_missing_readme_is_empty(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        (tmp_path / "A.sol").write_text("contract A {}", encoding="utf-8")
        with caplog.at_level(logging.WARNING):
            unit = load_unit(tmp_path)
        assert unit.readme == ""
        assert "README not found" in caplog.text

    def test_unknown_extension_is_plain_text(self, tmp_path: Path) -> None:
        (tmp_path / "notes.txt").write_text("n", encoding="utf-8")
        assert load_unit(tmp_path).files[0].language == "text"

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Content directory not found"):
            load_unit(tmp_path / "nope")


class TestLoadSourceFile:
    def test_explicit_language_wins(self, counter_unit_dir: Path) -> None:
        source = load_source_file(counter_unit_dir / "FHECounter.ts", language="javascript")
        assert source.language == "javascript"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="File not found"):
            load_source_file(tmp_path / "missing.sol")


class TestListUnits:
    def test_lists_directories_sorted(self, tmp_path: Path) -> None:
        for name in ("voting", "counter", ".git"):
            (tmp_path / name).mkdir()
        (tmp_path / "index.md").write_text("", encoding="utf-8")
        assert list_units(tmp_path) == ["counter", "voting"]

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            list_units(tmp_path / "content")
