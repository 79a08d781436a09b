"""Tests for XML file discovery."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from wowui_xml_lint.domain.errors import TargetDirectoryNotFoundError
from wowui_xml_lint.infrastructure.discovery import discover_xml_files


def _touch(root: Path, *relative: str) -> None:
    for rel in relative:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("<Ui/>", encoding="utf-8")


class TestDiscoverXmlFiles:
    def test_finds_xml_only(self, tmp_path: Path):
        _touch(tmp_path, "Main.xml", "Main.lua", "LayoutLedger.toc")
        assert discover_xml_files(tmp_path) == [tmp_path / "Main.xml"]

    def test_skips_libs_at_any_depth(self, tmp_path: Path):
        _touch(
            tmp_path,
            "Main.xml",
            "Libs/AceGUI/AceGUI.xml",
            "UI/Panel.xml",
            "UI/Libs/Embedded.xml",
        )
        assert discover_xml_files(tmp_path) == [
            tmp_path / "Main.xml",
            tmp_path / "UI" / "Panel.xml",
        ]

    def test_depth_first_name_order(self, tmp_path: Path):
        _touch(tmp_path, "b.xml", "a/z.xml", "a/y.xml", "c/x.xml")
        assert discover_xml_files(tmp_path) == [
            tmp_path / "a" / "y.xml",
            tmp_path / "a" / "z.xml",
            tmp_path / "b.xml",
            tmp_path / "c" / "x.xml",
        ]

    def test_custom_exclusions_and_extension(self, tmp_path: Path):
        _touch(tmp_path, "A.xml", "vendor/B.xml", "C.XML")
        assert discover_xml_files(tmp_path, excluded_dirs=["vendor"], extension=".XML") == [
            tmp_path / "C.XML"
        ]

    def test_empty_directory(self, tmp_path: Path):
        assert discover_xml_files(tmp_path) == []

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(TargetDirectoryNotFoundError, match="LayoutLedger directory not found"):
            discover_xml_files(tmp_path / "LayoutLedger")

    def test_file_instead_of_directory(self, tmp_path: Path):
        _touch(tmp_path, "Main.xml")
        with pytest.raises(TargetDirectoryNotFoundError):
            discover_xml_files(tmp_path / "Main.xml")

    def test_symlinked_directory_loop_is_not_followed(self, tmp_path: Path):
        _touch(tmp_path, "Main.xml", "UI/Panel.xml")
        try:
            (tmp_path / "UI" / "back").symlink_to(tmp_path, target_is_directory=True)
        except OSError:
            pytest.skip("symlinks not supported here")
        assert discover_xml_files(tmp_path) == [
            tmp_path / "Main.xml",
            tmp_path / "UI" / "Panel.xml",
        ]

    def test_unlistable_directory_is_skipped(self, tmp_path: Path, monkeypatch, caplog):
        _touch(tmp_path, "Main.xml", "Locked/Hidden.xml", "UI/Panel.xml")
        locked = tmp_path / "Locked"
        real_iterdir = Path.iterdir

        def iterdir(self):
            if self == locked:
                raise PermissionError(13, "Permission denied", str(self))
            return real_iterdir(self)

        monkeypatch.setattr(Path, "iterdir", iterdir)
        with caplog.at_level(logging.WARNING, logger="wowui_xml_lint.infrastructure.discovery"):
            found = discover_xml_files(tmp_path)

        assert found == [tmp_path / "Main.xml", tmp_path / "UI" / "Panel.xml"]
        assert "Cannot list" in caplog.text
