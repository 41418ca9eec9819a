"""Tests for the directory scanner: scan_components()."""

from __future__ import annotations

import os
import re
from pathlib import Path
from unittest.mock import patch

import pytest

from barrelgen.config import DEFAULT_PATTERN
from barrelgen.errors import ScanError
from barrelgen.scanner import scan_components


# === basic scanning ===


class TestScanComponentsBasic:
    def test_empty_directory(self, tmp_path: Path) -> None:
        """Empty directory returns empty list."""
        assert scan_components(tmp_path, DEFAULT_PATTERN) == []

    def test_matches_entry_files(self, tmp_path: Path, add_component) -> None:
        """Files matching the pattern are returned as absolute paths."""
        button = add_component(tmp_path, "Button")
        result = scan_components(tmp_path, DEFAULT_PATTERN)
        assert result == [button.resolve()]
        assert result[0].is_absolute()

    def test_non_matching_files_excluded(self, tmp_path: Path, add_component) -> None:
        """Siblings of entry files that do not match are skipped."""
        add_component(tmp_path, "Button")
        (tmp_path / "components" / "Button" / "Button.test.tsx").write_text("")
        (tmp_path / "components" / "Button" / "index.ts").write_text("")
        result = scan_components(tmp_path, DEFAULT_PATTERN)
        assert [p.name for p in result] == ["index.tsx"]

    def test_directories_never_match(self, tmp_path: Path) -> None:
        """A directory whose path matches the pattern is not returned."""
        (tmp_path / "components" / "Odd" / "index.tsx").mkdir(parents=True)
        assert scan_components(tmp_path, DEFAULT_PATTERN) == []

    def test_accepts_compiled_pattern(self, tmp_path: Path, add_component) -> None:
        add_component(tmp_path, "Button", filename="main.vue")
        result = scan_components(tmp_path, re.compile(r"/main\.vue$"))
        assert len(result) == 1

    def test_sorted_by_name(self, tmp_path: Path, add_component) -> None:
        """Results come back in lexicographic traversal order."""
        for name in ["Zeta", "Alpha", "Mid"]:
            add_component(tmp_path, name)
        result = scan_components(tmp_path, DEFAULT_PATTERN)
        assert [p.parent.name for p in result] == ["Alpha", "Mid", "Zeta"]

    def test_repeated_scans_are_stable(self, tmp_path: Path, add_component) -> None:
        for name in ["B", "A", "C"]:
            add_component(tmp_path, name)
        assert scan_components(tmp_path, DEFAULT_PATTERN) == scan_components(tmp_path, DEFAULT_PATTERN)


# === recursion ===


class TestScanComponentsRecursion:
    def test_recursive_finds_nested(self, tmp_path: Path, add_component) -> None:
        add_component(tmp_path / "deep" / "er", "Button")
        result = scan_components(tmp_path, DEFAULT_PATTERN, recursive=True)
        assert len(result) == 1

    def test_non_recursive_only_top_level(self, tmp_path: Path, add_component) -> None:
        """With recursive=False subdirectories are not entered."""
        (tmp_path / "top.tsx").write_text("")
        add_component(tmp_path, "Button", filename="nested.tsx")
        result = scan_components(tmp_path, r"\.tsx$", recursive=False)
        assert [p.name for p in result] == ["top.tsx"]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_symlink_cycle_skipped(self, tmp_path: Path, add_component) -> None:
        """A symlink pointing back to an ancestor is visited only once."""
        add_component(tmp_path, "Button")
        try:
            os.symlink(tmp_path, tmp_path / "components" / "loop", target_is_directory=True)
        except OSError:
            pytest.skip("cannot create symlinks")
        result = scan_components(tmp_path, DEFAULT_PATTERN)
        assert len(result) == 1

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_symlink_to_parent_inside_component_skipped(self, tmp_path: Path, add_component) -> None:
        """A link from a component back to its group yields no extra components."""
        add_component(tmp_path, "Button")
        try:
            os.symlink(
                tmp_path / "components", tmp_path / "components" / "Button" / "up", target_is_directory=True
            )
        except OSError:
            pytest.skip("cannot create symlinks")
        result = scan_components(tmp_path, DEFAULT_PATTERN)
        assert result == [tmp_path.resolve() / "components" / "Button" / "index.tsx"]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_two_links_to_same_directory_visited_once(self, tmp_path: Path, add_component) -> None:
        outside = tmp_path / "outside"
        add_component(outside, "Button")
        base = tmp_path / "base"
        base.mkdir()
        try:
            os.symlink(outside / "components", base / "a", target_is_directory=True)
            os.symlink(outside / "components", base / "b", target_is_directory=True)
        except OSError:
            pytest.skip("cannot create symlinks")
        result = scan_components(base, DEFAULT_PATTERN)
        assert [p.parent.parent.name for p in result] == ["a"]

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_symlinked_dir_not_followed_when_disabled(self, tmp_path: Path, add_component) -> None:
        outside = tmp_path / "outside"
        add_component(outside, "Button")
        base = tmp_path / "base"
        base.mkdir()
        try:
            os.symlink(outside / "components", base / "linked", target_is_directory=True)
        except OSError:
            pytest.skip("cannot create symlinks")
        assert scan_components(base, DEFAULT_PATTERN, follow_symlinks=False) == []
        assert len(scan_components(base, DEFAULT_PATTERN, follow_symlinks=True)) == 1


# === errors ===


class TestScanComponentsErrors:
    def test_nonexistent_root_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ScanError) as exc_info:
            scan_components(tmp_path / "missing", DEFAULT_PATTERN)
        assert isinstance(exc_info.value.cause, FileNotFoundError)
        assert exc_info.value.code == "SCAN_FAILED"

    def test_unreadable_subdirectory_propagates(self, tmp_path: Path, add_component) -> None:
        """Unlike a best-effort crawl, a read failure anywhere aborts the scan."""
        add_component(tmp_path, "Good")
        (tmp_path / "forbidden").mkdir()

        original_scandir = os.scandir

        def mock_scandir(path):
            if str(path).endswith("forbidden"):
                raise PermissionError("Access denied")
            return original_scandir(path)

        with patch("os.scandir", side_effect=mock_scandir):
            with pytest.raises(ScanError) as exc_info:
                scan_components(tmp_path, DEFAULT_PATTERN)

        assert exc_info.value.directory.endswith("forbidden")
