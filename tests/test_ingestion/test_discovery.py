"""Tests for Go source discovery."""

from __future__ import annotations

from pathlib import Path

from mndlint.config import Settings
from mndlint.ingestion import discover_sources, is_binary


def _names(paths: list[Path], root: Path) -> list[str]:
    return [p.relative_to(root).as_posix() for p in paths]


def test_walks_fixture_repo(fixture_repo: Path) -> None:
    """Skips tests, vendor, gitignored dirs and non-Go files."""
    found = discover_sources([fixture_repo])
    assert _names(found, fixture_repo) == ["main.go", "pkg/util/util.go"]


def test_test_files_included_without_file_ignores(fixture_repo: Path) -> None:
    settings = Settings(ignored_files=[])
    found = discover_sources([fixture_repo], settings)
    assert "main_test.go" in _names(found, fixture_repo)


def test_skip_directories_configurable(fixture_repo: Path) -> None:
    settings = Settings(skip_directories=[])
    found = discover_sources([fixture_repo], settings)
    assert "vendor/lib/lib.go" in _names(found, fixture_repo)
    assert "generated/gen.go" not in _names(found, fixture_repo)


def test_explicit_file_and_dedup(fixture_repo: Path) -> None:
    main = fixture_repo / "main.go"
    found = discover_sources([main, fixture_repo, main])
    assert found.count(main) == 1


def test_explicit_non_go_file_skipped(fixture_repo: Path) -> None:
    assert discover_sources([fixture_repo / "README.txt"]) == []


def test_missing_path_skipped(tmp_path: Path) -> None:
    assert discover_sources([tmp_path / "nope"]) == []


def test_hidden_directories_skipped(tmp_path: Path) -> None:
    hidden = tmp_path / ".cache"
    hidden.mkdir()
    (hidden / "x.go").write_text("package x\n")
    (tmp_path / "y.go").write_text("package y\n")
    assert _names(discover_sources([tmp_path]), tmp_path) == ["y.go"]


def test_binary_go_file_skipped(tmp_path: Path) -> None:
    (tmp_path / "blob.go").write_bytes(b"package x\x00\x01")
    assert is_binary(tmp_path / "blob.go")
    assert discover_sources([tmp_path]) == []


def test_symlink_outside_root_skipped(tmp_path: Path) -> None:
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "x.go").write_text("package x\n")
    root = tmp_path / "root"
    root.mkdir()
    (root / "link").symlink_to(outside, target_is_directory=True)
    assert discover_sources([root]) == []


def test_symlink_loop_walked_once(tmp_path: Path) -> None:
    (tmp_path / "a.go").write_text("package a\n")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.go").write_text("package sub\n")
    (sub / "back").symlink_to(tmp_path, target_is_directory=True)
    assert _names(discover_sources([tmp_path]), tmp_path) == ["a.go", "sub/b.go"]


def test_explicit_file_obeys_ignored_files(fixture_repo: Path) -> None:
    assert discover_sources([fixture_repo / "main_test.go"]) == []


def test_ignored_files_applied_during_walk(tmp_path: Path) -> None:
    gen = tmp_path / "api"
    gen.mkdir()
    (gen / "api.pb.go").write_text("package api\n")
    (gen / "api.go").write_text("package api\n")
    settings = Settings(ignored_files=[r"\.pb\.go$"])
    assert _names(discover_sources([tmp_path], settings), tmp_path) == [
        "api/api.go"
    ]
