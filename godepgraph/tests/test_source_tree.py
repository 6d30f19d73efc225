import pytest
from pathlib import Path

from godepgraph.errors import WalkError
from godepgraph.source.tree import SourceTree

from conftest import write_tree


class TestSourceTree:
    """Test the read-only directory view."""

    def test_walk_is_sorted_and_relative(self, go_tree: SourceTree):
        assert list(go_tree.walk()) == ["go.mod", "main.go", "sub/a.go"]

    def test_walk_with_suffix(self, go_tree: SourceTree):
        assert list(go_tree.walk(".go")) == ["main.go", "sub/a.go"]

    def test_ignored_directories_are_skipped(self, tmp_path: Path):
        write_tree(tmp_path, {
            ".git/config": "[core]\n",
            ".git/hooks/x.go": "package hooks\n",
            "pkg/x.go": "package pkg\n",
        })

        assert list(SourceTree(str(tmp_path)).walk()) == ["pkg/x.go"]

    def test_custom_ignored_directories(self, tmp_path: Path):
        write_tree(tmp_path, {"vendor/v.go": "package v\n", "m.go": "package m\n"})
        tree = SourceTree(str(tmp_path), ignored_dirs=["vendor"])

        assert list(tree.walk(".go")) == ["m.go"]

    def test_read_returns_bytes(self, go_tree: SourceTree):
        assert go_tree.read("go.mod") == b"module root\n\ngo 1.21\n"

    def test_files_yield_content(self, go_tree: SourceTree):
        files = list(go_tree.files(".go"))

        assert [f.path for f in files] == ["main.go", "sub/a.go"]
        assert files[0].content.startswith(b"package main")
        assert files[0].size == len(files[0].content)

    def test_read_missing_file(self, go_tree: SourceTree):
        with pytest.raises(WalkError):
            go_tree.read("missing.go")

    def test_root_must_be_directory(self, tmp_path: Path):
        with pytest.raises(WalkError):
            SourceTree(str(tmp_path / "nowhere"))
