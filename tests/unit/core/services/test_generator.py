from __future__ import annotations

"""
Unit tests for the module tree generator.

Verifies the on-disk layout, module contents, deterministic output and the
destructive reset of a pre-existing output directory.
"""

import os
from pathlib import Path
from typing import Dict

import pytest

from deeptree.core.services.generator import (
    child_labels,
    generate_tree,
    render_branch,
    render_index,
    render_leaf,
)
from deeptree.domain.errors import InvalidDepthError


def _snapshot(root: Path) -> Dict[str, bytes]:
    """Map every file's relative path to its bytes."""
    out: Dict[str, bytes] = {}
    for dirpath, _, files in os.walk(root):
        for name in files:
            full = Path(dirpath) / name
            out[full.relative_to(root).as_posix()] = full.read_bytes()
    return out

# -----------------------------------------------------------------------------
# CONTENT RENDERING
# -----------------------------------------------------------------------------

def test_child_labels_order() -> None:
    assert child_labels() == ["f1", "f2", "f3", "f4", "f5", "f6", "f7", "f8", "f9"]


def test_render_index_references_nine_children_in_order() -> None:
    """TC-01: Index imports f1.js..f9.js, one per line."""
    lines = render_index().splitlines()
    assert lines == [f'import "./f{i}.js"' for i in range(1, 10)]
    assert render_index().endswith("\n")


def test_render_branch_and_leaf() -> None:
    assert render_branch("f3") == 'import "./f3/index.js"\n'
    assert render_leaf(4) == "// Leaf file at depth 4\n"

# -----------------------------------------------------------------------------
# TREE LAYOUT
# -----------------------------------------------------------------------------

def test_generate_depth_one_creates_only_leaves(tmp_path: Path) -> None:
    """TC-02: Depth 1 is a single directory with index + 9 leaves."""
    root = tmp_path / "out"
    generate_tree(1, str(root))

    entries = sorted(p.name for p in root.iterdir())
    assert entries == sorted(["index.js"] + [f"f{i}.js" for i in range(1, 10)])
    assert all(p.is_file() for p in root.iterdir())
    assert (root / "f9.js").read_text(encoding="utf-8") == "// Leaf file at depth 1\n"


def test_generate_depth_two_layout(depth_two_tree: Path) -> None:
    """TC-03: Every non-leaf module references its paired subdirectory's index."""
    root = depth_two_tree

    for label in child_labels():
        assert (root / f"{label}.js").read_text(encoding="utf-8") == f'import "./{label}/index.js"\n'
        sub = root / label
        assert sub.is_dir()
        assert (sub / "index.js").read_text(encoding="utf-8") == render_index()
        for leaf in child_labels():
            assert (sub / f"{leaf}.js").read_text(encoding="utf-8") == "// Leaf file at depth 2\n"
        assert not any(p.is_dir() for p in sub.iterdir())


def test_generate_file_count_matches_closed_form(tmp_path: Path) -> None:
    """TC-04: Depth 3 produces 910 files."""
    root = tmp_path / "d3"
    generate_tree(3, str(root))

    assert len(_snapshot(root)) == 910


def test_leaf_content_differs_from_branch_content(tmp_path: Path) -> None:
    """TC-05: Deepest modules carry a depth marker, not an import."""
    root = tmp_path / "d3"
    generate_tree(3, str(root))

    leaf = (root / "f2" / "f7" / "f5.js").read_text(encoding="utf-8")
    branch = (root / "f2" / "f7.js").read_text(encoding="utf-8")
    assert leaf == "// Leaf file at depth 3\n"
    assert "import" not in leaf
    assert branch == 'import "./f7/index.js"\n'

# -----------------------------------------------------------------------------
# RE-GENERATION AND ERRORS
# -----------------------------------------------------------------------------

def test_regeneration_is_identical_to_fresh_run(tmp_path: Path) -> None:
    """TC-06: Old contents are removed; the result matches a fresh tree."""
    fresh = tmp_path / "fresh"
    reused = tmp_path / "reused"
    generate_tree(2, str(fresh))

    generate_tree(3, str(reused))
    (reused / "stale.txt").write_text("old", encoding="utf-8")
    generate_tree(2, str(reused))

    assert _snapshot(reused) == _snapshot(fresh)


def test_existing_directory_logs_warning(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    root = tmp_path / "out"
    root.mkdir()

    with caplog.at_level("WARNING"):
        generate_tree(1, str(root))

    assert any("already exists" in r.getMessage() for r in caplog.records)


def test_invalid_depth_leaves_existing_directory_untouched(tmp_path: Path) -> None:
    """TC-07: Depth is validated before the output directory is reset."""
    root = tmp_path / "keep"
    root.mkdir()
    (root / "data.txt").write_text("keep me", encoding="utf-8")

    with pytest.raises(InvalidDepthError):
        generate_tree(0, str(root))

    assert (root / "data.txt").read_text(encoding="utf-8") == "keep me"


def test_generate_creates_missing_parents(tmp_path: Path) -> None:
    root = tmp_path / "a" / "b" / "tree"
    generate_tree(1, str(root))
    assert (root / "index.js").is_file()


def test_generate_reports_whether_output_was_replaced(tmp_path: Path) -> None:
    """TC-08: The reset result is returned to the caller."""
    root = tmp_path / "out"

    assert generate_tree(1, str(root)) is False
    assert generate_tree(1, str(root)) is True
