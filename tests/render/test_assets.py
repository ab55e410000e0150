"""Tests for linkhub.render.assets."""

from __future__ import annotations

from pathlib import Path

import pytest

from linkhub.errors import AssetCopyError
from linkhub.render.assets import copy_file, copy_tree, is_local_reference


def test_copy_tree_preserves_structure_and_overwrites(tmp_path: Path) -> None:
    src = tmp_path / "src"
    (src / "a" / "b").mkdir(parents=True)
    (src / "top.css").write_text("new", encoding="utf-8")
    (src / "a" / "b" / "deep.js").write_text("deep", encoding="utf-8")
    dst = tmp_path / "dst"
    dst.mkdir()
    (dst / "top.css").write_text("old", encoding="utf-8")
    (dst / "keep.txt").write_text("keep", encoding="utf-8")

    written = copy_tree(src, dst)

    assert (dst / "top.css").read_text(encoding="utf-8") == "new"
    assert (dst / "a" / "b" / "deep.js").read_text(encoding="utf-8") == "deep"
    assert (dst / "keep.txt").exists()
    assert set(written) == {dst / "top.css", dst / "a" / "b" / "deep.js"}


def test_copy_file_wraps_io_errors(tmp_path: Path) -> None:
    with pytest.raises(AssetCopyError):
        copy_file(tmp_path / "missing.css", tmp_path / "out.css")


def test_copy_tree_wraps_missing_source(tmp_path: Path) -> None:
    with pytest.raises(AssetCopyError):
        copy_tree(tmp_path / "missing", tmp_path / "out")


@pytest.mark.parametrize(
    ("reference", "expected"),
    [
        ("me.png", True),
        ("img/me.png", True),
        ("", False),
        ("http://cdn.test/me.png", False),
        ("https://cdn.test/me.png", False),
        ("//cdn.test/me.png", False),
        ("data:image/png;base64,AAAA", False),
        ("/etc/passwd", False),
    ],
)
def test_is_local_reference(reference: str, expected: bool) -> None:
    assert is_local_reference(reference) is expected
