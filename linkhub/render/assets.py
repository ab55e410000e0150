"""Asset copying into the output tree."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import List

from ..errors import AssetCopyError


def copy_file(src: Path, dst: Path) -> Path:
    """Copy ``src`` to ``dst``, creating parents and overwriting unconditionally."""
    try:
        dst.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src, dst)
    except OSError as exc:
        raise AssetCopyError(f"failed to copy {src} -> {dst}: {exc}") from exc
    return dst


def copy_tree(src: Path, dst: Path) -> List[Path]:
    """Recursively copy ``src`` into ``dst`` depth-first and return the files written.

    Existing destination files are overwritten without comparing contents or
    timestamps; files already in ``dst`` that ``src`` lacks are left alone.
    """
    written: List[Path] = []
    try:
        dst.mkdir(parents=True, exist_ok=True)
        entries = sorted(src.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        raise AssetCopyError(f"failed to copy directory {src} -> {dst}: {exc}") from exc

    for entry in entries:
        target = dst / entry.name
        if entry.is_dir():
            written.extend(copy_tree(entry, target))
        else:
            written.append(copy_file(entry, target))
    return written


def is_local_reference(reference: str) -> bool:
    """Return True when ``reference`` names a relative file rather than a URL."""
    ref = (reference or "").strip()
    if not ref:
        return False
    lowered = ref.lower()
    if lowered.startswith(("http://", "https://", "//", "data:")):
        return False
    return not Path(ref).is_absolute()


__all__ = ["copy_file", "copy_tree", "is_local_reference"]
