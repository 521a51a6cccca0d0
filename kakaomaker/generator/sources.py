"""Discovery of layout files in Android resource directories."""

from collections.abc import Iterable
from pathlib import Path

from .types import LayoutFile, LayoutSet


def is_layout_dir(path: Path) -> bool:
    """Check if a directory holds default layouts.

    Qualified variants such as `layout-land` repeat the same layout names
    and are not used.
    """
    return path.name == "layout"


def find_layouts(paths: Iterable[str | Path]) -> LayoutSet:
    """Collect the layout files below the given resource directories.

    A path may also point at a single layout file. Files are ordered by
    directory, then file name, so runs are reproducible.
    """
    files: list[LayoutFile] = []
    for path in map(Path, paths):
        if path.is_file():
            files.append(LayoutFile.from_path(path))
            continue

        candidates = [p for p in path.rglob("*.xml") if p.is_file() and is_layout_dir(p.parent)]
        for candidate in sorted(candidates, key=lambda p: (str(p.parent), p.name)):
            files.append(LayoutFile.from_path(candidate))

    return LayoutSet(files)
