"""Source file discovery."""

from __future__ import annotations

import fnmatch
from pathlib import Path


def find_source_files(
    path: Path,
    extension: str = ".rs",
    skip_dirs: list[str] | None = None,
) -> list[Path]:
    """Return every file under *path* with the given extension.

    A single file is returned as-is when its suffix matches. Directories are
    walked recursively; any path part matching a ``skip_dirs`` pattern is
    ignored.
    """
    if not path.exists():
        raise FileNotFoundError(f"No such file or directory: {path}")

    if path.is_file():
        return [path] if path.suffix == extension else []

    files: list[Path] = []
    for candidate in sorted(path.rglob(f"*{extension}")):
        if candidate.is_dir():
            continue
        if _should_skip(candidate.relative_to(path), skip_dirs or []):
            continue
        if candidate.suffix == extension:
            files.append(candidate)
    return files


def _should_skip(path: Path, skip_dirs: list[str]) -> bool:
    for part in path.parts[:-1]:
        for pattern in skip_dirs:
            if fnmatch.fnmatch(part, pattern):
                return True
    return False
