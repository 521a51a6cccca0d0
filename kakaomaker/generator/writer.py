"""Persisting generated screens."""

from collections.abc import Callable
from pathlib import Path

from .config import ConfigError


def ensure_output_dir(path: Path, log: Callable[[str], None] | None = None) -> Path:
    """Create the output directory unless it already exists."""
    if path.is_dir():
        if log:
            log("Output directory already exists")
        return path
    try:
        path.mkdir(parents=True)
    except OSError as e:
        raise ConfigError(f"Cannot create output directory: {path}") from e
    if log:
        log("Output directory successfully created")
    return path


def write_screen(output_dir: Path, file_name: str, text: str) -> Path:
    target = output_dir / file_name
    target.write_text(text, encoding="utf-8")
    return target
