"""Generator configuration."""

import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

_PACKAGE_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")


class ConfigError(RuntimeError):
    """Raised when the generator is misconfigured."""


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings for one generation run."""

    package_name: str
    application_id: str
    output_dir: Path
    res_dirs: tuple[Path, ...]
    debug: bool = False
    types_file: Path | None = None
    timestamp: bool = False


def validate_package(value: str | None, option: str) -> str:
    if not value:
        raise ConfigError(f"{option} is not specified")
    if not _PACKAGE_RE.match(value):
        raise ConfigError(f"{option} is not a valid package name: {value}")
    return value


def load_config(
    *,
    package_name: str | None,
    application_id: str | None,
    output_dir: str | Path | None,
    res_dirs: Sequence[str | Path],
    debug: bool = False,
    types_file: str | Path | None = None,
    timestamp: bool = False,
) -> GeneratorConfig:
    """Validate raw option values and build a config."""
    if not output_dir:
        raise ConfigError("Output path is not specified")
    if not res_dirs:
        raise ConfigError("No resource directory specified")

    resources = tuple(Path(p) for p in res_dirs)
    for path in resources:
        if not path.exists():
            raise ConfigError(f"Resource path does not exist: {path}")

    types_path = Path(types_file) if types_file else None
    if types_path is not None and not types_path.is_file():
        raise ConfigError(f"Type table does not exist: {types_path}")

    return GeneratorConfig(
        package_name=validate_package(package_name, "Package name"),
        application_id=validate_package(application_id, "Application id"),
        output_dir=Path(output_dir),
        res_dirs=resources,
        debug=debug,
        types_file=types_path,
        timestamp=timestamp,
    )
