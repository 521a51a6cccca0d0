"""Command-line interface for Kakao screen generation."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from kakaomaker.generator import kotlin
from kakaomaker.generator.config import ConfigError, load_config
from kakaomaker.generator.driver import run
from kakaomaker.generator.parser import LayoutParseError
from kakaomaker.generator.screens import IncludeResolutionError, ScreenNameError
from kakaomaker.generator.sources import find_layouts
from kakaomaker.generator.wrappers import TypeResolver, load_types
from kakaomaker.generator.writer import ensure_output_dir, write_screen

LOG_PREFIX = "[kakaomaker]"

GENERATION_ERRORS = (ConfigError, LayoutParseError, IncludeResolutionError, ScreenNameError)

res_option = click.option(
    "--res",
    "-r",
    "res_dirs",
    multiple=True,
    required=True,
    type=click.Path(path_type=Path),
    help="Android resource directory or layout file (repeatable)",
)
types_option = click.option(
    "--types",
    "types_file",
    default=None,
    type=click.Path(path_type=Path),
    help="JSON file with extra tag -> wrapper type mappings",
)


def _logger(console: Console, debug: bool) -> Callable[[str], None] | None:
    if not debug:
        return None

    def log(msg: str) -> None:
        console.print(f"{LOG_PREFIX} {msg}", markup=False, highlight=False)

    return log


def _resolver(types_file: Path | None) -> TypeResolver:
    resolver = TypeResolver()
    if types_file is not None:
        resolver = resolver.extended(load_types(types_file))
    return resolver


def _fail(error: Exception) -> None:
    print(f"Error: {error}")
    sys.exit(1)


@click.group()
def cli() -> None:
    """Kakao screen generator for Android layouts."""


@cli.command()
@res_option
@click.option("--package", "-p", "package_name", envvar="KAKAO_MAKER_PACKAGE", help="Package of the generated screens")
@click.option(
    "--application-id",
    "-a",
    "application_id",
    envvar="KAKAO_MAKER_APPLICATION_ID",
    help="Application package that owns the R class",
)
@click.option("--output", "-o", "output_dir", envvar="KAKAO_MAKER_OUTPUT", help="Output directory")
@types_option
@click.option("--debug", is_flag=True, default=False, envvar="KAKAO_MAKER_DEBUG", help="Print progress and generated code")
@click.option("--timestamp", is_flag=True, default=False, help="Add the generation date to @Generated")
def gen(
    res_dirs: tuple[Path, ...],
    package_name: str | None,
    application_id: str | None,
    output_dir: str | None,
    types_file: Path | None,
    debug: bool,
    timestamp: bool,
) -> None:
    """Generate Kakao screens from layout files."""
    console = Console()
    try:
        config = load_config(
            package_name=package_name,
            application_id=application_id,
            output_dir=output_dir,
            res_dirs=res_dirs,
            debug=debug,
            types_file=types_file,
            timestamp=timestamp,
        )
        log = _logger(console, config.debug)

        ensure_output_dir(config.output_dir, log)
        resolver = _resolver(config.types_file)
        layouts = find_layouts(config.res_dirs)
        generated_at = datetime.now() if config.timestamp else None

        for description in run(layouts, resolver, log):
            generated_file = kotlin.render(
                description,
                config.package_name,
                config.application_id,
                generated_at=generated_at,
            )

            if log:
                log(f"-- {description.name} BEGIN --")
                console.print(generated_file, markup=False, highlight=False, soft_wrap=True)
                log(f"-- {description.name} END --")

            write_screen(config.output_dir, kotlin.file_name(description), generated_file)
    except GENERATION_ERRORS as e:
        _fail(e)


@cli.command()
@res_option
@types_option
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def info(res_dirs: tuple[Path, ...], types_file: Path | None, output_json: bool) -> None:
    """Show the screens and properties that would be generated."""
    try:
        missing = [str(p) for p in res_dirs if not p.exists()]
        if missing:
            raise ConfigError(f"Resource path does not exist: {', '.join(missing)}")
        descriptions = list(run(find_layouts(res_dirs), _resolver(types_file)))
    except GENERATION_ERRORS as e:
        _fail(e)
        return

    if output_json:
        print(json.dumps([d.to_dict() for d in descriptions], indent=2))
        return

    console = Console()
    if not descriptions:
        console.print("No screens found.")
        return

    for description in descriptions:
        console.print(
            f"[bold cyan]{description.name}[/bold cyan] [dim]({description.source})[/dim]"
        )
        table = Table(show_header=True, box=None, padding=(0, 2, 0, 2))
        table.add_column("Property", style="white")
        table.add_column("Type", style="yellow")
        table.add_column("View id", style="green")

        for prop in description.properties:
            table.add_row(prop.name, prop.type.qualified_name, prop.initializer.view_id or "")

        console.print(table)
        console.print()


@cli.command()
@types_option
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def types(types_file: Path | None, output_json: bool) -> None:
    """Show the tag to wrapper type table."""
    try:
        resolver = _resolver(types_file)
    except ConfigError as e:
        _fail(e)
        return

    if output_json:
        data = {tag: wrapper.qualified_name for tag, wrapper in resolver.table.items()}
        data["*"] = resolver.default.qualified_name
        print(json.dumps(data, indent=2))
        return

    table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    table.add_column("Tag", style="white")
    table.add_column("Wrapper", style="yellow")
    for tag, wrapper in sorted(resolver.table.items()):
        table.add_row(tag, wrapper.qualified_name)
    table.add_row("[dim]any other tag[/dim]", resolver.default.qualified_name)

    Console().print(table)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
