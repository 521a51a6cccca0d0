"""Generation driver: runs the screen builder over a layout set."""

from collections.abc import Callable, Iterator

from .directives import is_merge
from .parser import parse_file
from .screens import build
from .types import ClassDescription, LayoutSet
from .wrappers import TypeResolver


def run(
    layouts: LayoutSet,
    resolver: TypeResolver | None = None,
    log: Callable[[str], None] | None = None,
) -> Iterator[ClassDescription]:
    """Yield a class description for every generatable layout, in input order.

    Merge roots and layouts without a screen name are skipped. Parse and
    include errors propagate and end the run.
    """
    resolver = resolver or TypeResolver()

    for layout in layouts:
        root = parse_file(layout)

        if is_merge(root):
            if log:
                log(f"Skipping {layout.name}: merge layout")
            continue

        description = build(root, layouts, resolver, source=layout.name)
        if description is None:
            continue

        if log:
            log(f"Generating {description.name}...")
        yield description
