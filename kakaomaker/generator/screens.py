"""Screen builder: turns a layout tree into a class description."""

import re

from .directives import Directive, classify, id_package, layout_ref, screen_name, view_id
from .parser import parse_file
from .types import (
    ClassDescription,
    Initializer,
    LayoutNode,
    LayoutSet,
    PropertyDescription,
    WrapperType,
)
from .util import decapitalize, view_id_to_name
from .wrappers import SCREEN, TypeResolver

_CLASS_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class IncludeResolutionError(RuntimeError):
    """Raised when an include node cannot be resolved."""


class ScreenNameError(RuntimeError):
    """Raised when a declared screen name is not a valid class name."""


def validate_screen_name(name: str, source: str | None) -> str:
    if not _CLASS_NAME_RE.match(name):
        raise ScreenNameError(f"Invalid screen name {name!r} in {source or '<unknown>'}")
    return name


def view_property(node: LayoutNode, resolver: TypeResolver) -> PropertyDescription | None:
    """Create the property for an identified view, or None if it has no usable id."""
    element_id = view_id(node)
    name = view_id_to_name(element_id) if element_id else ""
    if not name:
        return None

    wrapper = resolver.resolve(node.tag)
    return PropertyDescription(
        name=name,
        type=wrapper,
        initializer=Initializer(
            kind="view",
            type_name=wrapper.name,
            view_id=element_id,
            id_package=id_package(node),
        ),
    )


def screen_property(node: LayoutNode, target_screen: str) -> PropertyDescription:
    """Create the property for an included layout that is a screen itself."""
    element_id = view_id(node)
    name = view_id_to_name(element_id) if element_id else ""
    return PropertyDescription(
        name=name or decapitalize(target_screen),
        type=WrapperType(target_screen),
        initializer=Initializer(kind="screen", type_name=target_screen),
    )


def _walk_include(
    node: LayoutNode,
    layouts: LayoutSet,
    resolver: TypeResolver,
    stack: tuple[str, ...],
) -> list[PropertyDescription]:
    including = stack[-1] if stack else "<unknown>"
    target = layout_ref(node)
    if not target:
        raise IncludeResolutionError(f"Include without layout attribute in {including}")

    layout = layouts.find(target)
    if layout is None:
        raise IncludeResolutionError(f"Layout {target} included from {including} was not found")

    root = parse_file(layout)
    target_screen = screen_name(root)
    if target_screen:
        validate_screen_name(target_screen, target)
        return [screen_property(node, target_screen)]

    # Not a screen on its own: splice its views into the current screen
    if target in stack:
        chain = " -> ".join((*stack, target))
        raise IncludeResolutionError(f"Include cycle: {chain}")
    return walk(root, layouts, resolver, (*stack, target))


def walk(
    node: LayoutNode,
    layouts: LayoutSet,
    resolver: TypeResolver,
    stack: tuple[str, ...] = (),
) -> list[PropertyDescription]:
    """Collect the properties of a subtree in pre-order.

    ``stack`` holds the names of the layouts being walked, outermost first.
    It is used for error messages and include cycle detection.
    """
    directive = classify(node)
    if directive == Directive.IGNORE:
        return []
    if directive == Directive.INCLUDE:
        return _walk_include(node, layouts, resolver, stack)

    properties: list[PropertyDescription] = []
    own = view_property(node, resolver)
    if own is not None:
        properties.append(own)
    for child in node.children:
        properties.extend(walk(child, layouts, resolver, stack))
    return properties


def build(
    root: LayoutNode,
    layouts: LayoutSet,
    resolver: TypeResolver | None = None,
    source: str | None = None,
) -> ClassDescription | None:
    """Build the class description for a layout root.

    Returns None when the root does not declare a screen name and raises
    ScreenNameError when the declared name is not a valid class name.
    """
    name = screen_name(root)
    if not name:
        return None
    validate_screen_name(name, source)

    stack = (source,) if source else ()
    return ClassDescription(
        name=name,
        superclass=SCREEN,
        type_argument=name,
        properties=walk(root, layouts, resolver or TypeResolver(), stack),
        source=source,
    )
