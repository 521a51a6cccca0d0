"""Classification of layout nodes and access to the attributes the generator reads."""

from enum import StrEnum, auto

from .types import LayoutNode
from .util import strip_resource_prefix

ANDROID_NS = "http://schemas.android.com/apk/res/android"

ID_ATTRIBUTE = f"{{{ANDROID_NS}}}id"
LAYOUT_ATTRIBUTE = "layout"

# Matched by local name so either `tools:` or `app:` prefixes work
IGNORE_ATTRIBUTE = "kakaoIgnore"
SCREEN_NAME_ATTRIBUTE = "kakaoScreenName"

INCLUDE_TAG = "include"
MERGE_TAG = "merge"


class Directive(StrEnum):
    """How the screen builder treats a node."""

    IGNORE = auto()  # Skip the node and its whole subtree
    INCLUDE = auto()  # Reference to another layout
    MERGE = auto()  # Root of a layout that is never generated on its own
    PLAIN = auto()  # Regular view


def _local_name(key: str) -> str:
    return key.rpartition("}")[2]


def _find_local(node: LayoutNode, local_name: str) -> str:
    for key, value in node.attributes.items():
        if _local_name(key) == local_name:
            return value
    return ""


def classify(node: LayoutNode) -> Directive:
    """Classify a node. Ignore markers take precedence over tags."""
    if _find_local(node, IGNORE_ATTRIBUTE).strip().lower() == "true":
        return Directive.IGNORE
    if node.tag == INCLUDE_TAG:
        return Directive.INCLUDE
    if node.tag == MERGE_TAG:
        return Directive.MERGE
    return Directive.PLAIN


def is_merge(node: LayoutNode) -> bool:
    """Check the root tag only; ignore markers do not change a merge root."""
    return node.tag == MERGE_TAG


def view_id(node: LayoutNode) -> str:
    """Return the node's view id without the ``@+id/`` prefix, or ``""``."""
    value = node.attributes.get(ID_ATTRIBUTE, "")
    return strip_resource_prefix(value) if value.strip() else ""


def layout_ref(node: LayoutNode) -> str:
    """Return the logical layout name an include node points at, or ``""``."""
    value = node.attributes.get(LAYOUT_ATTRIBUTE, "")
    return strip_resource_prefix(value) if value.strip() else ""


def screen_name(node: LayoutNode) -> str:
    """Return the screen name declared on a layout root, or ``""``."""
    return _find_local(node, SCREEN_NAME_ATTRIBUTE).strip()


def id_package(node: LayoutNode) -> str | None:
    """Return the package owning the id resource, e.g. ``android`` for ``@android:id/list``."""
    value = node.attributes.get(ID_ATTRIBUTE, "").strip().lstrip("@+")
    package, sep, _ = value.partition(":")
    return package if sep and package else None
