"""Naming helpers shared by the screen builder and the renderer."""

import re

_SEPARATORS = re.compile(r"[_.\-\s]+")


def strip_resource_prefix(value: str) -> str:
    """Drop a resource qualifier such as ``@+id/`` or ``@layout/``."""
    return value.strip().rsplit("/", 1)[-1]


def decapitalize(name: str) -> str:
    """Lower-case the first character of a name."""
    return name[:1].lower() + name[1:]


def to_camel_case(text: str) -> str:
    """Convert snake_case or mixed-case tokens to lowerCamelCase.

    Characters inside a token are kept as written, only token boundaries
    change case: ``et_userName`` -> ``etUserName``.
    """
    tokens = [token for token in _SEPARATORS.split(text) if token]
    if not tokens:
        return ""
    head, *tail = tokens
    return decapitalize(head) + "".join(token[:1].upper() + token[1:] for token in tail)


def view_id_to_name(view_id: str) -> str:
    """Map a view identifier to the property name exposing it."""
    return to_camel_case(strip_resource_prefix(view_id))
