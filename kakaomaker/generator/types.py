"""Type definitions for layout parsing and screen generation."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from dataclasses_json import DataClassJsonMixin


@dataclass
class LayoutNode:
    """Represents one element of a parsed layout file.

    Namespaced attribute keys use ``{uri}local`` (Clark) notation,
    plain attributes keep their bare name.
    """

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list["LayoutNode"] = field(default_factory=list)


@dataclass(frozen=True)
class LayoutFile:
    """Represents a layout resource on disk."""

    name: str
    path: Path

    @classmethod
    def from_path(cls, path: str | Path) -> "LayoutFile":
        path = Path(path)
        return cls(name=path.stem, path=path)


class LayoutSet:
    """Ordered, read-only collection of the layouts taking part in a run."""

    def __init__(self, files: Iterable[LayoutFile]):
        self._files = tuple(files)
        self._by_name: dict[str, LayoutFile] = {}
        for layout in self._files:
            # First one wins so that `layout/` shadows qualified variants
            self._by_name.setdefault(layout.name, layout)

    def find(self, name: str) -> LayoutFile | None:
        """Return the layout with the given logical name, if any."""
        return self._by_name.get(name)

    def __iter__(self) -> Iterator[LayoutFile]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name


@dataclass(frozen=True)
class WrapperType(DataClassJsonMixin):
    """Represents a UI-testing wrapper type.

    Types of generated screens live next to the including screen and have
    no package.
    """

    name: str
    package: str | None = None

    @property
    def qualified_name(self) -> str:
        if self.package:
            return f"{self.package}.{self.name}"
        return self.name

    @classmethod
    def parse(cls, qualified_name: str) -> "WrapperType":
        """Split a dotted name into package and simple name."""
        package, _, name = qualified_name.strip().rpartition(".")
        return cls(name=name, package=package or None)


@dataclass(frozen=True)
class Initializer(DataClassJsonMixin):
    """Describes how a property value is constructed.

    - kind="view": ``TypeName { withId(R.id.<view_id>) }``, with ``id_package``
      prefixed (``android.R.id.list``) when the id belongs to another package
    - kind="screen": ``TypeName()``
    """

    kind: Literal["view", "screen"]
    type_name: str
    view_id: str | None = None
    id_package: str | None = None


@dataclass(frozen=True)
class PropertyDescription(DataClassJsonMixin):
    """Represents one generated accessor."""

    name: str
    type: WrapperType
    initializer: Initializer


@dataclass
class ClassDescription(DataClassJsonMixin):
    """Represents a generated screen class.

    The superclass is parameterized by the class itself, so
    ``type_argument`` always equals ``name``.
    """

    name: str
    superclass: WrapperType
    type_argument: str
    properties: list[PropertyDescription]
    source: str | None = None
