"""Kotlin code generator for Kakao screens."""

from datetime import datetime

from jinja2 import Environment, PackageLoader

from .types import ClassDescription, PropertyDescription

GENERATOR = "Kakao Maker"
HOMEPAGE = "https://github.com/aafanasev/kakao-maker"
GENERATED_ANNOTATION = "javax.annotation.Generated"

env = Environment(
    loader=PackageLoader("kakaomaker.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    line_comment_prefix="%%",
    line_statement_prefix="%",
)

template = env.get_template("screen.kt.j2")

KEYWORDS = frozenset(
    [
        "as",
        "break",
        "class",
        "continue",
        "do",
        "else",
        "false",
        "for",
        "fun",
        "if",
        "in",
        "interface",
        "is",
        "null",
        "object",
        "package",
        "return",
        "super",
        "this",
        "throw",
        "true",
        "try",
        "typealias",
        "typeof",
        "val",
        "var",
        "when",
        "while",
    ]
)


def _escape(name: str) -> str:
    """Quote identifiers that clash with Kotlin hard keywords."""
    return f"`{name}`" if name in KEYWORDS else name


def _initializer(prop: PropertyDescription) -> str:
    init = prop.initializer
    if init.kind == "screen":
        return f"{init.type_name}()"
    r_class = f"{init.id_package}.R" if init.id_package else "R"
    return f"{init.type_name} {{ withId({r_class}.id.{_escape(init.view_id or '')}) }}"


def _imports(description: ClassDescription, application_id: str) -> list[str]:
    names = {
        description.superclass.qualified_name,
        f"{application_id}.R",
        GENERATED_ANNOTATION,
    }
    names.update(p.type.qualified_name for p in description.properties if p.type.package)
    return sorted(names)


def file_name(description: ClassDescription) -> str:
    return f"{description.name}.kt"


def render(
    description: ClassDescription,
    package_name: str,
    application_id: str,
    generated_at: datetime | None = None,
) -> str:
    """Render a class description to Kotlin source code."""
    return template.render(
        screen=description,
        package_name=package_name,
        imports=_imports(description, application_id),
        generator=GENERATOR,
        homepage=HOMEPAGE,
        generated_at=generated_at.isoformat(timespec="seconds") if generated_at else None,
        escape=_escape,
        initializer=_initializer,
        BLANK_LINE="",
    )
