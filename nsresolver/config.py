"""Core data types and dialect configuration for namespace resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TypeKind(str, Enum):
    CLASS = "Class"
    INTERFACE = "Interface"
    TRAIT = "Trait"
    ENUM = "Enum"


@dataclass(frozen=True)
class Dialect:
    """Namespace separator and source-file extension of a host language."""
    name: str
    separator: str
    extension: str
    # File stem that marks a package rather than a type, never a candidate.
    package_marker: str | None = None


PHP = Dialect(name="php", separator="\\", extension=".php")
PYTHON = Dialect(name="python", separator=".", extension=".py", package_marker="__init__")

_DIALECTS = {d.name: d for d in (PHP, PYTHON)}


def get_dialect(name: str) -> Dialect:
    """Look up a dialect preset by name (e.g. 'php')."""
    try:
        return _DIALECTS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown dialect {name!r}, expected one of: {', '.join(sorted(_DIALECTS))}"
        ) from None


def dialect_names() -> list[str]:
    return sorted(_DIALECTS)


@dataclass
class TypeDeclaration:
    """A class-like type declared in a source file."""
    name: str
    qualified_name: str
    kind: TypeKind
    file: str
    line: int
