"""Abstract base for language analysers."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import tree_sitter

from nsresolver.config import TypeDeclaration


@runtime_checkable
class LanguageAnalyser(Protocol):
    """Protocol that all language analysers must implement."""

    extensions: list[str]
    language_name: str
    # True when source files state their own namespace (PHP), False when the
    # namespace is implied by the file location (Python).
    declares_namespace: bool
    # False when the language treats namespace and class names case-insensitively.
    case_sensitive: bool

    def get_language(self) -> tree_sitter.Language:
        """Return the tree-sitter Language object for this analyser."""
        ...

    def extract_types(
        self, tree: tree_sitter.Tree, source: bytes, file_path: str
    ) -> list[TypeDeclaration]:
        """Extract class-like type declarations from a parsed AST."""
        ...
