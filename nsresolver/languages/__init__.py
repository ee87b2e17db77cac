"""Language registry - maps file extensions to language analysers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import tree_sitter

if TYPE_CHECKING:
    from nsresolver.languages.base import LanguageAnalyser

logger = logging.getLogger(__name__)

_REGISTRY: dict[str, LanguageAnalyser] = {}
_INITIALISED = False

# Cache parsers per language to avoid re-creating
_parsers: dict[str, tree_sitter.Parser] = {}


def _init_registry() -> None:
    global _INITIALISED
    if _INITIALISED:
        return

    from nsresolver.languages.php import PhpAnalyser
    from nsresolver.languages.python_lang import PythonAnalyser

    analysers: list[LanguageAnalyser] = [
        PhpAnalyser(),
        PythonAnalyser(),
    ]

    for analyser in analysers:
        for ext in analyser.extensions:
            _REGISTRY[ext] = analyser

    _INITIALISED = True


def get_analyser(extension: str) -> LanguageAnalyser | None:
    """Get the language analyser for a file extension (e.g. '.php')."""
    _init_registry()
    return _REGISTRY.get(extension.lower())


def get_language(extension: str) -> str | None:
    """Get the language name for a file extension."""
    analyser = get_analyser(extension)
    return analyser.language_name if analyser else None


def supported_extensions() -> set[str]:
    """Return all supported file extensions."""
    _init_registry()
    return set(_REGISTRY.keys())


def get_parser(analyser: LanguageAnalyser) -> tree_sitter.Parser | None:
    """Get or create a parser for the given analyser."""
    key = analyser.language_name
    if key not in _parsers:
        try:
            _parsers[key] = tree_sitter.Parser(analyser.get_language())
        except (ValueError, RuntimeError) as e:
            logger.warning(f"Failed to initialise parser for {key}: {e}")
            return None
    return _parsers[key]
