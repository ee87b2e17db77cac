"""Type-existence oracles: decide whether a derived class name is real."""

from __future__ import annotations

import inspect
import logging
import os
import pkgutil
from typing import Protocol, runtime_checkable

from nsresolver.config import PHP, Dialect
from nsresolver.languages import get_analyser, get_parser

logger = logging.getLogger(__name__)


@runtime_checkable
class TypeExistsOracle(Protocol):
    """Answers whether a class-like type of the given name exists."""

    def __call__(self, class_name: str, file_path: str) -> bool:
        ...


class SourceTypeOracle:
    """Checks declarations in the candidate file with tree-sitter.

    Nothing is imported or executed; a type exists when the file it was
    derived from declares it. Names compare case-insensitively for
    languages that resolve them that way (PHP).
    """

    def __init__(self, dialect: Dialect = PHP) -> None:
        self.dialect = dialect

    def __call__(self, class_name: str, file_path: str) -> bool:
        ext = os.path.splitext(file_path)[1]
        analyser = get_analyser(ext)
        if analyser is None:
            return False

        parser = get_parser(analyser)
        if parser is None:
            return False

        try:
            with open(file_path, "rb") as f:
                source = f.read()
        except OSError as e:
            logger.warning(f"Failed to read {file_path}: {e}")
            return False

        try:
            tree = parser.parse(source)
            declarations = analyser.extract_types(tree, source, file_path)
        except Exception as e:
            logger.warning(f"Failed to parse {file_path}: {e}")
            return False

        if analyser.declares_namespace:
            wanted = class_name
            declared = [d.qualified_name for d in declarations]
        else:
            wanted = class_name.rsplit(self.dialect.separator, 1)[-1]
            declared = [d.name for d in declarations]

        if not analyser.case_sensitive:
            wanted = wanted.casefold()
            declared = [name.casefold() for name in declared]
        return wanted in declared


class ImportTypeOracle:
    """Imports the candidate to check it names a class.

    ``pkg.models.User`` is accepted when it resolves to a class, or to a
    module ``pkg.models.User`` that defines a class ``User``. Importing
    runs module code.
    """

    def __call__(self, class_name: str, file_path: str | None = None) -> bool:
        try:
            obj = pkgutil.resolve_name(class_name)
        except (ImportError, AttributeError, ValueError) as e:
            logger.debug(f"{class_name} is not importable: {e}")
            return False
        except Exception as e:
            logger.debug(f"Importing {class_name} failed: {e!r}")
            return False

        if inspect.ismodule(obj):
            obj = getattr(obj, class_name.rsplit(".", 1)[-1], None)
        return inspect.isclass(obj)
