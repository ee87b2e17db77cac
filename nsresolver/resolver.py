"""Namespace to directory resolution and class enumeration."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from nsresolver.autoload import AutoloadProvider, PathLike, Psr4Map, load_provider
from nsresolver.config import PHP, Dialect
from nsresolver.errors import (
    DirectoryResolutionError,
    MissingDirectoryError,
    UnmappedNamespaceError,
)
from nsresolver.oracles import SourceTypeOracle, TypeExistsOracle

logger = logging.getLogger(__name__)


class NamespaceResolver:
    """Maps namespaces onto directories through an autoload prefix map.

    Nothing is cached: every call reads the provider's current prefixes
    and the current state of the filesystem.
    """

    def __init__(
        self,
        autoloader: AutoloadProvider | Mapping | PathLike,
        dialect: Dialect = PHP,
        oracle: TypeExistsOracle | None = None,
    ) -> None:
        """
        Args:
            autoloader: A provider with ``get_prefixes()``, a plain
                prefix -> directories mapping, or a path to a configuration
                file accepted by :func:`load_provider`.
            dialect: Namespace separator and source extension to use.
            oracle: Callable(class_name, file_path) -> bool deciding whether
                a derived class name exists. Defaults to parsing the file.

        Raises:
            ConfigurationError: If a configuration path does not exist.
        """
        if isinstance(autoloader, (str, os.PathLike)):
            autoloader = load_provider(autoloader)
        elif isinstance(autoloader, Mapping):
            autoloader = Psr4Map(autoloader)
        self.provider = autoloader
        self.dialect = dialect
        self.oracle = oracle if oracle is not None else SourceTypeOracle(dialect)

    def _trim(self, namespace: str) -> str:
        return namespace.strip(self.dialect.separator)

    def resolve_directory(self, namespace: str) -> str | None:
        """Return the canonical directory for a namespace.

        The first prefix, in map order, that the namespace starts with wins.
        Returns None when no prefix matches.

        Raises:
            DirectoryResolutionError: If the matched directory does not exist.
        """
        namespace = self._trim(namespace)
        sep = self.dialect.separator

        for prefix, directories in self.provider.get_prefixes().items():
            if not namespace.startswith(prefix):
                continue

            if not directories:
                raise DirectoryResolutionError("")

            base = os.fspath(directories[0])
            remainder = namespace[len(prefix):].replace(sep, "/")
            logger.debug(f"{namespace} matched prefix {prefix!r} -> {base}")
            try:
                return str(Path(f"{base}/{remainder}").resolve(strict=True))
            except (OSError, RuntimeError) as e:
                raise DirectoryResolutionError(base) from e

        return None

    def list_classes_in_namespace(self, namespace: str) -> list[str]:
        """Return fully-qualified names of the classes under a namespace.

        Raises:
            UnmappedNamespaceError: If no prefix matches the namespace.
            MissingDirectoryError: If the resolved directory is gone.
            DirectoryResolutionError: Propagated from resolve_directory.
        """
        namespace = self._trim(namespace)
        directory = self.resolve_directory(namespace)

        if not directory:
            raise UnmappedNamespaceError(namespace)

        if not os.path.isdir(directory):
            raise MissingDirectoryError(directory)

        sep = self.dialect.separator
        extension = self.dialect.extension
        class_names: list[str] = []

        for dirpath, dirnames, filenames in os.walk(directory):
            dirnames.sort()

            for filename in sorted(filenames):
                if not filename.endswith(extension):
                    continue

                full_path = os.path.join(dirpath, filename)
                if not os.path.isfile(full_path):
                    continue

                if filename[: -len(extension)] == self.dialect.package_marker:
                    continue

                rel_path = os.path.relpath(full_path, directory)[: -len(extension)]
                relative_name = rel_path.replace(os.sep, sep)
                class_name = f"{namespace}{sep}{relative_name}" if namespace else relative_name

                if self.oracle(class_name, full_path):
                    class_names.append(class_name)
                else:
                    logger.debug(f"Skipping {full_path}: no type named {class_name}")

        return class_names
