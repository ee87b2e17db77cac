"""Autoload-map providers and loading them from configuration files."""

from __future__ import annotations

import hashlib
import importlib.machinery
import importlib.util
import json
import logging
import os
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Protocol, Union, runtime_checkable

from nsresolver.errors import ConfigurationError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


@runtime_checkable
class AutoloadProvider(Protocol):
    """Anything that can report its namespace-prefix to directories map."""

    def get_prefixes(self) -> Mapping[str, Sequence[str]]:
        """Return prefix -> ordered candidate directories."""
        ...


class Psr4Map:
    """In-memory PSR-4 style prefix map.

    Prefixes keep their insertion order, which is the order in which
    they are matched.
    """

    def __init__(self, prefixes: Mapping[str, str | Sequence[str]] | None = None) -> None:
        self._prefixes: dict[str, list[str]] = {}
        for prefix, paths in (prefixes or {}).items():
            self.add(prefix, paths)

    def add(self, prefix: str, paths: str | Sequence[str], prepend: bool = False) -> None:
        """Register candidate directories for a prefix."""
        new_paths = _as_list(paths)
        existing = self._prefixes.setdefault(prefix, [])
        if prepend:
            existing[:0] = new_paths
        else:
            existing.extend(new_paths)

    def set(self, prefix: str, paths: str | Sequence[str]) -> None:
        """Replace the candidate directories of a prefix."""
        self._prefixes[prefix] = _as_list(paths)

    def get_prefixes(self) -> dict[str, list[str]]:
        return {prefix: list(paths) for prefix, paths in self._prefixes.items()}

    def __len__(self) -> int:
        return len(self._prefixes)

    def __repr__(self) -> str:
        return f"Psr4Map({self._prefixes!r})"


def _as_list(paths: str | os.PathLike | Sequence[str]) -> list[str]:
    if isinstance(paths, (str, os.PathLike)):
        return [os.fspath(paths)]
    return [os.fspath(p) for p in paths]


def load_provider(path: PathLike) -> AutoloadProvider:
    """Build a provider from a configuration file.

    ``*.json`` files are read as a Composer manifest (``autoload`` and
    ``autoload-dev`` PSR-4 sections). Any other file is executed as a
    Python script that must define ``get_provider()`` or ``provider``.

    Raises:
        ConfigurationError: If the file does not exist or supplies no provider.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigurationError(f"Autoloader file {os.fspath(path)} does not exist!")
    if config_path.is_dir():
        raise ConfigurationError(f"Autoloader file {os.fspath(path)} is a directory")

    if config_path.suffix.lower() == ".json":
        return _load_composer_manifest(config_path)
    return _load_provider_script(config_path)


def _load_composer_manifest(manifest_path: Path) -> Psr4Map:
    try:
        with open(manifest_path, "r", encoding="utf-8") as f:
            manifest = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Failed to read Composer manifest {manifest_path}: {e}") from e

    if not isinstance(manifest, dict):
        raise ConfigurationError(f"Composer manifest {manifest_path} is not a JSON object")

    base_dir = manifest_path.parent
    psr4 = Psr4Map()
    for section in ("autoload", "autoload-dev"):
        autoload = manifest.get(section) or {}
        if not isinstance(autoload, dict):
            continue
        for prefix, paths in (autoload.get("psr-4") or {}).items():
            psr4.add(prefix, [os.path.join(base_dir, p) for p in _as_list(paths)])
            logger.debug(f"{section}: {prefix} -> {paths}")

    return psr4


def _load_provider_script(script_path: Path) -> AutoloadProvider:
    # Keyed on the full path so scripts sharing a file name stay distinct.
    digest = hashlib.sha1(str(script_path.resolve()).encode("utf-8")).hexdigest()[:12]
    module_name = f"_nsresolver_autoload_{script_path.stem}_{digest}"
    loader = importlib.machinery.SourceFileLoader(module_name, str(script_path))
    spec = importlib.util.spec_from_file_location(module_name, script_path, loader=loader)
    if spec is None or spec.loader is None:
        raise ConfigurationError(f"Autoloader file {script_path} cannot be loaded as a Python script")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise

    get_provider = getattr(module, "get_provider", None)
    if callable(get_provider):
        provider = get_provider()
    elif hasattr(module, "provider"):
        provider = module.provider
    else:
        raise ConfigurationError(
            f"Autoloader file {script_path} defines neither 'get_provider()' nor 'provider'"
        )

    if isinstance(provider, Mapping):
        provider = Psr4Map(provider)
    return provider
