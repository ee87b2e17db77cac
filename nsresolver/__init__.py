"""nsresolver - Resolve autoload namespaces to directories and the classes inside them."""

from nsresolver.autoload import AutoloadProvider, Psr4Map, load_provider
from nsresolver.config import PHP, PYTHON, Dialect, get_dialect
from nsresolver.errors import (
    ConfigurationError,
    DirectoryResolutionError,
    MissingDirectoryError,
    NamespaceResolverError,
    UnmappedNamespaceError,
)
from nsresolver.oracles import ImportTypeOracle, SourceTypeOracle, TypeExistsOracle
from nsresolver.resolver import NamespaceResolver

__version__ = "0.1.0"
__all__ = [
    "AutoloadProvider",
    "ConfigurationError",
    "Dialect",
    "DirectoryResolutionError",
    "ImportTypeOracle",
    "MissingDirectoryError",
    "NamespaceResolver",
    "NamespaceResolverError",
    "PHP",
    "PYTHON",
    "Psr4Map",
    "SourceTypeOracle",
    "TypeExistsOracle",
    "UnmappedNamespaceError",
    "get_dialect",
    "load_provider",
]
