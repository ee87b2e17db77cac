"""Exceptions raised by namespace resolution."""

from __future__ import annotations


class NamespaceResolverError(Exception):
    """Base class for all nsresolver errors."""


class ConfigurationError(NamespaceResolverError, ValueError):
    """The autoloader configuration could not be loaded."""


class DirectoryResolutionError(NamespaceResolverError, RuntimeError):
    """A mapped directory does not canonicalize to an existing path."""

    def __init__(self, directory: str) -> None:
        super().__init__(f"Failed to fetch real path for directory {directory}!")
        self.directory = directory


class UnmappedNamespaceError(NamespaceResolverError, ValueError):
    """No configured prefix matches the namespace."""

    def __init__(self, namespace: str) -> None:
        super().__init__(f"Namespace {namespace} is not properly mapped in the autoloader!")
        self.namespace = namespace


class MissingDirectoryError(NamespaceResolverError, RuntimeError):
    """The resolved directory disappeared before it could be scanned."""

    def __init__(self, directory: str) -> None:
        super().__init__(f"Directory {directory} does not exist!")
        self.directory = directory
