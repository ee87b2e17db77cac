"""nsresolver CLI - Look up namespaces in an autoload configuration."""

from __future__ import annotations

import json
import logging

import click

from nsresolver.config import dialect_names, get_dialect
from nsresolver.errors import NamespaceResolverError
from nsresolver.oracles import ImportTypeOracle
from nsresolver.resolver import NamespaceResolver


@click.group()
@click.option("--verbose", is_flag=True, help="Log prefix matches and skipped files")
def cli(verbose: bool) -> None:
    """nsresolver - Find the directory and classes behind a namespace."""
    if verbose:
        from rich.logging import RichHandler

        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
        )


def _autoload_option(fn):
    return click.option(
        "-a", "--autoload", "autoload_path", required=True,
        type=click.Path(exists=True, dir_okay=False),
        help="composer.json or a Python script defining get_provider()",
    )(fn)


def _dialect_option(fn):
    return click.option(
        "-d", "--dialect", default="php", show_default=True,
        type=click.Choice(dialect_names(), case_sensitive=False),
        help="Namespace separator and source extension",
    )(fn)


def _build_resolver(autoload_path: str, dialect: str, import_check: bool = False) -> NamespaceResolver:
    oracle = ImportTypeOracle() if import_check else None
    try:
        return NamespaceResolver(autoload_path, dialect=get_dialect(dialect), oracle=oracle)
    except NamespaceResolverError as e:
        raise click.ClickException(str(e)) from e


@cli.command("resolve")
@click.argument("namespace")
@_autoload_option
@_dialect_option
def resolve_cmd(namespace: str, autoload_path: str, dialect: str) -> None:
    """Print the directory a namespace maps to."""
    resolver = _build_resolver(autoload_path, dialect)
    try:
        directory = resolver.resolve_directory(namespace)
    except NamespaceResolverError as e:
        raise click.ClickException(str(e)) from e

    if directory is None:
        raise click.ClickException(f"Namespace {namespace} is not mapped")
    click.echo(directory)


@cli.command("classes")
@click.argument("namespace")
@_autoload_option
@_dialect_option
@click.option("--import-check", is_flag=True, help="Import candidates instead of parsing them (Python only)")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON list instead of a table")
def classes_cmd(
    namespace: str,
    autoload_path: str,
    dialect: str,
    import_check: bool,
    as_json: bool,
) -> None:
    """List the classes defined under a namespace."""
    resolver = _build_resolver(autoload_path, dialect, import_check)
    try:
        class_names = resolver.list_classes_in_namespace(namespace)
    except NamespaceResolverError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(json.dumps(class_names, indent=2))
        return

    from rich.console import Console
    from rich.table import Table

    table = Table(title=f"Classes in {namespace}", show_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Class", style="bold")
    for i, name in enumerate(class_names, 1):
        table.add_row(str(i), name)

    console = Console()
    console.print(table)
    console.print(f"[green]{len(class_names)} class(es) found[/green]")


if __name__ == "__main__":
    cli()
