"""CLI commands for dbms-assert."""

import json
import logging
import sys
from collections.abc import Callable
from typing import Any

import click
import duckdb
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dbms_assert_tools import __version__
from dbms_assert_tools.core import (
    AssertionFailure,
    DuckDBDialect,
    PostgreSQLDialect,
    enquote_literal,
    enquote_name,
    noop,
    object_name,
    parse_qualified_name,
    qualified_sql_name,
    quote_identifier,
    schema_name,
    simple_sql_name,
)
from dbms_assert_tools.integrations.duckdb import DuckDBCatalog

logging.basicConfig(format="%(asctime)s - %(levelname)s - %(message)s", level=logging.WARNING)
logger = logging.getLogger(__name__)
console = Console()

load_dotenv(".env.local")

# Exit codes
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_BAD_INPUT = 2

DIALECTS = {
    "postgresql": PostgreSQLDialect(),
    "duckdb": DuckDBDialect(),
}

IN_MEMORY = ":memory:"


def write_json_output(data: dict[str, Any]) -> None:
    """Print a JSON document to stdout."""
    print(json.dumps(data, indent=2))


def _handle_error(error: Exception, output_json: bool) -> None:
    """Report an error and exit.

    Rejected input exits with EXIT_BAD_INPUT, anything else with EXIT_ERROR.
    """
    if isinstance(error, AssertionFailure):
        exit_code = EXIT_BAD_INPUT
        payload = {
            "accepted": False,
            "code": error.code,
            "kind": error.kind.name,
            "message": error.message,
            "value": error.value,
        }
    else:
        exit_code = EXIT_ERROR
        payload = {"accepted": False, "error": str(error)}

    if output_json:
        write_json_output(payload)
    elif isinstance(error, AssertionFailure):
        console.print(f"[bold red]{escape(str(error))}[/bold red]: {escape(repr(error.value))}")
    else:
        console.print(f"[bold red]Error: {escape(str(error))}[/bold red]")
    sys.exit(exit_code)


def _accept(value: str | None, output_json: bool) -> None:
    if output_json:
        write_json_output({"accepted": True, "value": value})
    else:
        click.echo(value)


def run_check(check: Callable[..., str | None], value: str, output_json: bool, **kwargs: Any) -> None:
    """Run an assertion and report its outcome."""
    try:
        result = check(value, **kwargs)
    except AssertionFailure as e:
        _handle_error(e, output_json)
    else:
        _accept(result, output_json)


def connect_catalog(database: str) -> duckdb.DuckDBPyConnection:
    """Open the DuckDB database used for catalog checks."""
    logger.debug("Opening DuckDB database %s", database)
    return duckdb.connect(database, read_only=database != IN_MEMORY)


# =============================================================================
# Main CLI Group
# =============================================================================


@click.group()
@click.version_option(version=__version__, prog_name="dbms-assert")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output")
def main(verbose: bool):
    """dbms-assert - validate SQL names and literals before building SQL."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


# =============================================================================
# Syntax Checks
# =============================================================================

json_option = click.option("--json", "output_json", is_flag=True, help="Output as JSON")

catalog_options = [
    click.option(
        "--database",
        envvar="DUCKDB_FILE",
        default=IN_MEMORY,
        show_default=True,
        help="DuckDB database file (or DUCKDB_FILE env var)",
    ),
    click.option("--usable-schema", multiple=True, help="Restrict usable schemas (can be repeated)"),
]


def with_catalog_options(func):
    for option in reversed(catalog_options):
        func = option(func)
    return func


@main.command()
@click.argument("value")
@json_option
def qualified(value: str, output_json: bool):
    """Check that VALUE is a qualified SQL name (e.g. schema."Table")."""
    run_check(qualified_sql_name, value, output_json)


@main.command()
@click.argument("value")
@json_option
def simple(value: str, output_json: bool):
    """Check that VALUE is a single, unqualified SQL name."""
    run_check(simple_sql_name, value, output_json)


@main.command(name="noop")
@click.argument("value")
@json_option
def noop_cmd(value: str, output_json: bool):
    """Echo VALUE without any checking."""
    run_check(noop, value, output_json)


@main.command()
@click.argument("value")
@json_option
def parse(value: str, output_json: bool):
    """Split a qualified SQL name into its parts."""
    try:
        name = parse_qualified_name(value)
    except AssertionFailure as e:
        _handle_error(e, output_json)
        return

    if output_json:
        write_json_output(
            {
                "accepted": True,
                "value": value,
                "parts": [{"text": part.text, "quoted": part.was_quoted} for part in name],
            }
        )
        return

    if not name:
        console.print("[yellow]Empty name (no parts)[/yellow]")
        return

    table = Table(title=f"Parts of {escape(value)}")
    table.add_column("#", justify="right")
    table.add_column("Text")
    table.add_column("Quoted")
    for i, part in enumerate(name, 1):
        table.add_row(str(i), escape(part.text), "yes" if part.was_quoted else "no")
    console.print(table)
    console.print(f"[dim]Fully quoted: {escape(quote_identifier(name))}[/dim]")


# =============================================================================
# Catalog Checks
# =============================================================================


@main.command()
@click.argument("value")
@with_catalog_options
@json_option
def schema(value: str, database: str, usable_schema: tuple[str, ...], output_json: bool):
    """Check that VALUE names an existing, usable schema."""
    try:
        with connect_catalog(database) as conn:
            catalog = DuckDBCatalog(conn, usable_schemas=usable_schema or None)
            run_check(schema_name, value, output_json, catalog=catalog)
    except duckdb.Error as e:
        _handle_error(e, output_json)


@main.command(name="object")
@click.argument("value")
@with_catalog_options
@json_option
def object_cmd(value: str, database: str, usable_schema: tuple[str, ...], output_json: bool):
    """Check that VALUE is the qualified name of an existing table or view."""
    try:
        with connect_catalog(database) as conn:
            catalog = DuckDBCatalog(conn, usable_schemas=usable_schema or None)
            run_check(object_name, value, output_json, catalog=catalog)
    except duckdb.Error as e:
        _handle_error(e, output_json)


# =============================================================================
# Quoting
# =============================================================================


@main.command(name="enquote-literal")
@click.argument("value")
def enquote_literal_cmd(value: str):
    """Quote VALUE as a SQL string literal."""
    click.echo(enquote_literal(value))


@main.command(name="enquote-name")
@click.argument("value")
@click.option("--fold-case/--no-fold-case", default=True, show_default=True, help="Lower-case the result")
@click.option(
    "--dialect",
    type=click.Choice(sorted(DIALECTS)),
    default="postgresql",
    show_default=True,
    help="Identifier rules to apply",
)
def enquote_name_cmd(value: str, fold_case: bool, dialect: str):
    """Quote VALUE as a SQL identifier, only if required."""
    click.echo(enquote_name(value, fold_case=fold_case, dialect=DIALECTS[dialect]))
