"""CLI for dbms-assert-tools."""

from dbms_assert_tools.cli.commands import main

__all__ = ["main"]
