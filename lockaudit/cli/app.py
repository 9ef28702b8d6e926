"""
Main CLI application for lockaudit.

Defines the Typer application; the single audit command is the whole
interface, so it runs without a subcommand name.
"""
import typer

from lockaudit.cli.commands.audit import audit_command


app = typer.Typer(help="lockaudit - heuristic lock file sanity check for CI", add_completion=False)

app.command()(audit_command)
