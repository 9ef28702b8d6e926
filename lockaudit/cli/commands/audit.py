"""
Audit command implementation.

Thin wrapper around AuditService that handles CLI argument parsing
and delegates business logic to the service layer.
"""
import sys
from typing import Optional

import typer

from lockaudit.core.audit_service import AuditService


def audit_command(
    path: Optional[str] = typer.Argument(None, help="Path to the lock file (default: ./package-lock.json)"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
):
    """Check that a lock file's packages carry resolved and integrity metadata."""

    audit_service = AuditService()
    exit_code = audit_service.execute_audit(path=path, config_path=config_path)

    # Exit with appropriate code
    if exit_code != 0:
        sys.exit(exit_code)
