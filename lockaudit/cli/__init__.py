"""
CLI module for lockaudit.
"""
from lockaudit.cli.app import app as _app
from lockaudit.core.config_manager import is_debug_enabled
from lockaudit.logging_config import configure_logging

# Export app function for pyproject.toml entry point
def app():
    """Entry point function for pyproject.toml scripts."""
    configure_logging(is_debug_enabled())
    _app()

__all__ = ['app']
