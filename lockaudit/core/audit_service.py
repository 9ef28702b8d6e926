"""
Audit service implementation for lockaudit.

Owns the translation from an audit outcome to console output and an exit
code, keeping the auditor itself free of process-global side effects.
"""
import logging
from typing import Optional

import yaml

from lockaudit.auditor import LockFileAuditor
from lockaudit.exceptions import HeuristicRejection, LockAuditError
from lockaudit.models import AuditSettings, Verdict
from lockaudit.rich_utils.ui_helpers import get_console, get_error_console

from lockaudit.core.config_manager import ConfigManager, is_debug_enabled

EXIT_OK = 0
EXIT_FAILURE = 1


class AuditService:
    """Runs an audit and reports its outcome."""

    def __init__(self):
        self.config_manager = ConfigManager()
        self.console = get_console()
        self.error_console = get_error_console()
        self.logger = logging.getLogger(__name__)

    def initialize_audit(self, path: Optional[str], config_path: Optional[str]) -> AuditSettings:
        """Load configuration and merge CLI arguments."""
        config = self.config_manager.discover_and_load_config(config_path)
        return self.config_manager.resolve_settings(config, path, is_debug_enabled())

    def run_audit(self, settings: AuditSettings) -> Verdict:
        """Audit the configured lock file."""
        auditor = LockFileAuditor(min_packages=settings.min_packages)
        return auditor.audit(settings.lock_path)

    def execute_audit(self, path: Optional[str] = None, config_path: Optional[str] = None) -> int:
        """Execute the complete audit workflow and return an exit code."""
        try:
            settings = self.initialize_audit(path, config_path)
            verdict = self.run_audit(settings)
            verdict.raise_for_failure()
        except HeuristicRejection as e:
            self._report_failure("REJECTED", e.message)
            return EXIT_FAILURE
        except (LockAuditError, OSError, ValueError, yaml.YAMLError) as e:
            self.logger.debug("Audit aborted", exc_info=True)
            self._report_failure("ERROR", e)
            return EXIT_FAILURE

        if settings.debug:
            self._debug(verdict.reason)
            self._debug(str(verdict.passed))
        return EXIT_OK

    def _debug(self, message: str) -> None:
        self.console.print(message, markup=False, emoji=False, soft_wrap=True)

    def _report_failure(self, label: str, detail) -> None:
        self.error_console.print(label, markup=False, emoji=False)
        self.error_console.print(str(detail), markup=False, emoji=False, soft_wrap=True)
