"""lockaudit - heuristic sanity check for dependency lock files."""

from .auditor import LockFileAuditor, audit_lock_file
from .exceptions import HeuristicRejection, LockAuditError, LockParseError
from .models import LockDocument, PackageEntry, Verdict, VerdictStatus
from .reader import load_lock_document, path_exists

__version__ = "0.1.0"

__all__ = [
    "LockFileAuditor",
    "audit_lock_file",
    "HeuristicRejection",
    "LockAuditError",
    "LockParseError",
    "LockDocument",
    "PackageEntry",
    "Verdict",
    "VerdictStatus",
    "load_lock_document",
    "path_exists",
]
