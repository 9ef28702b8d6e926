"""
Exceptions raised while auditing a lock file.

Each exception includes:
- Clear error message
- Path of the lock file being audited
- Original exception preserved for debugging
"""

from typing import Optional


class LockAuditError(Exception):
    """Base exception for all lock-file audit errors."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        """
        Initialize LockAuditError.

        Args:
            message: Human-readable error message
            path: Lock file the error refers to
            original_exception: The original exception that was caught
        """
        self.message = message
        self.path = path
        self.original_exception = original_exception

        error_parts = [message]

        if path:
            error_parts.append(f"Path: {path}")

        if original_exception:
            error_parts.append(f"Original error: {str(original_exception)}")

        super().__init__(" | ".join(error_parts))


class LockParseError(LockAuditError):
    """
    Raised when the lock file exists but cannot be decoded.

    This typically indicates:
    - Truncated or corrupt file
    - Merge conflict markers left in the file
    - Wrong file passed on the command line
    """


class HeuristicRejection(LockAuditError):
    """Raised when most packages in the lock file lack resolution metadata."""

    def __init__(self, message: str, path: Optional[str] = None, well_formed: int = 0, total: int = 0):
        self.well_formed = well_formed
        self.total = total
        super().__init__(message, path=path)


__all__ = [
    "LockAuditError",
    "LockParseError",
    "HeuristicRejection",
]
