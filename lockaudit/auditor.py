"""
Lock-file auditor for lockaudit.

Decides whether a lock file looks structurally sound by checking how many of
its package entries carry both a ``resolved`` location and an ``integrity``
checksum. A lock file can be valid JSON and still be degenerate, e.g. when a
tool/version mismatch drops resolution metadata. Majority voting over a
minimum sample tolerates legitimate entries without that metadata (local and
workspace packages) while still catching wholesale corruption.
"""
import logging
from typing import Callable, Optional, Tuple

from .models import (
    DEFAULT_LOCK_PATH,
    DEFAULT_MIN_PACKAGES,
    LockDocument,
    Verdict,
    VerdictStatus,
)
from .reader import load_lock_document, path_exists

ExistsFn = Callable[[str], bool]
LoadFn = Callable[[str], LockDocument]


class LockFileAuditor:
    """
    Heuristic lock-file auditor.

    The decision sequence is:
    1. Missing lock file passes (not this auditor's concern)
    2. Fewer than ``min_packages`` entries passes (too small to judge)
    3. Strictly more than half of the entries well-formed passes
    4. Anything else fails
    """

    def __init__(self, min_packages: int = DEFAULT_MIN_PACKAGES):
        """
        Initialize the auditor.

        Args:
            min_packages: Smallest package count the majority rule applies to
        """
        self.min_packages = min_packages
        self.logger = logging.getLogger(__name__)

    def audit(
        self,
        path: Optional[str] = None,
        exists_fn: ExistsFn = path_exists,
        load_fn: LoadFn = load_lock_document,
    ) -> Verdict:
        """
        Audit a lock file.

        Args:
            path: Lock file location, ``./package-lock.json`` when omitted
            exists_fn: Existence probe; unexpected I/O errors propagate
            load_fn: Decoder; parse errors propagate

        Returns:
            Verdict with the decision and a human-readable reason
        """
        if path is None:
            path = DEFAULT_LOCK_PATH

        if not exists_fn(path):
            return self._verdict(
                VerdictStatus.PASS,
                f"Path [{path}] does not exist: lock file absent, nothing to audit",
                path,
            )

        document = load_fn(path)

        total, well_formed = self.tally(document)
        self.logger.debug(f"Tallied {well_formed} well-formed of {total} packages in {path}")

        if total < self.min_packages:
            return self._verdict(
                VerdictStatus.PASS,
                f"Too few packages [{total}] to make a solid determination",
                path,
                well_formed,
                total,
            )

        if well_formed > total / 2:
            return self._verdict(
                VerdictStatus.PASS,
                f"[{well_formed} of {total}] packages are correct",
                path,
                well_formed,
                total,
            )

        return self._verdict(
            VerdictStatus.FAIL,
            f"Less than half of found packages in [{path}] seem to be in the right shape: "
            f"[{well_formed} of {total}]",
            path,
            well_formed,
            total,
        )

    @staticmethod
    def tally(document: LockDocument) -> Tuple[int, int]:
        """Return ``(total, well_formed)`` for the document's packages."""
        total = 0
        well_formed = 0
        for entry in document.packages.values():
            total += 1
            if entry.is_seemingly_correct:
                well_formed += 1
        return total, well_formed

    def _verdict(self, status: VerdictStatus, reason: str, path: str, well_formed: int = 0, total: int = 0) -> Verdict:
        self.logger.debug(f"Verdict {status.value}: {reason}")
        return Verdict(status=status, reason=reason, path=path, well_formed=well_formed, total=total)


def audit_lock_file(path: Optional[str] = None, min_packages: int = DEFAULT_MIN_PACKAGES) -> Verdict:
    """Audit ``path`` on the local filesystem."""
    return LockFileAuditor(min_packages=min_packages).audit(path)
