"""
Data models for lock-file auditing.

Plain dataclasses describing the decoded lock file and the verdict
produced for a single invocation.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .exceptions import HeuristicRejection

DEFAULT_LOCK_PATH = "./package-lock.json"
DEFAULT_MIN_PACKAGES = 3


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


@dataclass(frozen=True)
class PackageEntry:
    """A single ``packages`` entry; only resolution metadata is inspected."""
    resolved: Optional[str] = None
    integrity: Optional[str] = None

    @property
    def is_seemingly_correct(self) -> bool:
        """Both a resolution location and an integrity checksum are present."""
        return bool(self.resolved) and bool(self.integrity)

    @classmethod
    def from_raw(cls, value: Any) -> "PackageEntry":
        if not isinstance(value, Mapping):
            return cls()
        return cls(
            resolved=_optional_str(value.get("resolved")),
            integrity=_optional_str(value.get("integrity")),
        )


@dataclass(frozen=True)
class LockDocument:
    """Decoded lock file."""
    packages: Mapping[str, PackageEntry] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, data: Any) -> "LockDocument":
        """Build a document from decoded JSON.

        Any shape other than an object with a ``packages`` object yields an
        empty document rather than an error.
        """
        raw_packages = data.get("packages") if isinstance(data, Mapping) else None
        if not isinstance(raw_packages, Mapping):
            raw_packages = {}

        packages = {str(key): PackageEntry.from_raw(value) for key, value in raw_packages.items()}
        return cls(packages=MappingProxyType(packages))


class VerdictStatus(Enum):
    """Verdict status enumeration"""
    PASS = "pass"
    FAIL = "fail"


@dataclass(frozen=True)
class Verdict:
    """Outcome of auditing one lock file."""
    status: VerdictStatus
    reason: str
    path: str
    well_formed: int = 0
    total: int = 0

    @property
    def passed(self) -> bool:
        return self.status is VerdictStatus.PASS

    def raise_for_failure(self) -> None:
        """Raise HeuristicRejection if this verdict is a failure."""
        if not self.passed:
            raise HeuristicRejection(
                self.reason,
                path=self.path,
                well_formed=self.well_formed,
                total=self.total,
            )


@dataclass
class AuditSettings:
    """Settings resolved for a single audit run."""
    lock_path: str = DEFAULT_LOCK_PATH
    min_packages: int = DEFAULT_MIN_PACKAGES
    debug: bool = False
