"""
Tests for LockFileAuditor

Covers the existence gate, the small-sample exemption, the strict majority
rule and propagation of decode and I/O errors.
"""

import json

import pytest

from lockaudit.auditor import LockFileAuditor, audit_lock_file
from lockaudit.exceptions import HeuristicRejection, LockParseError
from lockaudit.models import LockDocument, PackageEntry, VerdictStatus


GOOD = {"resolved": "https://registry.npmjs.org/a/-/a-1.0.0.tgz", "integrity": "sha512-abc"}


def make_document(n_good, n_bad):
    packages = {f"node_modules/good-{i}": PackageEntry(**GOOD) for i in range(n_good)}
    packages.update({f"node_modules/bad-{i}": PackageEntry() for i in range(n_bad)})
    return LockDocument(packages=packages)


def write_lock(tmp_path, packages, name="package-lock.json"):
    path = tmp_path / name
    path.write_text(json.dumps({"name": "demo", "lockfileVersion": 3, "packages": packages}))
    return str(path)


class TestLockFileAuditor:
    """Test cases for the audit decision sequence"""

    def setup_method(self):
        """Setup for each test"""
        self.auditor = LockFileAuditor()

    def audit_document(self, document, path="package-lock.json"):
        return self.auditor.audit(path, exists_fn=lambda p: True, load_fn=lambda p: document)

    def test_missing_file_passes(self):
        """Absent lock file passes and is never loaded"""
        def load_fn(path):
            raise AssertionError("load_fn must not be called")

        verdict = self.auditor.audit("missing.json", exists_fn=lambda p: False, load_fn=load_fn)

        assert verdict.passed
        assert verdict.status is VerdictStatus.PASS
        assert "does not exist" in verdict.reason
        assert "missing.json" in verdict.reason

    def test_default_path(self):
        """Default path is used when none is supplied"""
        seen = []

        def exists_fn(path):
            seen.append(path)
            return False

        verdict = self.auditor.audit(exists_fn=exists_fn)
        assert seen == ["./package-lock.json"]
        assert verdict.path == "./package-lock.json"

    @pytest.mark.parametrize("n_good,n_bad", [(0, 0), (0, 1), (0, 2), (1, 1)])
    def test_small_sample_exemption(self, n_good, n_bad):
        """Fewer than three packages always passes"""
        verdict = self.audit_document(make_document(n_good, n_bad))
        assert verdict.passed
        assert "Too few packages" in verdict.reason
        assert verdict.total == n_good + n_bad

    def test_exactly_half_fails(self):
        """Two of four is not a strict majority"""
        verdict = self.audit_document(make_document(2, 2))
        assert verdict.status is VerdictStatus.FAIL
        assert verdict.well_formed == 2
        assert verdict.total == 4

    def test_strict_majority_passes(self):
        """Three of four passes"""
        verdict = self.audit_document(make_document(3, 1))
        assert verdict.passed
        assert "[3 of 4]" in verdict.reason

    def test_three_packages_none_correct_fails(self):
        """Threshold of three packages is inclusive"""
        verdict = self.audit_document(make_document(0, 3))
        assert not verdict.passed

    def test_failure_reason_cites_path_and_ratio(self):
        """Fail verdict names the file and the ratio"""
        verdict = self.audit_document(make_document(2, 3), path="web/package-lock.json")
        assert not verdict.passed
        assert "web/package-lock.json" in verdict.reason
        assert "2 of 5" in verdict.reason

    def test_raise_for_failure(self):
        """Fail verdict converts to HeuristicRejection"""
        verdict = self.audit_document(make_document(1, 4))
        with pytest.raises(HeuristicRejection) as exc_info:
            verdict.raise_for_failure()
        assert exc_info.value.well_formed == 1
        assert exc_info.value.total == 5

    def test_raise_for_failure_noop_on_pass(self):
        """Pass verdict does not raise"""
        self.audit_document(make_document(4, 1)).raise_for_failure()

    def test_empty_fields_are_not_correct(self):
        """Empty strings count as missing metadata"""
        document = LockDocument(packages={
            "a": PackageEntry(resolved="", integrity="sha512-x"),
            "b": PackageEntry(resolved="https://x", integrity=""),
            "c": PackageEntry(resolved="https://x", integrity="sha512-x"),
        })
        verdict = self.audit_document(document)
        assert verdict.well_formed == 1
        assert not verdict.passed

    def test_custom_min_packages(self):
        """Small-sample threshold is configurable"""
        auditor = LockFileAuditor(min_packages=10)
        verdict = auditor.audit("x", exists_fn=lambda p: True, load_fn=lambda p: make_document(0, 5))
        assert verdict.passed

    def test_parse_error_propagates(self):
        """Decode failures are fatal, not a pass"""
        def load_fn(path):
            raise LockParseError("Invalid JSON syntax", path=path)

        with pytest.raises(LockParseError):
            self.auditor.audit("x", exists_fn=lambda p: True, load_fn=load_fn)

    def test_exists_error_propagates(self):
        """Unexpected I/O errors in the existence probe surface unchanged"""
        def exists_fn(path):
            raise PermissionError("denied")

        with pytest.raises(PermissionError):
            self.auditor.audit("x", exists_fn=exists_fn)


class TestAuditLockFile:
    """End-to-end audits against real files"""

    def test_scenario_missing_file(self, tmp_path):
        verdict = audit_lock_file(str(tmp_path / "package-lock.json"))
        assert verdict.passed
        assert "does not exist" in verdict.reason

    def test_scenario_two_empty_entries(self, tmp_path):
        path = write_lock(tmp_path, {"a": {}, "b": {}})
        verdict = audit_lock_file(path)
        assert verdict.passed
        assert verdict.total == 2

    def test_scenario_four_of_five(self, tmp_path):
        packages = {f"p{i}": dict(GOOD) for i in range(4)}
        packages["p4"] = {"version": "1.0.0"}
        verdict = audit_lock_file(write_lock(tmp_path, packages))
        assert verdict.passed

    def test_scenario_two_of_five(self, tmp_path):
        packages = {f"p{i}": dict(GOOD) for i in range(2)}
        packages.update({f"q{i}": {"version": "1.0.0"} for i in range(3)})
        path = write_lock(tmp_path, packages)
        verdict = audit_lock_file(path)
        assert not verdict.passed
        assert "2 of 5" in verdict.reason

    def test_scenario_invalid_json(self, tmp_path):
        path = tmp_path / "package-lock.json"
        path.write_text("{not json")
        with pytest.raises(LockParseError):
            audit_lock_file(str(path))

    def test_idempotent(self, tmp_path):
        packages = {f"p{i}": dict(GOOD) for i in range(2)}
        packages.update({f"q{i}": {} for i in range(2)})
        path = write_lock(tmp_path, packages)
        assert audit_lock_file(path) == audit_lock_file(path)
