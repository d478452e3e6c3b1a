"""Shared helpers for ghi tests."""

from tests.test_utils.issues import make_issue
from tests.test_utils.paths import sentinel_path

__all__ = ["make_issue", "sentinel_path"]
