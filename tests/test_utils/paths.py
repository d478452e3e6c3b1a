"""Path utilities for tests.

This module provides utilities for working with paths in tests, particularly
sentinel paths that allow tests to avoid unnecessary filesystem dependencies.
"""

from pathlib import Path


def sentinel_path() -> Path:
    """Return sentinel path for tests that don't need real filesystem.

    Use this when testing pure logic (CLI exit codes, error messages, validation)
    that doesn't actually perform filesystem I/O.

    Note:
        - GhiContext.for_test() accepts any Path without validating existence
        - FakeGit returns its configured root for any cwd
        - All tests share the same sentinel path - tests are isolated via separate
          GhiContext instances, not different paths
    """
    return Path("/test/sentinel")
