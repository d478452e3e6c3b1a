"""Fake browser for testing."""

from ghi.core.browser.abc import Browser


class FakeBrowser(Browser):
    """Records opened URLs instead of launching anything."""

    def __init__(self, *, error: str | None = None) -> None:
        """Create FakeBrowser.

        Args:
            error: If set, open() raises RuntimeError with this message
        """
        self._error = error
        self._opened_urls: list[str] = []

    @property
    def opened_urls(self) -> list[str]:
        """Read-only access to URLs passed to open()."""
        return self._opened_urls

    def open(self, url: str) -> None:
        if self._error is not None:
            raise RuntimeError(self._error)
        self._opened_urls.append(url)
