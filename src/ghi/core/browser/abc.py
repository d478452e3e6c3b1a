"""Abstract interface for opening URLs in a web browser."""

from abc import ABC, abstractmethod


class Browser(ABC):
    """Launches URLs without waiting for the browser process to exit."""

    @abstractmethod
    def open(self, url: str) -> None:
        """Open url in the user's browser.

        Raises:
            RuntimeError: If the browser could not be launched
        """
        ...
