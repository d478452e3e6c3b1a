"""Production browser launcher built on click.launch."""

import logging

import click

from ghi.core.browser.abc import Browser

logger = logging.getLogger(__name__)


class RealBrowser(Browser):
    """Opens URLs with the platform's default handler."""

    def open(self, url: str) -> None:
        logger.debug("Launching browser for %s", url)
        status = click.launch(url, wait=False)
        if status != 0:
            msg = f"Failed to open {url} in the browser (launcher exited with {status})"
            raise RuntimeError(msg)
