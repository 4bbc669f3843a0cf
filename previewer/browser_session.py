"""
Browser Session
---------
Owns the single Playwright browser used by every preview in this process.
The browser is launched on first use and closed on shutdown; each preview
gets its own short-lived context and page.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

from playwright.async_api import Browser, Page, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

from previewer.errors import EngineLaunchError

logger = logging.getLogger("BrowserSession")

LAUNCH_ARGS = [
    "--allow-file-access-from-files",  # lift file:// cross-origin restrictions
]

EXTRA_HTTP_HEADERS: Dict[str, str] = {
    "Accept-Language": "en-US,en;q=0.9",
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) Chrome/91.0.4472.114",
}


class BrowserSession:
    """
    Lazily launched, process-wide Playwright Chromium browser.

    Parameters:
        headless: Launch Chromium without a window
    """

    def __init__(self, headless: bool = True):
        self.headless = headless
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._lock = asyncio.Lock()

    @property
    def is_open(self) -> bool:
        return self._browser is not None

    async def acquire(self) -> Browser:
        """
        Return the shared browser, launching it if necessary.

        Raises:
            EngineLaunchError: Chromium could not be started
        """
        async with self._lock:
            if self._browser is not None:
                return self._browser

            playwright = await async_playwright().start()
            try:
                self._browser = await playwright.chromium.launch(
                    headless=self.headless,
                    args=LAUNCH_ARGS,
                )
            except PlaywrightError as e:
                await playwright.stop()
                raise EngineLaunchError(f"Failed to launch Chromium: {e}") from e

            self._playwright = playwright
            logger.info("Playwright browser launched (headless=%s)", self.headless)
            return self._browser

    async def release(self) -> None:
        """Close the browser if it is open. Calling it again is a no-op."""
        async with self._lock:
            if self._browser is not None:
                logger.info("Quitting Playwright browser")
                browser, self._browser = self._browser, None
                await browser.close()
            if self._playwright is not None:
                playwright, self._playwright = self._playwright, None
                await playwright.stop()

    @asynccontextmanager
    async def page(self, width: int, height: int) -> AsyncIterator[Page]:
        """
        Open a page in a fresh context sized ``width`` x ``height`` with CSP
        enforcement disabled and fixed language/user-agent headers. The
        context is closed when the block exits, whether or not it raised.
        """
        browser = await self.acquire()
        try:
            context = await browser.new_context(
                viewport={"width": width, "height": height},
                bypass_csp=True,
                user_agent=EXTRA_HTTP_HEADERS["User-Agent"],
                extra_http_headers=EXTRA_HTTP_HEADERS,
            )
        except PlaywrightError as e:
            raise EngineLaunchError(f"Failed to open a browser context: {e}") from e
        try:
            try:
                page = await context.new_page()
            except PlaywrightError as e:
                raise EngineLaunchError(f"Failed to open a page: {e}") from e
            yield page
        finally:
            await context.close()
