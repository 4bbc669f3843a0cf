"""
File Previewer
---------
Render a local HTML file in the shared browser, inject its stylesheets, wait
for images to settle and save a full-page screenshot.
"""

import inspect
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, Tuple, Union

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from previewer.browser_session import BrowserSession
from previewer.errors import (
    CaptureError,
    InvalidArgumentError,
    NavigationError,
    NavigationTimeoutError,
    NotFoundError,
    StyleResourceError,
)

logger = logging.getLogger("FilePreviewer")

DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 768

SHARED_STYLESHEET = "style.css"

# plain function or coroutine function, e.g. logger.info or ctx.info
InfoCallback = Callable[[str], Union[None, Awaitable[Any]]]

# Resolves once every image pending on entry has fired load or error, or when
# the timer expires. Images inserted afterwards are not awaited.
WAIT_FOR_IMAGES_JS = """(timeoutMs) => {
    const pending = Array.from(document.images).filter(img => !img.complete);
    const settled = Promise.all(pending.map(img => new Promise(resolve => {
        img.addEventListener('load', resolve, { once: true });
        img.addEventListener('error', resolve, { once: true });
    }))).then(() => ({ pending: pending.length, timedOut: false }));
    const timer = new Promise(resolve => setTimeout(
        () => resolve({ pending: pending.length, timedOut: true }), timeoutMs));
    return Promise.race([settled, timer]);
}"""


@dataclass
class PreviewResult:
    screenshot_path: str
    content: str


def check_dimension(name: str, value: Any) -> None:
    """Viewport sizes must be integers of at least 1."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidArgumentError(name, value)


async def _call(callback: InfoCallback, message: str) -> None:
    result = callback(message)
    if inspect.isawaitable(result):
        await result


def resolve_input(file_path: str) -> Path:
    """Normalise ``file_path`` and make sure it names an existing file."""
    path = Path(file_path).expanduser().resolve()
    if not path.is_file():
        raise NotFoundError(file_path)
    return path


def stylesheet_paths(target: Path) -> tuple[Path, Path]:
    """Return (shared stylesheet one level up, per-page stylesheet beside the file)."""
    shared = target.parent.parent / SHARED_STYLESHEET
    per_page = target.with_suffix(".css")
    return shared, per_page


def screenshot_name(target: Path, now_ms: Optional[int] = None) -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{target.stem}_{now_ms}.png"


class FilePreviewer:
    """
    Drives the render-and-capture workflow for one file at a time.

    Parameters:
        session: Shared browser session pages are opened in
        screenshots_dir: Directory screenshots are written to
        navigation_timeout_ms: Bound on page navigation
        image_timeout_ms: Bound on the image-load barrier
        settle_ms: Grace delay before capture
        info_callback: Progress notifications
    """

    def __init__(
        self,
        session: BrowserSession,
        screenshots_dir: Path,
        navigation_timeout_ms: int = 30_000,
        image_timeout_ms: int = 10_000,
        settle_ms: int = 1_000,
        info_callback: Optional[InfoCallback] = None,
    ):
        self.session = session
        self.screenshots_dir = Path(screenshots_dir)
        self.navigation_timeout_ms = navigation_timeout_ms
        self.image_timeout_ms = image_timeout_ms
        self.settle_ms = settle_ms
        self.info_callback = info_callback or (lambda msg: logger.info(msg))

    async def preview(
        self,
        file_path: str,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        *,
        info_callback: Optional[InfoCallback] = None,
    ) -> PreviewResult:
        """
        Render ``file_path`` and capture it.

        Parameters:
            info_callback: Overrides the previewer's callback for this call;
                may be a coroutine function such as ``ctx.info``
        """
        check_dimension("width", width)
        check_dimension("height", height)
        target = resolve_input(file_path)
        notify = info_callback or self.info_callback

        async with self.session.page(width, height) as page:
            await self._navigate(page, target)
            await self._inject_styles(page, target)
            screenshot_path, content = await self._capture(page, target)

        await _call(notify, f"Screenshot saved to {screenshot_path}")
        return PreviewResult(screenshot_path=str(screenshot_path), content=content)

    async def _navigate(self, page: Page, target: Path) -> None:
        url = target.as_uri()
        try:
            await page.goto(url, wait_until="networkidle", timeout=self.navigation_timeout_ms)
            await page.wait_for_load_state("load", timeout=self.navigation_timeout_ms)
            await page.wait_for_load_state("domcontentloaded", timeout=self.navigation_timeout_ms)
        except PlaywrightTimeoutError as e:
            raise NavigationTimeoutError(url, self.navigation_timeout_ms) from e
        except PlaywrightError as e:
            raise NavigationError(f"Navigation to {url} failed: {e}") from e
        logger.debug("Loaded %s", url)

    async def _inject_styles(self, page: Page, target: Path) -> None:
        # both stylesheets are mandatory
        for css_path in stylesheet_paths(target):
            try:
                css = css_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise StyleResourceError(str(css_path), str(e)) from e
            try:
                await page.add_style_tag(content=css)
            except PlaywrightError as e:
                raise StyleResourceError(str(css_path), f"injection failed: {e}") from e

    async def _capture(self, page: Page, target: Path) -> Tuple[Path, str]:
        try:
            await self._wait_for_images(page)
            await page.wait_for_timeout(self.settle_ms)

            self.screenshots_dir.mkdir(parents=True, exist_ok=True)
            screenshot_path = (self.screenshots_dir / screenshot_name(target)).resolve()
            await page.screenshot(path=str(screenshot_path), full_page=True)

            content = await page.content()
        except (PlaywrightError, OSError) as e:
            raise CaptureError(f"Capture of {target} failed: {e}") from e
        return screenshot_path, content

    async def _wait_for_images(self, page: Page) -> None:
        outcome = await page.evaluate(WAIT_FOR_IMAGES_JS, self.image_timeout_ms)
        if outcome and outcome.get("timedOut"):
            logger.warning(
                "%d image(s) still loading after %d ms, capturing anyway",
                outcome.get("pending", 0),
                self.image_timeout_ms,
            )
