"""Stand-ins for Playwright pages and the browser session."""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import List, Optional


class FakePage:
    def __init__(
        self,
        goto_error: Optional[Exception] = None,
        images_timed_out: bool = False,
        failures: Optional[dict] = None,
    ):
        self.goto_error = goto_error
        # method name -> exception raised when that method is called
        self.failures = failures or {}
        self.images_timed_out = images_timed_out
        self.url: Optional[str] = None
        self.goto_kwargs: dict = {}
        self.load_states: List[str] = []
        self.styles: List[str] = []
        self.evaluated: List[tuple] = []
        self.waited_ms: List[int] = []
        self.screenshots: List[dict] = []

    def _fail(self, method):
        if method in self.failures:
            raise self.failures[method]

    async def goto(self, url, **kwargs):
        self.url = url
        self.goto_kwargs = kwargs
        if self.goto_error is not None:
            raise self.goto_error

    async def wait_for_load_state(self, state, timeout=None):
        self._fail("wait_for_load_state")
        self.load_states.append(state)

    async def add_style_tag(self, content=None, **kwargs):
        self._fail("add_style_tag")
        self.styles.append(content)

    async def evaluate(self, expression, arg=None):
        self._fail("evaluate")
        self.evaluated.append((expression, arg))
        return {"pending": 2 if self.images_timed_out else 0, "timedOut": self.images_timed_out}

    async def wait_for_timeout(self, timeout):
        self._fail("wait_for_timeout")
        self.waited_ms.append(timeout)

    async def screenshot(self, path=None, full_page=False, **kwargs):
        self._fail("screenshot")
        self.screenshots.append({"path": path, "full_page": full_page})
        Path(path).write_bytes(b"\x89PNG fake")

    async def content(self):
        self._fail("content")
        return f"<html><body>rendered {self.url}</body></html>"


class FakeSession:
    """Hands out a fresh FakePage per call and counts open/close pairs."""

    def __init__(self, **page_kwargs):
        self.page_kwargs = page_kwargs
        self.pages: List[FakePage] = []
        self.sizes: List[tuple] = []
        self.closed = 0

    @asynccontextmanager
    async def page(self, width, height):
        page = FakePage(**self.page_kwargs)
        self.pages.append(page)
        self.sizes.append((width, height))
        try:
            yield page
        finally:
            self.closed += 1


class FakeContext:
    """Collects the messages a tool sends through the MCP context."""

    def __init__(self):
        self.infos: List[str] = []
        self.errors: List[str] = []

    async def info(self, message):
        self.infos.append(message)

    async def error(self, message):
        self.errors.append(message)
