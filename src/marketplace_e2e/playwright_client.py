"""
Browser launch for the harness.

``PlaywrightClient`` owns the Playwright driver and one launched browser.
Every context it creates points at the active site (``base_url``) and
carries the configured action and navigation timeouts, so page objects
never set timeouts themselves. Role contexts with stored logins are made
by ``sessions.RoleSessions`` on top of ``client.browser``.

Usage:
    async with PlaywrightClient() as client:
        page = client.page
        await page.goto("wp-login.php")
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Optional

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

from marketplace_e2e.config import settings

logger = logging.getLogger(__name__)

ENGINES = ("chromium", "firefox", "webkit")


class PlaywrightClient:
    """Launched browser plus a default context for single-role use."""

    def __init__(
        self,
        browser_type: Optional[str] = None,
        headless: Optional[bool] = None,
        timeout: Optional[int] = None,
        storage_state_path: Optional[str] = None,
    ):
        """
        Args:
            browser_type: one of ENGINES (None = BROWSER setting)
            headless: None = PLAYWRIGHT_HEADLESS setting
            timeout: action timeout in ms; navigations get twice as long
            storage_state_path: stored login for the default context
        """
        self.browser_type = browser_type or settings.profile.browser
        if self.browser_type not in ENGINES:
            raise ValueError(f"Unknown browser {self.browser_type!r}; expected one of {ENGINES}")
        self.headless = settings.headless if headless is None else headless
        self.timeout = settings.default_timeout if timeout is None else timeout
        self.storage_state_path = storage_state_path

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None

    async def __aenter__(self) -> "PlaywrightClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def connect(self):
        """Start the driver, launch the engine and open the default page.

        A launch failure (engine not installed) stops the driver again
        before the error propagates.
        """
        self._playwright = await async_playwright().start()
        engine = getattr(self._playwright, self.browser_type)
        try:
            self._browser = await engine.launch(headless=self.headless)
        except Exception:
            await self._playwright.stop()
            self._playwright = None
            raise
        logger.info("Launched %s (headless=%s)", self.browser_type, self.headless)

        storage_state = self.storage_state_path
        if storage_state and not Path(storage_state).exists():
            logger.warning("Stored login %s not found; default context starts logged out", storage_state)
            storage_state = None
        self._context = await self.new_context(storage_state=storage_state)
        self._page = await self._context.new_page()

    async def new_context(self, **options: Any) -> BrowserContext:
        """New context on the active site with the harness timeouts.

        ``options`` go to ``Browser.new_context``; ``base_url`` defaults to
        the configured site.
        """
        options.setdefault("base_url", settings.url(""))
        if options.get("storage_state") is None:
            options.pop("storage_state", None)
        context = await self.browser.new_context(**options)
        context.set_default_timeout(self.timeout)
        context.set_default_navigation_timeout(self.timeout * 2)
        return context

    async def new_page(self) -> Page:
        """Another tab in the default context (shares its cookies)."""
        return await self.context.new_page()

    async def close(self):
        if self._context:
            await self._context.close()
            self._context = None
            self._page = None
        if self._browser:
            await self._browser.close()
            self._browser = None
        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

    @property
    def browser(self) -> Browser:
        if not self._browser:
            raise RuntimeError("Browser not launched; use 'async with' or call connect()")
        return self._browser

    @property
    def context(self) -> BrowserContext:
        if not self._context:
            raise RuntimeError("Browser not launched; use 'async with' or call connect()")
        return self._context

    @property
    def page(self) -> Page:
        if not self._page:
            raise RuntimeError("Browser not launched; use 'async with' or call connect()")
        return self._page


@asynccontextmanager
async def playwright_session(
    browser_type: Optional[str] = None,
    headless: Optional[bool] = None,
    base_url: Optional[str] = None,
) -> AsyncIterator[Page]:
    """Throwaway logged-out page, opened at ``base_url`` when given."""
    async with PlaywrightClient(browser_type=browser_type, headless=headless) as client:
        if base_url:
            await client.page.goto(base_url)
        yield client.page
