"""
Per-role browser sessions.

Each role (admin, vendor, customer, guest) gets its own ``BrowserContext``,
so cookies and storage never leak between actors. Logged-in roles start
from a storage state written once by ``login_and_save_state``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, TypedDict

from playwright.async_api import Browser, BrowserContext, Page, TimeoutError as PlaywrightTimeout

from marketplace_e2e.config import Credentials, settings
from marketplace_e2e.data import sub_urls
from marketplace_e2e.errors import FixtureSetupFailure
from marketplace_e2e.selectors import Common

logger = logging.getLogger(__name__)


class ViewportSize(TypedDict):
    width: int
    height: int


@dataclass
class SessionHandle:
    """Handle to one role's browser session."""
    role: str
    context: BrowserContext
    page: Page
    storage_state: Optional[Path] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"SessionHandle(role={self.role}, state={self.storage_state})"


async def login_and_save_state(
    browser: Browser,
    role: str,
    credentials: Optional[Credentials] = None,
    path: Optional[Path] = None,
) -> Path:
    """
    Log ``role`` in through wp-login.php and store the storage state.

    Args:
        browser: Launched Playwright browser
        role: admin, vendor or customer
        credentials: Overrides the configured credentials for ``role``
        path: Where to write the state (default: settings.auth_state_path(role))

    Returns:
        Path of the written storage state file
    """
    credentials = credentials or settings.credentials(role)
    path = Path(path or settings.auth_state_path(role))
    path.parent.mkdir(parents=True, exist_ok=True)

    context = await browser.new_context()
    context.set_default_timeout(settings.default_timeout)
    try:
        page = await context.new_page()
        await page.goto(settings.url(sub_urls.login))
        await page.fill(Common.Login.username.selector, credentials.username)
        await page.fill(Common.Login.password.selector, credentials.password)
        await page.click(Common.Login.submit.selector)
        try:
            await page.wait_for_url(lambda url: sub_urls.login not in url)
        except PlaywrightTimeout as exc:
            error = ""
            if await page.locator(Common.Login.error.selector).count():
                error = (await page.locator(Common.Login.error.selector).inner_text()).strip()
            raise FixtureSetupFailure(
                operation="login_and_save_state",
                payload={"endpoint": sub_urls.login, "status": "login rejected", "role": role},
                message=error or str(exc),
            ) from exc
        await context.storage_state(path=str(path))
    finally:
        await context.close()

    logger.info("Saved %s auth state to %s", role, path)
    return path


class RoleSessions:
    """
    One isolated browser context per role, for the lifetime of a test module.

    Usage:
        async with RoleSessions(browser) as sessions:
            admin = await sessions.page("admin")
            vendor = await sessions.page("vendor")
    """

    DEFAULT_VIEWPORT: ViewportSize = {"width": 1280, "height": 900}

    def __init__(
        self,
        browser: Browser,
        base_url: Optional[str] = None,
        viewport: Optional[ViewportSize] = None,
        auth_state_dir: Optional[Path] = None,
    ):
        self.browser = browser
        self.base_url = base_url or settings.url("")
        self.viewport: ViewportSize = viewport or self.DEFAULT_VIEWPORT
        self.auth_state_dir = Path(auth_state_dir) if auth_state_dir else None
        self.sessions: Dict[str, SessionHandle] = {}

    async def __aenter__(self) -> "RoleSessions":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close_all()

    def state_path(self, role: str) -> Path:
        if self.auth_state_dir is not None:
            return self.auth_state_dir / settings.auth_state_path(role).name
        return settings.auth_state_path(role)

    async def session(self, role: str) -> SessionHandle:
        """Get or create the session for ``role``.

        Guests start with an empty context; every other role requires the
        stored auth state to exist.
        """
        if role in self.sessions:
            return self.sessions[role]

        storage_state: Optional[Path] = None
        if role != "guest":
            storage_state = self.state_path(role)
            if not storage_state.exists():
                raise FixtureSetupFailure(
                    operation="create_role_session",
                    payload={"endpoint": str(storage_state), "status": "missing", "role": role},
                    message="no stored auth state; run login_and_save_state first",
                )

        context = await self.browser.new_context(
            viewport=self.viewport,
            base_url=self.base_url,
            storage_state=str(storage_state) if storage_state else None,
        )
        context.set_default_timeout(settings.default_timeout)
        context.set_default_navigation_timeout(settings.default_timeout * 2)
        page = await context.new_page()

        handle = SessionHandle(role=role, context=context, page=page, storage_state=storage_state)
        self.sessions[role] = handle
        logger.debug("Created session: %s", handle)
        return handle

    async def page(self, role: str) -> Page:
        return (await self.session(role)).page

    async def close_session(self, role: str) -> None:
        handle = self.sessions.pop(role, None)
        if handle is None:
            return
        try:
            await handle.context.close()
            logger.debug("Closed session: %s", handle)
        except Exception as e:
            logger.warning("Error closing session %s: %s", role, e)

    async def close_all(self) -> None:
        for role in list(self.sessions.keys()):
            await self.close_session(role)
