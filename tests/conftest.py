"""Shared fixtures for the harness's own tests.

Browser tests run against ``ui_tests/mock_marketplace.py`` served from a
background thread, with the active profile pointed at it. Tier and module
state of the mock site come from the ``marketplace`` marker::

    @pytest.mark.marketplace(pro=True, modules=("live_search",))
    async def test_something(admin_page): ...

Browser fixtures skip the test when no Chromium build is installed.
"""
import sys
from pathlib import Path

import pytest
import pytest_asyncio
from playwright.async_api import Error as PlaywrightError

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from marketplace_e2e.api_utils import ApiUtils
from marketplace_e2e.config import Credentials, settings
from marketplace_e2e.db_utils import DbUtils
from marketplace_e2e.playwright_client import PlaywrightClient
from marketplace_e2e.sessions import RoleSessions, login_and_save_state
from ui_tests.mock_marketplace import MockMarketplaceServer, create_mock_marketplace_app

USERS = {
    "admin": Credentials("admin", "password01"),
    "vendor": Credentials("vendor1", "password01"),
    "customer": Credentials("customer1", "password01"),
}
VENDOR_ID = 2


@pytest.fixture
def marketplace_options(request):
    marker = request.node.get_closest_marker("marketplace")
    options = dict(marker.kwargs) if marker else {}
    return {"pro": bool(options.get("pro", False)), "modules": tuple(options.get("modules", ()))}


@pytest.fixture
def db_url(tmp_path):
    # a file database: the server thread and the test share it
    return f"sqlite:///{tmp_path / 'marketplace.db'}"


@pytest.fixture
def marketplace_server(marketplace_options, db_url, tmp_path):
    """Running mock marketplace with the active profile pointed at it."""
    app = create_mock_marketplace_app(
        db_url,
        pro=marketplace_options["pro"],
        modules=marketplace_options["modules"],
        users=USERS,
        vendor_id=VENDOR_ID,
    )
    server = MockMarketplaceServer(app).start()
    with settings.override(
        base_url=server.url,
        pro=marketplace_options["pro"],
        modules=frozenset(marketplace_options["modules"]),
        users=dict(USERS),
        vendor_id=VENDOR_ID,
        db_url=db_url,
        db_prefix="wp_",
        headless=True,
        browser="chromium",
        default_timeout=5000,
        expect_timeout=5000,
        auth_state_dir=tmp_path / "auth-states",
        lock_dir=tmp_path / "locks",
    ):
        yield server
    server.stop()


@pytest_asyncio.fixture
async def api(marketplace_server):
    async with ApiUtils(base_url=marketplace_server.url, credentials=USERS, timeout=10.0) as client:
        yield client


@pytest.fixture
def db(marketplace_server, db_url):
    utils = DbUtils(db_url, "wp_")
    yield utils
    utils.dispose()


@pytest_asyncio.fixture
async def playwright_client(marketplace_server):
    client = PlaywrightClient(browser_type="chromium", headless=True)
    try:
        await client.connect()
    except PlaywrightError as exc:
        pytest.skip(f"chromium is not available: {str(exc).splitlines()[0]}")
    try:
        yield client
    finally:
        await client.close()


@pytest_asyncio.fixture
async def auth_states(playwright_client):
    """Stored login state for admin and vendor, written the way global setup does."""
    return {
        role: await login_and_save_state(playwright_client.browser, role)
        for role in ("admin", "vendor")
    }


@pytest_asyncio.fixture
async def role_sessions(playwright_client, auth_states):
    async with RoleSessions(playwright_client.browser) as sessions:
        yield sessions


@pytest_asyncio.fixture
async def admin_page(role_sessions):
    return await role_sessions.page("admin")


@pytest_asyncio.fixture
async def vendor_page(role_sessions):
    return await role_sessions.page("vendor")
