"""
Fixtures for the live marketplace journeys.

Target site, credentials and tier come from the environment (see
``marketplace_e2e.config``). Each journey module gets its own browser,
one context per role built from stored auth state, and API/DB clients for
seeding. Global settings a module touches are locked and snapshotted so
teardown puts them back whatever the outcome.
"""
import logging
import sys
from pathlib import Path

import pytest
import pytest_asyncio

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from marketplace_e2e.api_utils import ApiUtils
from marketplace_e2e.config import settings
from marketplace_e2e.db_utils import DbUtils
from marketplace_e2e.payloads import DOKAN_SETTINGS_OPTIONS, module_ids
from marketplace_e2e.playwright_client import PlaywrightClient
from marketplace_e2e.sessions import RoleSessions, login_and_save_state
from marketplace_e2e.shared_state import SettingsSnapshot, SharedResource

logger = logging.getLogger(__name__)

LOGGED_IN_ROLES = ("admin", "vendor")


def pytest_addoption(parser):
    parser.addoption(
        "--run-exploratory",
        action="store_true",
        default=False,
        help="also run journeys marked exploratory",
    )


def pytest_collection_modifyitems(config, items):
    """Skip pro journeys on a lite site and exploratory ones unless asked."""
    skip_pro = pytest.mark.skip(reason="site runs the lite tier (DOKAN_PRO is off)")
    skip_exploratory = pytest.mark.skip(reason="exploratory journey; pass --run-exploratory")
    run_exploratory = config.getoption("--run-exploratory")
    for item in items:
        if "pro" in item.keywords and not settings.pro:
            item.add_marker(skip_pro)
        if "exploratory" in item.keywords and not run_exploratory:
            item.add_marker(skip_exploratory)


# ============================================================================
# Browser and per-role sessions
# ============================================================================

@pytest_asyncio.fixture(scope="module", loop_scope="module")
async def playwright_client():
    """One browser per journey module."""
    async with PlaywrightClient(browser_type=settings.profile.browser, headless=settings.headless) as client:
        yield client


@pytest_asyncio.fixture(scope="module", loop_scope="module")
async def auth_states(playwright_client):
    """Stored login state for every logged-in role.

    Written once and reused by later modules; delete the files under
    AUTH_STATE_DIR to force a fresh login.
    """
    states = {}
    for role in LOGGED_IN_ROLES:
        path = settings.auth_state_path(role)
        if not path.exists():
            await login_and_save_state(playwright_client.browser, role)
        states[role] = path
    return states


@pytest_asyncio.fixture(scope="module", loop_scope="module")
async def role_sessions(playwright_client, auth_states):
    async with RoleSessions(playwright_client.browser) as sessions:
        yield sessions


@pytest_asyncio.fixture(scope="module", loop_scope="module")
async def admin_page(role_sessions):
    return await role_sessions.page("admin")


@pytest_asyncio.fixture(scope="module", loop_scope="module")
async def vendor_page(role_sessions):
    return await role_sessions.page("vendor")


# ============================================================================
# Seeding and restore
# ============================================================================

@pytest_asyncio.fixture(scope="module", loop_scope="module")
async def api():
    async with ApiUtils() as client:
        yield client


@pytest.fixture(scope="module")
def db():
    utils = DbUtils(settings.profile.db_url, settings.profile.db_prefix)
    yield utils
    utils.dispose()


@pytest_asyncio.fixture(scope="module", loop_scope="module")
async def wc_general_guard(api):
    """Hold the store-wide WooCommerce settings for the module and restore them after."""
    async with SharedResource("wc-general"):
        async with SettingsSnapshot(api, wc_groups=["general"]):
            yield
    logger.info("Restored WooCommerce general settings")


@pytest_asyncio.fixture(scope="module", loop_scope="module")
async def modules_guard(api):
    """Hold module activation for the module and restore it after."""
    async with SharedResource("dokan-modules"):
        async with SettingsSnapshot(api, modules=module_ids.all):
            yield
    logger.info("Restored Dokan module activation")


@pytest_asyncio.fixture(scope="module", loop_scope="module")
async def vendor_profile_guard(api, db):
    """Hold the vendor's profile meta for the module and restore it after."""
    async with SharedResource("vendor-profile"):
        async with SettingsSnapshot(api, db, user_meta=[(settings.vendor_id, "dokan_profile_settings")]):
            yield
    logger.info("Restored vendor %s profile settings", settings.vendor_id)


@pytest_asyncio.fixture(scope="module", loop_scope="module")
async def dokan_settings_guard(api, db):
    """Hold the admin settings sections for the module and restore them after."""
    async with SharedResource("dokan-settings"):
        async with SettingsSnapshot(api, db, options=DOKAN_SETTINGS_OPTIONS):
            yield
    logger.info("Restored Dokan settings sections")
