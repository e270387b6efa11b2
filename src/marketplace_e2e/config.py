"""Run-time configuration for the harness.

Values are read once, when this module is imported, from the environment
with ``.env.defaults`` as fallback (see ``env_defaults.py``). Suites consume
them at setup time; nothing re-reads the environment mid-run.

Recognised variables::

    BASE_URL            site under test
    DOKAN_PRO           "true"/"1" enables pro-tier scenarios and fields
    ACTIVE_MODULES      comma separated pro module ids known to be active
    ADMIN, ADMIN_PASSWORD / VENDOR, VENDOR_PASSWORD / CUSTOMER, CUSTOMER_PASSWORD
    VENDOR_ID           user id of the fixed vendor account
    DB_URL, DB_PREFIX   SQLAlchemy URL and WordPress table prefix
    PLAYWRIGHT_HEADLESS, BROWSER
    DEFAULT_TIMEOUT     action timeout in ms
    EXPECT_TIMEOUT      assertion timeout in ms
    AUTH_STATE_DIR      where login storage states are written
    LOCK_DIR            where shared-resource lock files live
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from copy import deepcopy
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, FrozenSet, Iterator, Tuple
from urllib.parse import urljoin

from marketplace_e2e.env_defaults import defaults_path, get_setting

logger = logging.getLogger(__name__)

ROLES = ("admin", "vendor", "customer")
REPO_ROOT = Path(__file__).resolve().parents[2]


def _flag(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def _resolve_dir(value: str) -> Path:
    path = Path(value)
    return path if path.is_absolute() else REPO_ROOT / path


@dataclass(frozen=True)
class Capabilities:
    """Product tier and module availability threaded through page objects.

    Tier-gated blocks inside a journey run only when the matching flag is
    set, so a lite run never touches pro-only locators.
    """

    pro: bool = False
    modules: FrozenSet[str] = frozenset()

    def has(self, module: str) -> bool:
        return self.pro and module in self.modules

    def with_module(self, module: str) -> "Capabilities":
        return replace(self, modules=self.modules | {module})

    def without_module(self, module: str) -> "Capabilities":
        return replace(self, modules=self.modules - {module})


@dataclass
class Credentials:
    username: str
    password: str

    @property
    def basic_auth(self) -> Tuple[str, str]:
        return (self.username, self.password)


@dataclass
class TargetProfile:
    """Concrete set of credentials, host and flags for one site under test."""

    name: str
    base_url: str
    pro: bool
    modules: FrozenSet[str]
    users: Dict[str, Credentials]
    vendor_id: int
    db_url: str
    db_prefix: str = "wp_"
    headless: bool = True
    browser: str = "chromium"
    default_timeout: int = 15000
    expect_timeout: int = 10000
    auth_state_dir: Path = field(default_factory=lambda: REPO_ROOT / "tmp" / "auth-states")
    lock_dir: Path = field(default_factory=lambda: REPO_ROOT / "tmp" / "locks")


def load_profile(name: str = "primary") -> TargetProfile:
    modules = frozenset(
        module.strip()
        for module in (get_setting("ACTIVE_MODULES", "") or "").split(",")
        if module.strip()
    )
    users = {
        "admin": Credentials(get_setting("ADMIN", "admin"), get_setting("ADMIN_PASSWORD", "")),
        "vendor": Credentials(get_setting("VENDOR", "vendor1"), get_setting("VENDOR_PASSWORD", "")),
        "customer": Credentials(get_setting("CUSTOMER", "customer1"), get_setting("CUSTOMER_PASSWORD", "")),
    }
    return TargetProfile(
        name=name,
        base_url=get_setting("BASE_URL", "http://localhost:9999"),
        pro=_flag(get_setting("DOKAN_PRO")),
        modules=modules,
        users=users,
        vendor_id=int(get_setting("VENDOR_ID", "2")),
        db_url=get_setting("DB_URL", "sqlite://"),
        db_prefix=get_setting("DB_PREFIX", "wp_"),
        headless=_flag(get_setting("PLAYWRIGHT_HEADLESS", "true")),
        browser=get_setting("BROWSER", "chromium"),
        default_timeout=int(get_setting("DEFAULT_TIMEOUT", "15000")),
        expect_timeout=int(get_setting("EXPECT_TIMEOUT", "10000")),
        auth_state_dir=_resolve_dir(get_setting("AUTH_STATE_DIR", "tmp/auth-states")),
        lock_dir=_resolve_dir(get_setting("LOCK_DIR", "tmp/locks")),
    )


class HarnessSettings:
    """Active target profile plus helpers the page objects and fixtures use."""

    def __init__(self, profile: TargetProfile | None = None) -> None:
        self._active = profile or load_profile()
        logger.info(
            "[CONFIG] target=%s base_url=%s pro=%s modules=%s (defaults: %s)",
            self._active.name,
            self._active.base_url,
            self._active.pro,
            ",".join(sorted(self._active.modules)) or "-",
            defaults_path(),
        )

    @property
    def profile(self) -> TargetProfile:
        return self._active

    @property
    def base_url(self) -> str:
        return self._active.base_url

    @property
    def pro(self) -> bool:
        return self._active.pro

    @property
    def vendor_id(self) -> int:
        return self._active.vendor_id

    @property
    def headless(self) -> bool:
        return self._active.headless

    @property
    def default_timeout(self) -> int:
        return self._active.default_timeout

    @property
    def expect_timeout(self) -> int:
        return self._active.expect_timeout

    def capabilities(self) -> Capabilities:
        return Capabilities(pro=self._active.pro, modules=self._active.modules)

    def credentials(self, role: str) -> Credentials:
        try:
            return self._active.users[role]
        except KeyError:
            raise ValueError(f"No credentials configured for role {role!r}; known roles: {ROLES}") from None

    def auth_state_path(self, role: str) -> Path:
        return self._active.auth_state_dir / f"{self._active.name}_{role}_auth_state.json"

    def url(self, path: str) -> str:
        """Return an absolute URL for the provided path."""
        return urljoin(self.base_url.rstrip("/") + "/", path.lstrip("/"))

    @contextmanager
    def use_profile(self, profile: TargetProfile) -> Iterator[TargetProfile]:
        """Temporarily switch the active profile.

        A copy is activated so mutations made during the block never leak
        into the original profile.
        """
        previous = self._active
        self._active = deepcopy(profile)
        try:
            yield self._active
        finally:
            self._active = previous

    @contextmanager
    def override(self, **changes) -> Iterator[TargetProfile]:
        """Shortcut for ``use_profile(replace(profile, **changes))``."""
        with self.use_profile(replace(self._active, **changes)) as profile:
            yield profile


settings = HarnessSettings()
