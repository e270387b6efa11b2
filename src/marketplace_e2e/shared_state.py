"""Coordination around site-wide state shared by every suite.

Store currency, gateway toggles, module activation and the fixed vendor's
profile meta are global: two suites writing them concurrently would see each
other's values. ``SharedResource`` serializes writers across worker
processes with an exclusive lock file; ``SettingsSnapshot`` records the
baseline before a suite and puts it back afterwards.
"""
from __future__ import annotations

import fcntl
import logging
import os
from functools import partial
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import anyio

from marketplace_e2e.api_utils import ApiUtils
from marketplace_e2e.config import settings
from marketplace_e2e.db_utils import DbUtils
from marketplace_e2e.errors import FixtureSetupFailure

logger = logging.getLogger(__name__)


class SharedResource:
    """Cross-process exclusive lock on one named global resource.

    Usage:
        async with SharedResource("wc-currency"):
            await api.update_batch_wc_settings_options("general", payloads.currency("EUR"))
            ...
    """

    def __init__(self, name: str, lock_dir: Optional[Path] = None, timeout: float = 300.0) -> None:
        self.name = name
        self.lock_dir = Path(lock_dir or settings.profile.lock_dir)
        self.timeout = timeout
        self._fd: Optional[int] = None

    @property
    def path(self) -> Path:
        return self.lock_dir / f"{self.name}.lock"

    @property
    def locked(self) -> bool:
        return self._fd is not None

    def _try_lock(self, fd: int) -> bool:
        try:
            fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
        except BlockingIOError:
            return False
        return True

    async def acquire(self) -> None:
        if self._fd is not None:
            raise RuntimeError(f"Shared resource {self.name!r} already held by this handle")
        self.lock_dir.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.path, os.O_RDWR | os.O_CREAT, 0o644)
        deadline = anyio.current_time() + self.timeout
        while not self._try_lock(fd):
            if anyio.current_time() >= deadline:
                os.close(fd)
                raise FixtureSetupFailure(
                    operation="acquire_shared_resource",
                    payload={"endpoint": str(self.path), "status": "locked", "timeout": self.timeout},
                    message=f"{self.name} still held by another worker",
                )
            await anyio.sleep(0.1)
        self._fd = fd
        logger.debug("acquired shared resource %s", self.name)

    async def release(self) -> None:
        if self._fd is None:
            return
        fd, self._fd = self._fd, None
        try:
            fcntl.flock(fd, fcntl.LOCK_UN)
        finally:
            os.close(fd)
        logger.debug("released shared resource %s", self.name)

    async def __aenter__(self) -> "SharedResource":
        await self.acquire()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.release()


class SettingsSnapshot:
    """Baseline of global settings captured before a suite, restored after.

    ``wc_groups`` are WooCommerce settings groups, ``user_meta`` are
    ``(user_id, meta_key)`` pairs, ``options`` are option names (plugin
    settings such as ``dokan_withdraw``) and ``modules`` is the set of module
    ids whose activation state is tracked.
    """

    def __init__(
        self,
        api: ApiUtils,
        db: Optional[DbUtils] = None,
        wc_groups: Iterable[str] = (),
        user_meta: Iterable[Tuple[int, str]] = (),
        modules: Sequence[str] = (),
        options: Iterable[str] = (),
    ) -> None:
        self.api = api
        self.db = db
        self.wc_groups = list(wc_groups)
        self.user_meta = list(user_meta)
        self.modules = list(modules)
        self.options = list(options)
        if (self.user_meta or self.options) and db is None:
            raise ValueError("user_meta and option snapshots need a DbUtils instance")

        self.wc_options: Dict[str, Dict[str, Any]] = {}
        self.meta_values: Dict[Tuple[int, str], Any] = {}
        self.option_values: Dict[str, Any] = {}
        self.active_modules: List[str] = []
        self.captured = False

    async def capture(self) -> "SettingsSnapshot":
        for group in self.wc_groups:
            self.wc_options[group] = await self.api.get_wc_settings(group)
        for user_id, key in self.user_meta:
            self.meta_values[(user_id, key)] = await self.db.get_user_meta(user_id, key)
        for name in self.options:
            self.option_values[name] = await self.db.get_option(name)
        if self.modules:
            active = set(await self.api.get_active_modules())
            self.active_modules = [module for module in self.modules if module in active]
        self.captured = True
        logger.info(
            "captured snapshot: groups=%s meta=%s options=%s modules=%s",
            self.wc_groups, [key for _, key in self.user_meta], self.options, self.active_modules,
        )
        return self

    async def _set_modules(self, ids: List[str], active: bool) -> None:
        toggle = self.api.activate_modules if active else self.api.deactivate_modules
        if not await toggle(ids):
            raise FixtureSetupFailure(
                operation=toggle.__name__,
                payload={"endpoint": "modules", "status": "not applied", "modules": ids},
                message=f"{', '.join(ids)} not {'active' if active else 'inactive'} after the call",
            )

    def _restore_steps(self) -> List[Tuple[str, Callable[[], Awaitable[Any]]]]:
        steps: List[Tuple[str, Callable[[], Awaitable[Any]]]] = []
        for group, options in self.wc_options.items():
            if options:
                update = [{"id": option_id, "value": value} for option_id, value in options.items()]
                steps.append(
                    (f"wc group {group}", partial(self.api.update_batch_wc_settings_options, group, {"update": update}))
                )
        for (user_id, key), value in self.meta_values.items():
            if value is None:
                call = partial(self.db.delete_user_meta, user_id, key)
            else:
                call = partial(self.db.update_user_meta, user_id, key, value, merge=False)
            steps.append((f"user meta {user_id}/{key}", call))
        for name, value in self.option_values.items():
            if value is None:
                call = partial(self.db.delete_option, name)
            else:
                call = partial(self.db.set_option, name, value)
            steps.append((f"option {name}", call))
        if self.modules:
            to_enable = [module for module in self.modules if module in self.active_modules]
            to_disable = [module for module in self.modules if module not in self.active_modules]
            if to_enable:
                steps.append(("module activation", partial(self._set_modules, to_enable, True)))
            if to_disable:
                steps.append(("module deactivation", partial(self._set_modules, to_disable, False)))
        return steps

    async def restore(self) -> None:
        """Put every captured value back.

        A failing step does not stop the later ones; the failures are logged
        as they happen and raised together afterwards.
        """
        if not self.captured:
            raise RuntimeError("restore() called before capture()")
        failures: List[str] = []
        for target, call in self._restore_steps():
            try:
                await call()
            except FixtureSetupFailure as exc:
                logger.warning("restore of %s failed: %s", target, exc)
                failures.append(f"{target}: {exc}")
        if failures:
            raise FixtureSetupFailure(
                operation="restore_settings_snapshot",
                payload={"endpoint": "snapshot", "status": "partial", "failures": failures},
                message=f"{len(failures)} restore step(s) failed",
            )
        logger.info("restored snapshot: groups=%s", list(self.wc_options))

    async def __aenter__(self) -> "SettingsSnapshot":
        return await self.capture()

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.restore()
