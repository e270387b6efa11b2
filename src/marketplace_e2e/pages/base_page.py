"""Primitive browser actions and assertions shared by every page object.

Every primitive takes a registry ``Locator``, waits a bounded time for the
element to become actionable and translates Playwright failures into the
harness error types. Primitives never retry on their own; ``to_pass`` is the
only retry loop.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Awaitable, Callable, Iterable, Mapping, Optional, Pattern, Sequence, TypeVar, Union

import anyio
from playwright.async_api import (
    Error as PlaywrightError,
    Locator as PwLocator,
    Page,
    Response,
    TimeoutError as PlaywrightTimeout,
    expect,
)

from marketplace_e2e.config import Capabilities, settings
from marketplace_e2e.errors import AssertionFailure, HarnessError, LocatorTimeout, NetworkWaitTimeout
from marketplace_e2e.locators import Locator

logger = logging.getLogger(__name__)

T = TypeVar("T")
UrlPattern = Union[str, Pattern[str]]

SWITCH_INPUT = 'input[type="checkbox"]'
RETRY_INTERVALS = (0.1, 0.25, 0.5, 1.0)


def response_matcher(url_pattern: UrlPattern) -> Callable[[Response], bool]:
    """Predicate for ``expect_response``: substring or regex match on the URL."""
    if isinstance(url_pattern, str):
        return lambda response: url_pattern in response.url
    return lambda response: url_pattern.search(response.url) is not None


def _first_line(exc: BaseException) -> str:
    text = str(exc).strip()
    return text.splitlines()[0] if text else type(exc).__name__


class BasePage:
    """Wraps one Playwright ``Page``.

    ``capabilities`` decides which tier-gated sub-steps the domain page
    objects run; it defaults to the configured product tier.
    """

    def __init__(
        self,
        page: Page,
        capabilities: Optional[Capabilities] = None,
        timeout: Optional[int] = None,
        expect_timeout: Optional[int] = None,
    ) -> None:
        self.page = page
        self.capabilities = capabilities if capabilities is not None else settings.capabilities()
        self.timeout = timeout if timeout is not None else settings.default_timeout
        self.expect_timeout = expect_timeout if expect_timeout is not None else settings.expect_timeout
        self.navigations = 0

    def _target(self, locator: Locator) -> PwLocator:
        return self.page.locator(locator.selector)

    # navigation

    async def goto(self, path: str) -> None:
        url = settings.url(path)
        logger.debug("goto %s", url)
        try:
            await self.page.goto(url, wait_until="domcontentloaded")
        except PlaywrightTimeout as exc:
            raise NetworkWaitTimeout(
                operation="goto",
                payload={"url_pattern": url, "timeout": self.timeout * 2},
                message=_first_line(exc),
            ) from exc
        self.navigations += 1

    async def go_if_not_there(self, path: str) -> bool:
        """Navigate to ``path`` unless the page is already there.

        Returns True when a navigation happened.
        """
        if self.get_current_url().rstrip("/") == settings.url(path).rstrip("/"):
            logger.debug("already at %s", path)
            return False
        await self.goto(path)
        return True

    async def reload(self) -> None:
        await self.page.reload(wait_until="domcontentloaded")

    def get_current_url(self) -> str:
        return self.page.url

    # readiness

    async def _ready(self, locator: Locator, operation: str, timeout: Optional[int] = None) -> PwLocator:
        timeout = timeout if timeout is not None else self.timeout
        target = self._target(locator)
        try:
            await target.wait_for(state="visible", timeout=timeout)
            await expect(target).to_be_enabled(timeout=timeout)
        except (PlaywrightTimeout, AssertionError) as exc:
            raise LocatorTimeout(
                operation=operation,
                payload={"locator": str(locator), "timeout": timeout},
                message=_first_line(exc),
            ) from exc
        return target

    async def _act(self, operation: str, locator: Locator, action: Callable[[PwLocator], Awaitable[T]]) -> T:
        target = await self._ready(locator, operation)
        logger.debug("%s %s", operation, locator)
        try:
            return await action(target)
        except PlaywrightTimeout as exc:
            raise LocatorTimeout(
                operation=operation,
                payload={"locator": str(locator), "timeout": self.timeout},
                message=_first_line(exc),
            ) from exc

    # actions

    async def click(self, locator: Locator) -> None:
        await self._act("click", locator, lambda target: target.click(timeout=self.timeout))

    async def clear_and_type(self, locator: Locator, text: str) -> None:
        await self._act("clear_and_type", locator, lambda target: target.fill(text, timeout=self.timeout))

    async def select_by_value(self, locator: Locator, value: str) -> None:
        await self._act("select_by_value", locator, lambda target: target.select_option(value=value, timeout=self.timeout))

    async def select_by_label(self, locator: Locator, label: str) -> None:
        await self._act("select_by_label", locator, lambda target: target.select_option(label=label, timeout=self.timeout))

    async def check(self, locator: Locator) -> None:
        await self._act("check", locator, lambda target: target.check(timeout=self.timeout))

    async def uncheck(self, locator: Locator) -> None:
        await self._act("uncheck", locator, lambda target: target.uncheck(timeout=self.timeout))

    async def set_checked(self, locator: Locator, checked: bool) -> None:
        if checked:
            await self.check(locator)
        else:
            await self.uncheck(locator)

    async def focus(self, locator: Locator) -> None:
        await self._act("focus", locator, lambda target: target.focus(timeout=self.timeout))

    async def type_frame_selector(self, frame: Locator, body: Locator, text: str) -> None:
        """Replace the content of a rich-text editor rendered in an iframe."""
        await self._ready(frame, "type_frame_selector")
        editor = self.page.frame_locator(frame.selector).locator(body.selector)
        logger.debug("type_frame_selector %s > %s", frame, body)
        try:
            await editor.wait_for(state="visible", timeout=self.timeout)
            await editor.fill(text, timeout=self.timeout)
        except PlaywrightTimeout as exc:
            raise LocatorTimeout(
                operation="type_frame_selector",
                payload={"locator": f"{frame} > {body}", "timeout": self.timeout},
                message=_first_line(exc),
            ) from exc

    # state reads

    async def is_visible(self, locator: Locator, timeout: int = 1000) -> bool:
        try:
            await self._target(locator).wait_for(state="visible", timeout=timeout)
        except PlaywrightTimeout:
            return False
        return True

    async def click_if_visible(self, locator: Locator, timeout: int = 1000) -> bool:
        if await self.is_visible(locator, timeout):
            await self.click(locator)
            return True
        return False

    async def get_value(self, locator: Locator) -> str:
        return await self._target(locator).input_value(timeout=self.timeout)

    async def get_text(self, locator: Locator) -> str:
        return (await self._target(locator).inner_text(timeout=self.timeout)).strip()

    async def is_checked(self, locator: Locator) -> bool:
        return await self._target(locator).is_checked(timeout=self.timeout)

    async def frame_text(self, frame: Locator, body: Locator) -> str:
        editor = self.page.frame_locator(frame.selector).locator(body.selector)
        return (await editor.inner_text(timeout=self.timeout)).strip()

    # assertions

    async def _observe(self, target: PwLocator, reader: Optional[Callable[[PwLocator], Awaitable[Any]]]) -> Any:
        if reader is None:
            return None
        try:
            return await reader(target)
        except PlaywrightError as exc:
            return f"<unavailable: {_first_line(exc)}>"

    async def _assert(
        self,
        operation: str,
        locator: Locator,
        expected: Any,
        check: Callable[[PwLocator, int], Awaitable[None]],
        reader: Optional[Callable[[PwLocator], Awaitable[Any]]] = None,
        timeout: Optional[int] = None,
    ) -> None:
        timeout = timeout if timeout is not None else self.expect_timeout
        target = self._target(locator)
        try:
            await check(target, timeout)
        except AssertionError as exc:
            actual = await self._observe(target, reader)
            raise AssertionFailure(
                operation=operation,
                payload={"locator": str(locator), "expected": expected, "actual": actual},
                message=_first_line(exc),
            ) from exc

    async def to_be_visible(self, locator: Locator, timeout: Optional[int] = None) -> None:
        await self._assert(
            "to_be_visible", locator, "visible",
            lambda t, to: expect(t).to_be_visible(timeout=to),
            lambda t: t.count(),
            timeout,
        )

    async def to_be_hidden(self, locator: Locator, timeout: Optional[int] = None) -> None:
        await self._assert(
            "to_be_hidden", locator, "hidden",
            lambda t, to: expect(t).to_be_hidden(timeout=to),
            lambda t: t.is_visible(),
            timeout,
        )

    async def to_contain_text(self, locator: Locator, text: str, timeout: Optional[int] = None) -> None:
        await self._assert(
            "to_contain_text", locator, text,
            lambda t, to: expect(t).to_contain_text(text, timeout=to),
            lambda t: t.inner_text(timeout=1000),
            timeout,
        )

    async def to_have_value(self, locator: Locator, value: str, timeout: Optional[int] = None) -> None:
        await self._assert(
            "to_have_value", locator, value,
            lambda t, to: expect(t).to_have_value(value, timeout=to),
            lambda t: t.input_value(timeout=1000),
            timeout,
        )

    async def to_have_selected_value(self, locator: Locator, value: str, timeout: Optional[int] = None) -> None:
        # a select's value is the value of its selected option
        await self._assert(
            "to_have_selected_value", locator, value,
            lambda t, to: expect(t).to_have_value(value, timeout=to),
            lambda t: t.input_value(timeout=1000),
            timeout,
        )

    async def to_have_class(self, locator: Locator, class_name: str, timeout: Optional[int] = None) -> None:
        pattern = re.compile(rf"(^|\s){re.escape(class_name)}(\s|$)")
        await self._assert(
            "to_have_class", locator, class_name,
            lambda t, to: expect(t).to_have_class(pattern, timeout=to),
            lambda t: t.get_attribute("class", timeout=1000),
            timeout,
        )

    async def to_be_checked(self, locator: Locator, checked: bool = True, timeout: Optional[int] = None) -> None:
        await self._assert(
            "to_be_checked", locator, checked,
            lambda t, to: expect(t).to_be_checked(checked=checked, timeout=to),
            lambda t: t.is_checked(timeout=1000),
            timeout,
        )

    async def multiple_element_visible(
        self, locators: Union[Mapping[str, Locator], Iterable[Locator]], timeout: Optional[int] = None
    ) -> None:
        items = locators.values() if isinstance(locators, Mapping) else locators
        for locator in items:
            await self.to_be_visible(locator, timeout)

    # retry

    async def to_pass(
        self,
        block: Callable[[], Awaitable[T]],
        timeout: Optional[int] = None,
        intervals: Sequence[float] = RETRY_INTERVALS,
    ) -> T:
        """Run ``block`` until it succeeds or ``timeout`` (ms) elapses.

        ``block`` must be idempotent. Each failed attempt is logged; when
        time runs out the last failure is re-raised unchanged.
        """
        timeout = timeout if timeout is not None else self.timeout
        deadline = anyio.current_time() + timeout / 1000
        attempt = 0
        while True:
            attempt += 1
            try:
                return await block()
            except (AssertionError, HarnessError, PlaywrightTimeout) as exc:
                remaining = deadline - anyio.current_time()
                if remaining <= 0:
                    logger.warning("to_pass gave up after %d attempts: %s", attempt, exc)
                    raise
                delay = intervals[min(attempt - 1, len(intervals) - 1)]
                logger.info("to_pass attempt %d failed (%s: %s), retrying", attempt, type(exc).__name__, exc)
                await anyio.sleep(min(delay, remaining))

    # network-coupled actions

    async def _check_response(self, operation: str, url_pattern: UrlPattern, response: Response, expected_status: Optional[int]) -> None:
        ok = response.status == expected_status if expected_status is not None else response.status < 400
        if not ok:
            raise AssertionFailure(
                operation=operation,
                payload={
                    "locator": response.url,
                    "expected": expected_status if expected_status is not None else "< 400",
                    "actual": response.status,
                },
                message=f"response to {url_pattern!s} failed",
            )

    async def _wait_for_response(
        self,
        operation: str,
        url_pattern: UrlPattern,
        locator: Locator,
        action: Callable[[PwLocator], Awaitable[None]],
        expected_status: Optional[int] = None,
        timeout: Optional[int] = None,
    ) -> Response:
        timeout = timeout if timeout is not None else self.timeout
        target = await self._ready(locator, operation)
        logger.debug("%s %s waiting for %s", operation, locator, url_pattern)
        try:
            async with self.page.expect_response(response_matcher(url_pattern), timeout=timeout) as info:
                await action(target)
            response = await info.value
        except PlaywrightTimeout as exc:
            raise NetworkWaitTimeout(
                operation=operation,
                payload={"url_pattern": str(getattr(url_pattern, "pattern", url_pattern)), "timeout": timeout, "locator": str(locator)},
                message=_first_line(exc),
            ) from exc
        await self._check_response(operation, url_pattern, response, expected_status)
        return response

    async def click_and_wait_for_response(
        self, url_pattern: UrlPattern, locator: Locator, expected_status: Optional[int] = None
    ) -> Response:
        return await self._wait_for_response(
            "click_and_wait_for_response", url_pattern, locator,
            lambda target: target.click(timeout=self.timeout), expected_status,
        )

    async def click_and_wait_for_response_and_load_state(
        self, url_pattern: UrlPattern, locator: Locator, expected_status: Optional[int] = None
    ) -> Response:
        response = await self._wait_for_response(
            "click_and_wait_for_response_and_load_state", url_pattern, locator,
            lambda target: target.click(timeout=self.timeout), expected_status,
        )
        try:
            await self.page.wait_for_load_state("networkidle", timeout=self.timeout)
        except PlaywrightTimeout as exc:
            raise NetworkWaitTimeout(
                operation="click_and_wait_for_response_and_load_state",
                payload={"url_pattern": "networkidle", "timeout": self.timeout},
                message=_first_line(exc),
            ) from exc
        return response

    async def type_and_wait_for_response(self, url_pattern: UrlPattern, locator: Locator, text: str) -> Response:
        return await self._wait_for_response(
            "type_and_wait_for_response", url_pattern, locator,
            lambda target: target.fill(text, timeout=self.timeout),
        )

    # switchers

    def _switch_input(self, locator: Locator) -> Locator:
        return locator.child("input", SWITCH_INPUT)

    async def switcher_state(self, locator: Locator) -> bool:
        return await self.is_checked(self._switch_input(locator))

    async def _set_switcher(self, locator: Locator, enabled: bool, operation: str) -> bool:
        await self._ready(locator, operation)
        if await self.switcher_state(locator) == enabled:
            logger.debug("%s %s: already %s", operation, locator, "on" if enabled else "off")
            return False
        await self.click(locator)
        await self.to_be_checked(self._switch_input(locator), enabled)
        return True

    async def enable_switcher(self, locator: Locator) -> bool:
        """Turn a switch on; returns False when it already was."""
        return await self._set_switcher(locator, True, "enable_switcher")

    async def disable_switcher(self, locator: Locator) -> bool:
        return await self._set_switcher(locator, False, "disable_switcher")

    async def enable_switcher_and_wait_for_response(self, url_pattern: UrlPattern, locator: Locator) -> Optional[Response]:
        """Turn a switch on and wait for the request it triggers.

        Returns None without any network wait when the switch was already on.
        """
        await self._ready(locator, "enable_switcher_and_wait_for_response")
        if await self.switcher_state(locator):
            return None
        return await self.click_and_wait_for_response(url_pattern, locator)

    # scrolling

    async def scroll_to_top(self) -> None:
        await self.page.evaluate("() => window.scrollTo(0, 0)")

    async def scroll_to_bottom(self) -> None:
        await self.page.evaluate("() => window.scrollTo(0, document.body.scrollHeight)")
