"""Typed failures raised by the harness.

Every failure names the operation that raised it and carries the target
(locator or endpoint) plus whatever expected/actual data is known, so a CI
report localizes the problem to one UI action or one fixture call.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(eq=False)
class HarnessError(Exception):
    """Base class for browser and fixture failures."""

    operation: str
    payload: Dict[str, Any] = field(default_factory=dict)
    message: str = ""

    def __str__(self) -> str:  # pragma: no cover - human readable helper
        return f"{self.operation} failed ({self.message}) with payload={self.payload}"


@dataclass(eq=False)
class LocatorTimeout(HarnessError):
    """Element did not reach the required state (visible/enabled) in time.

    Usually a UI regression or selector drift.
    """

    def __str__(self) -> str:
        locator = self.payload.get("locator")
        timeout = self.payload.get("timeout")
        return f"{self.operation}: {locator} not ready within {timeout}ms ({self.message})"


@dataclass(eq=False)
class AssertionFailure(HarnessError, AssertionError):
    """Observed value/text/state did not match the expectation."""

    def __str__(self) -> str:
        return (
            f"{self.operation}: {self.payload.get('locator')} "
            f"expected={self.payload.get('expected')!r} actual={self.payload.get('actual')!r}"
            + (f" ({self.message})" if self.message else "")
        )


@dataclass(eq=False)
class FixtureSetupFailure(HarnessError):
    """An API/DB pre-condition call failed; the scenario must not continue."""

    def __str__(self) -> str:
        endpoint = self.payload.get("endpoint")
        status = self.payload.get("status")
        return f"{self.operation} {endpoint} -> {status}: {self.message}"


@dataclass(eq=False)
class NetworkWaitTimeout(HarnessError):
    """The backend response expected after a UI action never arrived."""

    def __str__(self) -> str:
        return (
            f"{self.operation}: no response matching {self.payload.get('url_pattern')!r} "
            f"within {self.payload.get('timeout')}ms"
        )
