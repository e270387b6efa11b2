"""Locator value types used by the selector registry."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Role = Literal["admin", "vendor", "customer", "guest", "any"]


@dataclass(frozen=True)
class Locator:
    """Named, role-scoped reference to one UI element.

    ``selector`` is handed to Playwright unchanged, so it may be CSS,
    ``xpath=...``/``//...`` or a text/role engine selector.
    """

    name: str
    selector: str
    role: Role = "any"

    def __str__(self) -> str:
        return f"{self.name} <{self.selector}>"

    def child(self, name: str, selector: str) -> "Locator":
        """CSS descendant of this locator."""
        return Locator(f"{self.name}.{name}", f"{self.selector} {selector}", self.role)


@dataclass(frozen=True)
class ParamLocator:
    """Locator template for repeated-shape elements.

    ``template`` uses ``{value}`` as the placeholder::

        radio = ParamLocator("selling.newProductStatus", "//input[@value='{value}']")
        radio("pending")  # -> Locator
    """

    name: str
    template: str
    role: Role = "any"

    def __call__(self, value: str) -> Locator:
        return Locator(f"{self.name}[{value}]", self.template.format(value=value), self.role)
