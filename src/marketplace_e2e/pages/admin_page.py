"""Admin-area navigation shared by the admin page objects."""
from __future__ import annotations

from marketplace_e2e.data import sub_urls
from marketplace_e2e.locators import Locator
from marketplace_e2e.pages.base_page import BasePage
from marketplace_e2e.selectors import Admin

settings_admin = Admin.Settings


class AdminPage(BasePage):

    async def go_to_dokan_settings(self) -> None:
        await self.go_if_not_there(sub_urls.dokan_settings)

    async def go_to_single_settings(self, menu: Locator, title: str) -> None:
        """Open one settings tab and confirm its title.

        The settings screen is a hash-routed single page app, so a plain
        goto to the same URL does not re-render it; the tab is retried with
        an explicit reload until the expected title shows.
        """

        async def open_tab() -> None:
            await self.goto(sub_urls.dokan_settings)
            await self.reload()
            await self.click(menu)
            await self.to_contain_text(settings_admin.setting_title, title, timeout=3000)

        await self.to_pass(open_tab)

    async def go_to_wc_settings(self, tab: str = "general") -> None:
        path = sub_urls.wc_settings_checkout if tab == "checkout" else sub_urls.wc_settings_general
        await self.go_if_not_there(path)
