"""Admin onboarding wizard: introduction, store, selling, withdraw, ready."""
from __future__ import annotations

from marketplace_e2e import data as test_data
from marketplace_e2e.data import sub_urls
from marketplace_e2e.pages.admin_page import AdminPage
from marketplace_e2e.selectors import Admin

setup_wizard = Admin.SetupWizard

SETUP_WIZARD_PATTERN = "page=dokan-setup"
WITHDRAW_METHODS = ("paypal", "bank", "skrill")
WITHDRAW_ORDER_STATUSES = ("wc-completed", "wc-processing", "wc-on-hold")


class SetupWizardPage(AdminPage):

    async def _start(self, first_step_title: str) -> None:
        await self.goto(sub_urls.setup_wizard)
        await self.to_be_visible(setup_wizard.steps)
        await self.click_and_wait_for_response_and_load_state(SETUP_WIZARD_PATTERN, setup_wizard.lets_go)
        await self.to_contain_text(setup_wizard.heading, first_step_title)

    async def _continue(self, next_title: str) -> None:
        await self.click_and_wait_for_response_and_load_state(SETUP_WIZARD_PATTERN, setup_wizard.continue_button)
        await self.to_contain_text(setup_wizard.heading, next_title)

    async def run_setup_wizard(self, wizard: test_data.SetupWizard) -> None:
        store_title, selling_title, withdraw_title = wizard.step_titles
        await self._start(store_title)

        # store
        await self.clear_and_type(setup_wizard.vendor_store_url, wizard.vendor_store_url)
        await self.select_by_value(setup_wizard.shipping_fee_recipient, wizard.shipping_fee_recipient)
        await self.select_by_value(setup_wizard.tax_fee_recipient, wizard.tax_fee_recipient)
        await self._continue(selling_title)

        # selling
        await self.set_checked(setup_wizard.new_vendor_enable_selling, wizard.enable_selling)
        await self.select_by_value(setup_wizard.commission_type, wizard.commission_type)
        await self.clear_and_type(setup_wizard.admin_commission, wizard.admin_commission)
        await self.set_checked(setup_wizard.order_status_change, wizard.order_status_change)
        await self._continue(withdraw_title)

        # withdraw
        for method in WITHDRAW_METHODS:
            await self.set_checked(setup_wizard.withdraw_method(method), method in wizard.withdraw_methods)
        await self.clear_and_type(setup_wizard.minimum_withdraw_limit, wizard.minimum_withdraw_limit)
        for status in WITHDRAW_ORDER_STATUSES:
            await self.set_checked(setup_wizard.withdraw_order_status(status), status in wizard.withdraw_order_status)

        await self.click_and_wait_for_response_and_load_state(SETUP_WIZARD_PATTERN, setup_wizard.continue_button)
        await self.to_contain_text(setup_wizard.ready_heading, wizard.ready_message)

    async def skip_setup_wizard(self, wizard: test_data.SetupWizard) -> None:
        """Walk the wizard using only the skip links."""
        titles = list(wizard.step_titles)
        await self._start(titles[0])
        for next_title in titles[1:]:
            await self.click_and_wait_for_response_and_load_state(SETUP_WIZARD_PATTERN, setup_wizard.skip_this_step)
            await self.to_contain_text(setup_wizard.heading, next_title)
        await self.click_and_wait_for_response_and_load_state(SETUP_WIZARD_PATTERN, setup_wizard.skip_this_step)
        await self.to_contain_text(setup_wizard.ready_heading, wizard.ready_message)
