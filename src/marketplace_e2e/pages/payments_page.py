"""Payment journeys: store currency and checkout gateways on the admin side,
payout methods on the vendor dashboard."""
from __future__ import annotations

import logging
from typing import Dict, Tuple

from marketplace_e2e import data as test_data
from marketplace_e2e.data import sub_urls
from marketplace_e2e.locators import Locator
from marketplace_e2e.pages.admin_page import AdminPage
from marketplace_e2e.payloads import MODULE_GATEWAYS
from marketplace_e2e.selectors import Admin, Vendor

logger = logging.getLogger(__name__)

wc_admin = Admin.WooCommerce
vendor_payments = Vendor.Payments

WC_SETTINGS_PATTERN = "page=wc-settings"

# method name -> (url slug, value field, pro only)
BASIC_METHODS: Dict[str, Tuple[str, Locator, bool]] = {
    "paypal": ("paypal", vendor_payments.paypal_email, False),
    "bank": ("bank", vendor_payments.bank_account_name, False),
    "skrill": ("skrill", vendor_payments.skrill_email, True),
    "custom": ("dokan_custom", vendor_payments.custom_value, True),
}


class PaymentsPage(AdminPage):

    # admin

    async def set_currency(self, currency: str, expected_message: str = test_data.WC_SETTINGS_SAVED) -> None:
        await self.go_to_wc_settings("general")

        await self.select_by_value(wc_admin.General.currency, currency)
        await self.click_and_wait_for_response_and_load_state(WC_SETTINGS_PATTERN, wc_admin.save_changes)
        await self.to_contain_text(wc_admin.updated_message, expected_message)
        await self.to_have_selected_value(wc_admin.General.currency, currency)

    async def gateway_enabled(self, gateway: str) -> bool:
        toggle = wc_admin.Payments.gateway_toggle(gateway)
        await self._ready(toggle, "gateway_enabled")
        classes = await self.page.locator(toggle.selector).get_attribute("class") or ""
        return "woocommerce-input-toggle--enabled" in classes.split()

    async def setup_basic_payment_methods(self, payment: test_data.PaymentSettings) -> None:
        await self.go_to_wc_settings("checkout")

        for gateway in payment.basic_gateways:
            toggle = wc_admin.Payments.gateway_toggle(gateway)
            if not await self.gateway_enabled(gateway):
                await self.click_and_wait_for_response(sub_urls.ajax, toggle)
            await self.to_have_class(toggle, payment.toggle_enabled_class)

        await self.click_and_wait_for_response_and_load_state(WC_SETTINGS_PATTERN, wc_admin.save_changes)
        await self.to_contain_text(wc_admin.updated_message, payment.save_success_message)

    async def disable_basic_payment_methods(self, payment: test_data.PaymentSettings) -> None:
        await self.go_to_wc_settings("checkout")

        for gateway in payment.basic_gateways:
            toggle = wc_admin.Payments.gateway_toggle(gateway)
            if await self.gateway_enabled(gateway):
                await self.click_and_wait_for_response(sub_urls.ajax, toggle)
            await self.to_have_class(toggle, payment.toggle_disabled_class)

        await self.click_and_wait_for_response_and_load_state(WC_SETTINGS_PATTERN, wc_admin.save_changes)
        await self.to_contain_text(wc_admin.updated_message, payment.save_success_message)

    async def gateway_visible(self, gateway: str) -> bool:
        await self.go_to_wc_settings("checkout")
        return await self.is_visible(wc_admin.Payments.gateway_row(gateway))

    async def module_gateway_available(self, module: str) -> bool:
        """Assert the checkout row a payment module adds is listed.

        Returns False without touching the page when the module is not
        active for this site.
        """
        if not self.capabilities.has(module):
            logger.info("module_gateway_available skipped: module %s is not active", module)
            return False
        await self.go_to_wc_settings("checkout")
        await self.to_be_visible(wc_admin.Payments.gateway_row(MODULE_GATEWAYS[module]))
        return True

    async def module_gateway_removed(self, module: str) -> None:
        await self.go_to_wc_settings("checkout")
        await self.reload()
        await self.to_be_visible(wc_admin.Payments.gateway_table)
        await self.to_be_hidden(wc_admin.Payments.gateway_row(MODULE_GATEWAYS[module]))

    # vendor

    async def vendor_payment_settings_render_properly(self) -> None:
        await self.go_if_not_there(sub_urls.vendor_payments)

        await self.to_contain_text(vendor_payments.header, "Payment Method")
        await self.to_be_visible(vendor_payments.method_list)
        await self.to_be_visible(vendor_payments.method_row("paypal"))
        await self.to_be_visible(vendor_payments.method_row("bank"))

    def _method(self, method_name: str) -> Tuple[str, Locator, bool]:
        try:
            return BASIC_METHODS[method_name]
        except KeyError:
            raise ValueError(f"Unknown payment method {method_name!r}; known: {sorted(BASIC_METHODS)}") from None

    async def add_basic_payment(self, payment: test_data.VendorPayment) -> bool:
        slug, field, pro_only = self._method(payment.method_name)
        if pro_only and not self.capabilities.pro:
            logger.info("add_basic_payment skipped: %s needs the pro tier", payment.method_name)
            return False
        value = payment.custom_value if payment.method_name == "custom" else payment.email

        await self.goto(sub_urls.vendor_manage_payment(slug))
        await self.clear_and_type(field, value)
        await self.click_and_wait_for_response(sub_urls.ajax, vendor_payments.update_settings)
        await self.to_contain_text(vendor_payments.success_message, payment.save_success_message)
        await self.to_have_value(field, value)
        return True

    async def remove_basic_payment(self, payment: test_data.VendorPayment) -> bool:
        slug, field, pro_only = self._method(payment.method_name)
        if pro_only and not self.capabilities.pro:
            logger.info("remove_basic_payment skipped: %s needs the pro tier", payment.method_name)
            return False

        await self.goto(sub_urls.vendor_manage_payment(slug))
        await self.click_and_wait_for_response(sub_urls.ajax, vendor_payments.disconnect)
        await self.to_contain_text(vendor_payments.success_message, payment.save_success_message)
        await self.to_have_value(field, "")
        return True

    async def add_bank_transfer(self, payment: test_data.VendorPayment) -> None:
        await self.goto(sub_urls.vendor_manage_payment("bank"))

        await self.clear_and_type(vendor_payments.bank_account_name, payment.bank_account_name)
        await self.select_by_value(vendor_payments.bank_account_type, payment.bank_account_type)
        await self.clear_and_type(vendor_payments.bank_account_number, payment.bank_account_number)
        await self.clear_and_type(vendor_payments.bank_routing_number, payment.bank_routing_number)
        await self.clear_and_type(vendor_payments.bank_name, payment.bank_name)
        await self.clear_and_type(vendor_payments.bank_address, payment.bank_address)
        await self.clear_and_type(vendor_payments.bank_iban, payment.bank_iban)
        await self.clear_and_type(vendor_payments.bank_swift, payment.bank_swift_code)
        await self.check(vendor_payments.bank_declaration)

        await self.click_and_wait_for_response(sub_urls.ajax, vendor_payments.update_settings)
        await self.to_contain_text(vendor_payments.success_message, payment.save_success_message)
        await self.to_have_value(vendor_payments.bank_account_number, payment.bank_account_number)

    async def read_payment_value(self, method_name: str) -> str:
        slug, field, _ = self._method(method_name)
        await self.goto(sub_urls.vendor_manage_payment(slug))
        return await self.get_value(field)
