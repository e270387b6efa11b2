"""Admin > Dokan > Settings journeys.

Each ``set_*`` method opens its tab and checks the tab title, fills the
form from a data bundle, saves through the ajax endpoint and asserts the
bundle's success banner; some also re-read a persisted value. Pro-only
fields are filled only when the page object's capabilities say the site
runs the pro tier; module-backed tabs are skipped entirely when the module
is not active.
"""
from __future__ import annotations

import logging
from typing import Any, Dict

from marketplace_e2e import data as test_data
from marketplace_e2e.data import sub_urls
from marketplace_e2e.locators import Locator
from marketplace_e2e.pages.admin_page import AdminPage, settings_admin
from marketplace_e2e.payloads import module_ids

logger = logging.getLogger(__name__)


class SettingsPage(AdminPage):

    async def _save(self, bundle: Any) -> None:
        await self.click_and_wait_for_response_and_load_state(sub_urls.ajax, settings_admin.save_changes)
        await self.to_contain_text(settings_admin.update_success_message, bundle.save_success_message)

    def _module_active(self, module: str, journey: str) -> bool:
        if self.capabilities.has(module):
            return True
        logger.info("%s skipped: module %s is not active", journey, module)
        return False

    # render / navigation

    async def settings_render_properly(self) -> None:
        await self.go_if_not_there(sub_urls.dokan_settings)

        await self.to_be_visible(settings_admin.settings_text)
        await self.multiple_element_visible(settings_admin.sections)
        await self.multiple_element_visible(settings_admin.header)
        await self.to_be_visible(settings_admin.fields)
        await self.to_be_visible(settings_admin.save_changes)

    async def search_settings(self, query: str) -> None:
        await self.go_if_not_there(sub_urls.dokan_settings)

        await self.clear_and_type(settings_admin.Search.input, query)
        await self.to_be_visible(settings_admin.fields)
        await self.click(settings_admin.Search.close)

    async def scroll_to_top_settings(self) -> None:
        await self.goto(sub_urls.dokan_settings)

        # the back-to-top button only appears after the scroll handler has run
        async def back_to_top_shown() -> None:
            await self.scroll_to_bottom()
            if not await self.is_visible(settings_admin.back_to_top, timeout=500):
                await self.scroll_to_top()
                raise AssertionError("back-to-top button not shown after scrolling to the bottom")

        await self.to_pass(back_to_top_shown)
        await self.click(settings_admin.back_to_top)
        await self.to_be_visible(settings_admin.Search.search_box)

    async def module_section_visible(self, menu: Locator) -> bool:
        """Whether the settings tab behind ``menu`` is rendered at all.

        Reloads first: module activation only shows up on a fresh render.
        """
        await self.go_to_dokan_settings()
        await self.reload()
        return await self.is_visible(menu)

    # general

    async def set_general_settings(self, general: test_data.GeneralSettings) -> None:
        section = settings_admin.General
        await self.go_to_single_settings(settings_admin.Menus.general, general.setting_title)

        # site options
        await self.enable_switcher(section.admin_area_access)
        await self.clear_and_type(section.vendor_store_url, general.vendor_store_url)
        await self.type_frame_selector(
            section.setup_wizard_message_iframe, section.setup_wizard_message_html_body, general.setup_wizard_message
        )
        if self.capabilities.pro:
            await self.click(section.selling_product_types(general.selling_product_types))

        # vendor store options
        await self.enable_switcher(section.store_terms_and_conditions)
        await self.clear_and_type(section.store_product_per_page, general.store_product_per_page)
        if self.capabilities.pro:
            await self.enable_switcher(section.enable_terms_and_condition)
            await self.click(section.store_category(general.store_category))

        # product page
        await self.enable_switcher(section.show_vendor_info)
        await self.enable_switcher(section.enable_more_products_tab)

        await self._save(general)

    # selling

    async def set_selling_settings(self, selling: test_data.SellingSettings) -> None:
        section = settings_admin.Selling
        await self.go_to_single_settings(settings_admin.Menus.selling_options, selling.setting_title)

        # commission
        await self.select_by_value(section.commission_type, selling.commission_type)
        await self.clear_and_type(section.percentage, selling.commission_percentage)
        await self.clear_and_type(section.fixed, selling.commission_fixed)
        await self.click(section.shipping_fee_recipient(selling.shipping_fee_recipient))
        await self.click(section.product_tax_fee_recipient(selling.product_tax_fee_recipient))
        await self.click(section.shipping_tax_fee_recipient(selling.shipping_tax_fee_recipient))

        # vendor capabilities
        await self.enable_switcher(section.enable_selling)
        await self.enable_switcher(section.one_page_product_create)
        await self.enable_switcher(section.order_status_change)
        if self.capabilities.pro:
            await self.click(section.new_product_status(selling.new_product_status))
            await self.enable_switcher(section.vendors_can_create_tags)
            await self.enable_switcher(section.order_discount)
            await self.enable_switcher(section.product_discount)

        # catalog mode
        await self.enable_switcher(section.remove_add_to_cart_button)
        await self.enable_switcher(section.hide_product_price)

        await self._save(selling)
        await self.to_have_value(section.percentage, selling.commission_percentage)
        await self.to_have_value(section.fixed, selling.commission_fixed)

    # withdraw

    async def set_withdraw_settings(self, withdraw: test_data.WithdrawSettings) -> None:
        section = settings_admin.Withdraw
        await self.go_to_single_settings(settings_admin.Menus.withdraw_options, withdraw.setting_title)

        # methods
        await self.enable_switcher(section.withdraw_methods_paypal)
        await self.enable_switcher(section.withdraw_methods_bank_transfer)
        if self.capabilities.pro:
            await self.enable_switcher(section.withdraw_methods_custom)
            await self.enable_switcher(section.withdraw_methods_skrill)
            await self.clear_and_type(section.custom_method_name, withdraw.custom_method_name)
            await self.clear_and_type(section.custom_method_type, withdraw.custom_method_type)

        # charges
        await self.clear_and_type(section.paypal_charge_percentage, withdraw.charge.paypal)
        await self.clear_and_type(section.bank_transfer_charge_fixed, withdraw.charge.bank)
        if self.capabilities.pro:
            await self.clear_and_type(section.skrill_charge_percentage, withdraw.charge.skrill)
            await self.clear_and_type(section.custom_charge_percentage, withdraw.charge.custom)

        await self.clear_and_type(section.minimum_withdraw_amount, withdraw.minimum_withdraw_amount)
        await self.enable_switcher(section.order_status_completed)
        await self.enable_switcher(section.order_status_processing)

        if self.capabilities.pro:
            await self.clear_and_type(section.withdraw_threshold, withdraw.withdraw_threshold)

            # disbursement
            await self.enable_switcher(section.disbursement_manual)
            await self.enable_switcher(section.disbursement_auto)
            await self.enable_switcher(section.schedule_quarterly)
            await self.enable_switcher(section.schedule_monthly)
            await self.enable_switcher(section.schedule_biweekly)
            await self.enable_switcher(section.schedule_weekly)

            await self.select_by_value(section.quarterly_schedule_month, withdraw.quarterly_schedule_month)
            await self.select_by_value(section.quarterly_schedule_week, withdraw.quarterly_schedule_week)
            await self.select_by_value(section.quarterly_schedule_day, withdraw.quarterly_schedule_day)
            await self.select_by_value(section.monthly_schedule_week, withdraw.monthly_schedule_week)
            await self.select_by_value(section.monthly_schedule_day, withdraw.monthly_schedule_day)
            await self.select_by_value(section.biweekly_schedule_week, withdraw.biweekly_schedule_week)
            await self.select_by_value(section.biweekly_schedule_day, withdraw.biweekly_schedule_day)
            await self.select_by_value(section.weekly_schedule_day, withdraw.weekly_schedule_day)

        await self._save(withdraw)
        await self.to_have_value(section.minimum_withdraw_amount, withdraw.minimum_withdraw_amount)

    async def read_withdraw_settings(self) -> Dict[str, str]:
        """Reload the withdraw tab and return the persisted field values.

        Keys follow ``WithdrawSettings``; pro-only keys are present only on
        the pro tier.
        """
        section = settings_admin.Withdraw
        await self.go_to_single_settings(
            settings_admin.Menus.withdraw_options, test_data.data.dokan_settings.withdraw.setting_title
        )

        values = {
            "minimum_withdraw_amount": await self.get_value(section.minimum_withdraw_amount),
            "charge.paypal": await self.get_value(section.paypal_charge_percentage),
            "charge.bank": await self.get_value(section.bank_transfer_charge_fixed),
        }
        if self.capabilities.pro:
            values.update(
                {
                    "custom_method_name": await self.get_value(section.custom_method_name),
                    "custom_method_type": await self.get_value(section.custom_method_type),
                    "charge.skrill": await self.get_value(section.skrill_charge_percentage),
                    "charge.custom": await self.get_value(section.custom_charge_percentage),
                    "withdraw_threshold": await self.get_value(section.withdraw_threshold),
                    "quarterly_schedule_month": await self.get_value(section.quarterly_schedule_month),
                    "quarterly_schedule_week": await self.get_value(section.quarterly_schedule_week),
                    "quarterly_schedule_day": await self.get_value(section.quarterly_schedule_day),
                    "monthly_schedule_week": await self.get_value(section.monthly_schedule_week),
                    "monthly_schedule_day": await self.get_value(section.monthly_schedule_day),
                    "biweekly_schedule_week": await self.get_value(section.biweekly_schedule_week),
                    "biweekly_schedule_day": await self.get_value(section.biweekly_schedule_day),
                    "weekly_schedule_day": await self.get_value(section.weekly_schedule_day),
                }
            )
        return values

    # reverse withdraw

    async def set_reverse_withdraw_settings(self, reverse_withdraw: test_data.ReverseWithdrawSettings) -> None:
        section = settings_admin.ReverseWithdraw
        await self.go_to_single_settings(settings_admin.Menus.reverse_withdrawal, reverse_withdraw.setting_title)

        await self.enable_switcher(section.enable_reverse_withdrawal)
        await self.enable_switcher(section.enable_for_cod_gateway)
        await self.select_by_value(section.billing_type, reverse_withdraw.billing_type)
        await self.clear_and_type(section.reverse_balance_threshold, reverse_withdraw.reverse_balance_threshold)
        await self.clear_and_type(section.grace_period, reverse_withdraw.grace_period)

        await self.enable_switcher(section.disable_add_to_cart_button)
        await self.enable_switcher(section.hide_withdraw_menu)
        await self.enable_switcher(section.make_vendor_status_inactive)
        await self.enable_switcher(section.display_notice_during_grace_period)
        if self.capabilities.pro:
            await self.enable_switcher(section.send_announcement)

        await self._save(reverse_withdraw)
        await self.to_have_value(section.reverse_balance_threshold, reverse_withdraw.reverse_balance_threshold)

    # pages

    async def set_page_settings(self, page: test_data.PageSettings) -> None:
        section = settings_admin.Page
        await self.go_to_single_settings(settings_admin.Menus.page_settings, page.setting_title)

        await self.select_by_label(section.dashboard, page.dashboard)
        await self.select_by_label(section.my_orders, page.my_orders)
        await self.select_by_label(section.store_listing, page.store_listing)
        await self.select_by_label(section.terms_and_conditions, page.terms_and_conditions)

        await self._save(page)

    # appearance

    async def set_appearance_settings(self, appearance: test_data.AppearanceSettings) -> None:
        section = settings_admin.Appearance
        await self.go_to_single_settings(settings_admin.Menus.appearance, appearance.setting_title)

        await self.enable_switcher(section.show_map_on_store_page)
        await self.click(section.map_api_source(appearance.map_api_source))
        await self.clear_and_type(section.google_map_api_key, appearance.google_map_api_key)
        await self.enable_switcher(section.show_contact_form_on_store_page)
        await self.click(section.store_header_template(appearance.store_header_template))
        if self.capabilities.pro:
            await self.clear_and_type(section.store_banner_width, appearance.store_banner_width)
            await self.clear_and_type(section.store_banner_height, appearance.store_banner_height)
            await self.enable_switcher(section.store_opening_closing_time_widget)

        await self._save(appearance)
        await self.to_have_value(section.google_map_api_key, appearance.google_map_api_key)

    # privacy policy

    async def set_privacy_policy_settings(self, privacy_policy: test_data.PrivacyPolicySettings) -> None:
        section = settings_admin.PrivacyPolicy
        await self.go_to_single_settings(settings_admin.Menus.privacy_policy, privacy_policy.setting_title)

        await self.enable_switcher(section.enable_privacy_policy)
        await self.select_by_value(section.privacy_page, privacy_policy.privacy_page)
        await self.type_frame_selector(
            section.privacy_policy_iframe, section.privacy_policy_html_body, privacy_policy.privacy_policy_content
        )

        await self._save(privacy_policy)

    # module-backed tabs

    async def set_live_search_settings(self, live_search: test_data.LiveSearchSettings) -> bool:
        if not self._module_active(module_ids.live_search, "set_live_search_settings"):
            return False
        await self.go_to_single_settings(settings_admin.Menus.live_search, live_search.setting_title)

        await self.select_by_value(settings_admin.LiveSearch.live_search_options, live_search.live_search_option)

        await self._save(live_search)
        return True

    async def set_store_support_settings(self, store_support: test_data.StoreSupportSettings) -> bool:
        section = settings_admin.StoreSupport
        if not self._module_active(module_ids.store_support, "set_store_support_settings"):
            return False
        await self.go_to_single_settings(settings_admin.Menus.store_support, store_support.setting_title)

        await self.enable_switcher(section.display_on_order_details)
        await self.select_by_value(section.display_on_single_product_page, store_support.display_on_single_product_page)
        await self.clear_and_type(section.support_button_label, store_support.support_button_label)

        await self._save(store_support)
        return True

    async def set_email_verification_settings(self, email_verification: test_data.EmailVerificationSettings) -> bool:
        section = settings_admin.EmailVerification
        if not self.capabilities.pro:
            logger.info("set_email_verification_settings skipped: lite tier")
            return False
        await self.go_to_single_settings(settings_admin.Menus.email_verification, email_verification.setting_title)

        await self.enable_switcher(section.enable_email_verification)
        await self.clear_and_type(section.registration_notice, email_verification.registration_notice)
        await self.clear_and_type(section.login_notice, email_verification.login_notice)

        await self._save(email_verification)
        return True

    async def set_vendor_subscription_settings(self, subscription: test_data.VendorSubscriptionSettings) -> bool:
        section = settings_admin.VendorSubscription
        if not self._module_active(module_ids.vendor_subscription, "set_vendor_subscription_settings"):
            return False
        await self.go_to_single_settings(settings_admin.Menus.vendor_subscription, subscription.setting_title)

        await self.select_by_label(section.subscription_page, subscription.display_page)
        await self.enable_switcher(section.enable_product_subscription)
        await self.enable_switcher(section.enable_subscription_in_registration_form)
        await self.enable_switcher(section.enable_email_notification)
        await self.clear_and_type(section.no_of_days, subscription.no_of_days)
        await self.select_by_value(section.product_status, subscription.product_status)
        await self.clear_and_type(section.cancelling_email_subject, subscription.cancelling_email_subject)
        await self.clear_and_type(section.cancelling_email_body, subscription.cancelling_email_body)
        await self.clear_and_type(section.alert_email_subject, subscription.alert_email_subject)
        await self.clear_and_type(section.alert_email_body, subscription.alert_email_body)

        await self._save(subscription)
        return True

    async def disable_vendor_subscription(self, subscription: test_data.VendorSubscriptionSettings) -> bool:
        if not self._module_active(module_ids.vendor_subscription, "disable_vendor_subscription"):
            return False
        await self.go_to_single_settings(settings_admin.Menus.vendor_subscription, subscription.setting_title)

        await self.disable_switcher(settings_admin.VendorSubscription.enable_product_subscription)

        await self._save(subscription)
        return True

    async def set_quote_settings(self, quote: test_data.QuoteSettings) -> bool:
        section = settings_admin.Quote
        if not self._module_active(module_ids.request_for_quotation, "set_quote_settings"):
            return False
        await self.go_to_single_settings(settings_admin.Menus.quote, quote.setting_title)

        await self.enable_switcher(section.enable_quote_for_out_of_stock_products)
        await self.enable_switcher(section.enable_ajax_add_to_quote)
        await self.enable_switcher(section.redirect_to_quote_page)
        await self.clear_and_type(section.decrease_offered_price, quote.decrease_offered_price)

        await self._save(quote)
        await self.to_have_value(section.decrease_offered_price, quote.decrease_offered_price)
        return True

    async def set_live_chat_settings(self, live_chat: test_data.LiveChatSettings) -> bool:
        section = settings_admin.LiveChat
        if not self._module_active(module_ids.live_chat, "set_live_chat_settings"):
            return False
        await self.go_to_single_settings(settings_admin.Menus.live_chat, live_chat.setting_title)

        await self.enable_switcher(section.enable_live_chat)
        await self.click(section.chat_provider(live_chat.chat_provider))
        await self.clear_and_type(section.talk_js_app_id, live_chat.talk_js_app_id)
        await self.clear_and_type(section.talk_js_app_secret, live_chat.talk_js_app_secret)
        await self.enable_switcher(section.chat_button_on_vendor_page)
        await self.select_by_value(section.chat_button_on_product_page, live_chat.chat_button_position)

        await self._save(live_chat)
        await self.to_be_checked(section.chat_provider(live_chat.chat_provider))
        await self.to_have_value(section.talk_js_app_id, live_chat.talk_js_app_id)
        await self.to_have_value(section.talk_js_app_secret, live_chat.talk_js_app_secret)
        await self.to_have_selected_value(section.chat_button_on_product_page, live_chat.chat_button_position)
        return True

    async def set_rma_settings(self, rma: test_data.RmaSettings) -> bool:
        section = settings_admin.Rma
        if not self._module_active(module_ids.rma, "set_rma_settings"):
            return False
        await self.go_to_single_settings(settings_admin.Menus.rma, rma.setting_title)

        await self.select_by_value(section.order_status, rma.order_status)
        await self.enable_switcher(section.enable_refund_requests)
        await self.enable_switcher(section.enable_coupon_requests)

        # drop a reason that is already listed so it ends up once, at the end
        for reason in rma.rma_reasons:
            await self.click_if_visible(section.reasons_for_rma_single(reason))
            await self.clear_and_type(section.reasons_for_rma_input, reason)
            await self.click(section.reasons_for_rma_add)

        await self.type_frame_selector(section.refund_policy_iframe, section.refund_policy_html_body, rma.refund_policy)

        await self._save(rma)
        return True

    async def set_wholesale_settings(self, wholesale: test_data.WholesaleSettings) -> bool:
        section = settings_admin.Wholesale
        if not self._module_active(module_ids.wholesale, "set_wholesale_settings"):
            return False
        await self.go_to_single_settings(settings_admin.Menus.wholesale, wholesale.setting_title)

        await self.click(section.who_can_see_wholesale_price(wholesale.who_can_see_wholesale_price))
        await self.enable_switcher(section.show_wholesale_price_on_shop_archive)
        await self.disable_switcher(section.need_approval_for_customer)

        await self._save(wholesale)
        return True

    async def set_eu_compliance_settings(self, eu_compliance: test_data.EuComplianceSettings) -> bool:
        section = settings_admin.EuCompliance
        if not self._module_active(module_ids.germanized, "set_eu_compliance_settings"):
            return False
        await self.go_to_single_settings(settings_admin.Menus.eu_compliance_fields, eu_compliance.setting_title)

        for switch in section.all_fields:
            await self.enable_switcher(switch)

        await self._save(eu_compliance)
        return True

    async def set_delivery_time_settings(self, delivery_time: test_data.DeliveryTimeSettings) -> bool:
        section = settings_admin.DeliveryTime
        if not self._module_active(module_ids.delivery_time, "set_delivery_time_settings"):
            return False
        await self.go_to_single_settings(settings_admin.Menus.delivery_time, delivery_time.setting_title)

        await self.enable_switcher(section.allow_vendor_settings)
        await self.enable_switcher(section.home_delivery)
        await self.enable_switcher(section.store_pickup)
        await self.clear_and_type(section.delivery_date_label, delivery_time.delivery_date_label)
        await self.clear_and_type(section.delivery_blocked_buffer, delivery_time.delivery_blocked_buffer)
        await self.clear_and_type(section.time_slot, delivery_time.time_slot)
        await self.clear_and_type(section.order_per_slot, delivery_time.order_per_slot)
        await self.clear_and_type(section.delivery_box_info, delivery_time.delivery_box_info)
        await self.disable_switcher(section.require_delivery_date_and_time)

        for day in delivery_time.days:
            await self.enable_switcher(section.delivery_day(day))
            if delivery_time.full_day:
                await self.select_by_value(section.opening_time(day), test_data.FULL_DAY)
            else:
                await self.select_by_value(section.opening_time(day), delivery_time.opening_time)
                await self.select_by_value(section.closing_time(day), delivery_time.closing_time)

        await self._save(delivery_time)
        return True

    async def set_product_advertising_settings(self, advertising: test_data.ProductAdvertisingSettings) -> bool:
        section = settings_admin.ProductAdvertising
        if not self._module_active(module_ids.product_advertising, "set_product_advertising_settings"):
            return False
        await self.go_to_single_settings(settings_admin.Menus.product_advertising, advertising.setting_title)

        await self.clear_and_type(section.no_of_available_slot, advertising.no_of_available_slot)
        await self.clear_and_type(section.expire_after_days, advertising.expire_after_days)
        await self.enable_switcher(section.vendor_can_purchase_advertisement)
        await self.clear_and_type(section.advertisement_cost, advertising.advertisement_cost)
        await self.enable_switcher(section.enable_advertisement_in_subscription)
        await self.enable_switcher(section.mark_advertised_product_as_featured)
        await self.enable_switcher(section.display_advertised_product_on_top)
        await self.enable_switcher(section.out_of_stock_visibility)

        await self._save(advertising)
        await self.to_have_value(section.advertisement_cost, advertising.advertisement_cost)
        return True

    async def set_geolocation_settings(self, geolocation: test_data.GeolocationSettings) -> bool:
        section = settings_admin.Geolocation
        if not self._module_active(module_ids.geolocation, "set_geolocation_settings"):
            return False
        await self.go_to_single_settings(settings_admin.Menus.geolocation, geolocation.setting_title)

        await self.click(section.location_map_position(geolocation.location_map_position))
        await self.click(section.show_map(geolocation.show_map))
        await self.enable_switcher(section.show_filters_before_location_map)
        await self.enable_switcher(section.product_location_tab)
        await self.click(section.radius_search_unit(geolocation.radius_search_unit))
        await self.clear_and_type(section.radius_search_minimum_distance, geolocation.radius_search_minimum_distance)
        await self.clear_and_type(section.radius_search_maximum_distance, geolocation.radius_search_maximum_distance)
        await self.clear_and_type(section.map_zoom_level, geolocation.map_zoom_level)

        # the address box suggests places as it is typed; pick the first one
        await self.focus(section.default_location)
        await self.type_and_wait_for_response(sub_urls.gmap, section.default_location, geolocation.default_location)
        await self.click(section.map_result_first)
        await self.to_have_value(section.default_location, geolocation.default_location_match)

        await self._save(geolocation)
        return True

    async def set_product_report_abuse_settings(self, report_abuse: test_data.ProductReportAbuseSettings) -> bool:
        section = settings_admin.ProductReportAbuse
        if not self._module_active(module_ids.report_abuse, "set_product_report_abuse_settings"):
            return False
        await self.go_to_single_settings(settings_admin.Menus.product_report_abuse, report_abuse.setting_title)

        await self.click_if_visible(section.reasons_for_abuse_report_single(report_abuse.reasons_for_abuse_report))
        await self.clear_and_type(section.reasons_for_abuse_report_input, report_abuse.reasons_for_abuse_report)
        await self.click(section.reasons_for_abuse_report_add)

        await self._save(report_abuse)
        return True

    async def set_spmv_settings(self, spmv: test_data.SpmvSettings) -> bool:
        section = settings_admin.Spmv
        if not self._module_active(module_ids.spmv, "set_spmv_settings"):
            return False
        await self.go_to_single_settings(settings_admin.Menus.single_product_multi_vendor, spmv.setting_title)

        await self.enable_switcher(section.enable_single_product_multiple_vendor)
        await self.clear_and_type(section.sell_item_button_text, spmv.sell_item_button_text)
        await self.clear_and_type(section.available_vendor_display_area_title, spmv.available_vendor_display_area_title)
        await self.select_by_value(
            section.available_vendor_section_display_position, spmv.available_vendor_section_display_position
        )
        await self.select_by_value(section.show_spmv_products, spmv.show_spmv_products)

        await self._save(spmv)
        return True
