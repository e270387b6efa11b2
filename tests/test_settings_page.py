"""Settings journeys against the mock marketplace, lite and pro tiers."""
from __future__ import annotations

import dataclasses

import pytest

from marketplace_e2e import data as test_data
from marketplace_e2e.config import Capabilities, settings
from marketplace_e2e.pages.settings_page import SettingsPage
from marketplace_e2e.payloads import DOKAN_SETTINGS_OPTIONS, module_ids
from marketplace_e2e.selectors import Admin
from ui_tests.mock_marketplace import SECTIONS

dokan_settings = test_data.data.dokan_settings
menus = Admin.Settings.Menus
CORE_MODULES = (module_ids.live_search, module_ids.store_support, module_ids.vendor_subscription)


def stored(server, section: str) -> dict:
    return server.state["settings"][section]


def test_stand_in_sections_match_option_rows():
    assert tuple(section.id for section in SECTIONS) == DOKAN_SETTINGS_OPTIONS


def test_bundle_titles_name_their_tabs():
    titles = {section.title for section in SECTIONS}

    for entry in dataclasses.fields(dokan_settings):
        bundle = getattr(dokan_settings, entry.name)
        assert bundle.setting_title in titles, type(bundle).__name__
        assert bundle.save_success_message == test_data.SETTINGS_SAVED


class TestLiteSettings:

    @pytest.mark.asyncio
    async def test_settings_screen_renders(self, admin_page):
        page = SettingsPage(admin_page)

        await page.settings_render_properly()
        await page.search_settings("withdraw")
        await page.scroll_to_top_settings()

    @pytest.mark.asyncio
    async def test_withdraw_settings_round_trip(self, admin_page):
        page = SettingsPage(admin_page)
        withdraw = dataclasses.replace(
            dokan_settings.withdraw,
            minimum_withdraw_amount="25",
            charge=test_data.WithdrawCharge(paypal="2", bank="3"),
        )

        await page.set_withdraw_settings(withdraw)

        assert await page.read_withdraw_settings() == {
            "minimum_withdraw_amount": "25",
            "charge.paypal": "2",
            "charge.bank": "3",
        }

    @pytest.mark.asyncio
    async def test_core_sections_save(self, admin_page, marketplace_server):
        page = SettingsPage(admin_page)
        general = dataclasses.replace(dokan_settings.general, vendor_store_url="shops")

        await page.set_general_settings(general)
        await page.set_selling_settings(dokan_settings.selling)
        await page.set_reverse_withdraw_settings(dokan_settings.reverse_withdraw)
        await page.set_page_settings(dokan_settings.page)
        await page.set_appearance_settings(dokan_settings.appearance)
        await page.set_privacy_policy_settings(dokan_settings.privacy_policy)

        assert stored(marketplace_server, "dokan_general")["custom_store_url"] == "shops"
        assert stored(marketplace_server, "dokan_general")["setup_wizard_message"] == general.setup_wizard_message
        assert stored(marketplace_server, "dokan_general")["show_vendor_info"] == "on"
        assert stored(marketplace_server, "dokan_selling")["catalog_mode_hide_product_price"] == "on"
        assert stored(marketplace_server, "dokan_reverse_withdrawal")["enabled"] == "on"
        assert stored(marketplace_server, "dokan_pages")["reg_tc_page"] == "7"
        assert stored(marketplace_server, "dokan_appearance")["gmap_api_key"] == "test-google-map-key"
        assert stored(marketplace_server, "dokan_privacy")["privacy_policy"] == (
            dokan_settings.privacy_policy.privacy_policy_content
        )

    @pytest.mark.asyncio
    async def test_pro_and_module_journeys_are_skipped(self, admin_page):
        page = SettingsPage(admin_page)

        assert await page.set_email_verification_settings(dokan_settings.email_verification) is False
        assert await page.set_live_search_settings(dokan_settings.live_search) is False
        assert await page.set_store_support_settings(dokan_settings.store_support) is False
        assert await page.set_vendor_subscription_settings(dokan_settings.vendor_subscription) is False
        assert await page.disable_vendor_subscription(dokan_settings.vendor_subscription) is False
        assert await page.set_quote_settings(dokan_settings.quote) is False
        assert await page.set_rma_settings(dokan_settings.rma) is False
        assert await page.set_geolocation_settings(dokan_settings.geolocation) is False
        assert await page.set_spmv_settings(dokan_settings.spmv) is False
        assert page.navigations == 0


@pytest.mark.marketplace(pro=True, modules=CORE_MODULES)
class TestProSettings:

    @pytest.mark.asyncio
    async def test_withdraw_settings_round_trip_with_schedules(self, admin_page):
        page = SettingsPage(admin_page)
        withdraw = dataclasses.replace(dokan_settings.withdraw, withdraw_threshold="3", monthly_schedule_week="2")

        await page.set_withdraw_settings(withdraw)
        values = await page.read_withdraw_settings()

        assert values["minimum_withdraw_amount"] == withdraw.minimum_withdraw_amount
        assert values["custom_method_name"] == "Bkash"
        assert values["custom_method_type"] == "Email"
        assert values["withdraw_threshold"] == "3"
        assert values["monthly_schedule_week"] == "2"
        assert values["quarterly_schedule_month"] == "march"
        assert values["charge.custom"] == withdraw.charge.custom

    @pytest.mark.asyncio
    async def test_every_section_saves(self, admin_page, marketplace_server):
        page = SettingsPage(admin_page)

        await page.set_general_settings(dokan_settings.general)
        await page.set_selling_settings(dokan_settings.selling)
        await page.set_reverse_withdraw_settings(dokan_settings.reverse_withdraw)
        await page.set_appearance_settings(dokan_settings.appearance)
        assert await page.set_email_verification_settings(dokan_settings.email_verification)
        assert await page.set_live_search_settings(dokan_settings.live_search)
        assert await page.set_store_support_settings(dokan_settings.store_support)
        assert await page.set_vendor_subscription_settings(dokan_settings.vendor_subscription)

        assert stored(marketplace_server, "dokan_general")["store_category_type"] == "Single"
        assert stored(marketplace_server, "dokan_selling")["discount_edit_product"] == "on"
        assert stored(marketplace_server, "dokan_reverse_withdrawal")["send_announcement"] == "on"
        assert stored(marketplace_server, "dokan_appearance")["store_banner_width"] == "625"
        assert stored(marketplace_server, "dokan_email_verification")["enabled"] == "on"
        assert stored(marketplace_server, "dokan_store_support")["support_button_label"] == "Get Support"
        assert stored(marketplace_server, "dokan_product_subscription")["product_status_after_end"] == "draft"
        assert stored(marketplace_server, "dokan_product_subscription")["enable_pricing"] == "on"

        assert await page.disable_vendor_subscription(dokan_settings.vendor_subscription)
        assert stored(marketplace_server, "dokan_product_subscription")["enable_pricing"] == "off"

    @pytest.mark.asyncio
    async def test_lite_capabilities_leave_pro_fields_untouched(self, admin_page):
        lite_view = SettingsPage(admin_page, capabilities=Capabilities(pro=False))
        pro_view = SettingsPage(admin_page)

        await lite_view.set_withdraw_settings(dataclasses.replace(dokan_settings.withdraw, minimum_withdraw_amount="30"))
        values = await pro_view.read_withdraw_settings()

        assert values["minimum_withdraw_amount"] == "30"
        assert values["custom_method_name"] == ""
        assert values["withdraw_threshold"] == "0"


@pytest.mark.marketplace(pro=True)
class TestModuleGating:

    @pytest.mark.asyncio
    async def test_module_toggle_reveals_and_hides_section(self, admin_page, api):
        live_search = dokan_settings.live_search
        page = SettingsPage(admin_page)

        assert not await page.module_section_visible(menus.live_search)
        assert await page.set_live_search_settings(live_search) is False

        assert await api.activate_modules(module_ids.live_search)
        enabled = SettingsPage(admin_page, capabilities=settings.capabilities().with_module(module_ids.live_search))
        assert await enabled.module_section_visible(menus.live_search)
        assert await enabled.set_live_search_settings(live_search) is True

        assert await api.deactivate_modules(module_ids.live_search)
        disabled = SettingsPage(admin_page, capabilities=settings.capabilities())
        assert not await disabled.module_section_visible(menus.live_search)
        assert await disabled.set_live_search_settings(live_search) is False


@pytest.mark.marketplace(pro=True, modules=module_ids.settings_modules)
class TestModuleSettings:

    @pytest.mark.asyncio
    async def test_quote_live_chat_and_wholesale(self, admin_page, marketplace_server):
        page = SettingsPage(admin_page)
        live_chat = dataclasses.replace(dokan_settings.live_chat, chat_button_position="inside_tab")

        assert await page.set_quote_settings(dokan_settings.quote)
        assert await page.set_live_chat_settings(live_chat)
        assert await page.set_wholesale_settings(dokan_settings.wholesale)

        quote = stored(marketplace_server, "dokan_quote_settings")
        assert quote["decrease_offered_price"] == "10"
        assert quote["redirect_to_quote_page"] == "on"
        chat = stored(marketplace_server, "dokan_live_chat")
        assert chat["provider"] == "talkjs"
        assert chat["app_secret"] == "test-app-secret"
        assert chat["chat_button_product_page"] == "inside_tab"
        wholesale = stored(marketplace_server, "dokan_wholesale")
        assert wholesale["wholesale_price_display"] == "all_user"
        assert wholesale["display_price_in_shop_archieve"] == "on"
        assert wholesale["need_approval_for_wholesale_customer"] == "off"

    @pytest.mark.asyncio
    async def test_rma_reasons_are_not_duplicated(self, admin_page, marketplace_server):
        page = SettingsPage(admin_page)

        assert await page.set_rma_settings(dokan_settings.rma)

        rma = stored(marketplace_server, "dokan_rma")
        assert rma["rma_reasons"] == "Defective|Wrong Product|Other"
        assert rma["rma_order_status"] == "wc-processing"
        assert rma["rma_policy"] == dokan_settings.rma.refund_policy
        assert rma["rma_enable_coupon_request"] == "on"

    @pytest.mark.asyncio
    async def test_report_abuse_reason_is_appended(self, admin_page, marketplace_server):
        page = SettingsPage(admin_page)

        assert await page.set_product_report_abuse_settings(dokan_settings.product_report_abuse)
        assert await page.set_product_report_abuse_settings(dokan_settings.product_report_abuse)

        reasons = stored(marketplace_server, "dokan_report_abuse")["abuse_reasons"].split("|")
        assert reasons[-1] == "This product is fake"
        assert reasons.count("This product is fake") == 1
        assert "This content is spam" in reasons

    @pytest.mark.asyncio
    async def test_eu_compliance_turns_every_field_on(self, admin_page, marketplace_server):
        page = SettingsPage(admin_page)

        assert await page.set_eu_compliance_settings(dokan_settings.eu_compliance)

        values = stored(marketplace_server, "dokan_germanized")
        assert len(values) == len(Admin.Settings.EuCompliance.all_fields)
        assert set(values.values()) == {"on"}

    @pytest.mark.asyncio
    async def test_delivery_time_full_day_and_custom_hours(self, admin_page, marketplace_server):
        page = SettingsPage(admin_page)
        weekdays = dataclasses.replace(
            dokan_settings.delivery_time, days=("monday", "friday"), full_day=False, time_slot="45"
        )

        assert await page.set_delivery_time_settings(dokan_settings.delivery_time)
        values = stored(marketplace_server, "dokan_delivery_time")
        assert values["delivery_day_sunday"] == "on"
        assert values["opening_time_sunday"] == test_data.FULL_DAY
        assert values["selected_date_time_required"] == "off"

        assert await page.set_delivery_time_settings(weekdays)
        values = stored(marketplace_server, "dokan_delivery_time")
        assert values["time_slot_minutes"] == "45"
        assert (values["opening_time_friday"], values["closing_time_friday"]) == ("09:00", "17:00")
        assert values["opening_time_sunday"] == test_data.FULL_DAY

    @pytest.mark.asyncio
    async def test_product_advertising_and_spmv(self, admin_page, marketplace_server):
        page = SettingsPage(admin_page)
        advertising = dataclasses.replace(dokan_settings.product_advertising, advertisement_cost="20")

        assert await page.set_product_advertising_settings(advertising)
        assert await page.set_spmv_settings(dokan_settings.spmv)

        ads = stored(marketplace_server, "dokan_product_advertisement")
        assert ads["cost"] == "20"
        assert ads["featured"] == "on"
        spmv = stored(marketplace_server, "dokan_spmv")
        assert spmv["enable_pricing"] == "on"
        assert spmv["show_order"] == "min_price"
        assert spmv["available_vendor_list_position"] == "below_tabs"

    @pytest.mark.asyncio
    async def test_geolocation_picks_suggested_address(self, admin_page, marketplace_server):
        page = SettingsPage(admin_page)
        geolocation = dataclasses.replace(dokan_settings.geolocation, radius_search_unit="miles", map_zoom_level="9")

        assert await page.set_geolocation_settings(geolocation)

        values = stored(marketplace_server, "dokan_geolocation")
        assert values["location"] == "New York, NY, USA"
        assert values["distance_unit"] == "miles"
        assert values["map_zoom"] == "9"
        assert values["show_locations_map"] == "top"
