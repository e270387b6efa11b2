"""BasePage primitives against the mock marketplace."""
from __future__ import annotations

import logging
import re
from types import SimpleNamespace

import pytest

from marketplace_e2e.data import sub_urls
from marketplace_e2e.errors import AssertionFailure, LocatorTimeout, NetworkWaitTimeout
from marketplace_e2e.locators import Locator
from marketplace_e2e.pages.base_page import BasePage, response_matcher
from marketplace_e2e.selectors import Admin

settings_admin = Admin.Settings
MISSING = Locator("test.missing", "#does-not-exist")


def test_response_matcher_substring_and_regex():
    ajax = SimpleNamespace(url="http://shop.test/wp-admin/admin-ajax.php")

    assert response_matcher("admin-ajax.php")(ajax)
    assert not response_matcher("wc-settings")(ajax)
    assert response_matcher(re.compile(r"admin-ajax\.php$"))(ajax)


class TestToPass:

    @pytest.mark.asyncio
    async def test_retries_until_block_passes(self, caplog):
        page = BasePage(page=None)
        attempts = []

        async def flaky():
            attempts.append(1)
            if len(attempts) < 3:
                raise AssertionError("not yet")
            return "done"

        with caplog.at_level(logging.INFO, logger="marketplace_e2e.pages.base_page"):
            result = await page.to_pass(flaky, timeout=5000, intervals=(0.01,))

        assert result == "done"
        assert len(attempts) == 3
        retries = [record for record in caplog.records if "to_pass attempt" in record.getMessage()]
        assert len(retries) == 2

    @pytest.mark.asyncio
    async def test_reraises_last_failure_after_timeout(self, caplog):
        page = BasePage(page=None)

        async def always_fails():
            raise AssertionFailure(operation="check", payload={"locator": "x", "expected": 1, "actual": 2})

        with caplog.at_level(logging.WARNING, logger="marketplace_e2e.pages.base_page"):
            with pytest.raises(AssertionFailure):
                await page.to_pass(always_fails, timeout=200, intervals=(0.05,))

        assert any("gave up" in record.getMessage() for record in caplog.records)

    @pytest.mark.asyncio
    async def test_other_errors_are_not_retried(self):
        page = BasePage(page=None)
        attempts = []

        async def broken():
            attempts.append(1)
            raise KeyError("bug in the block")

        with pytest.raises(KeyError):
            await page.to_pass(broken, timeout=5000)
        assert len(attempts) == 1


class TestNavigation:

    @pytest.mark.asyncio
    async def test_go_if_not_there_navigates_once(self, admin_page):
        page = BasePage(admin_page)

        assert await page.go_if_not_there(sub_urls.dokan_settings) is True
        assert await page.go_if_not_there(sub_urls.dokan_settings) is False
        assert page.navigations == 1

    @pytest.mark.asyncio
    async def test_goto_counts_every_navigation(self, admin_page):
        page = BasePage(admin_page)

        await page.goto(sub_urls.wc_settings_general)
        await page.goto(sub_urls.wc_settings_checkout)

        assert page.navigations == 2
        assert page.get_current_url().endswith("tab=checkout")


class TestPrimitives:

    @pytest.mark.asyncio
    async def test_missing_element_raises_locator_timeout(self, admin_page):
        page = BasePage(admin_page, timeout=500)
        await page.goto(sub_urls.dokan_settings)

        with pytest.raises(LocatorTimeout) as excinfo:
            await page.click(MISSING)

        assert excinfo.value.operation == "click"
        assert excinfo.value.payload["locator"] == str(MISSING)
        assert excinfo.value.payload["timeout"] == 500

    @pytest.mark.asyncio
    async def test_failed_assertion_reports_actual_text(self, admin_page):
        page = BasePage(admin_page, expect_timeout=500)
        await page.goto(sub_urls.dokan_settings)

        with pytest.raises(AssertionFailure) as excinfo:
            await page.to_contain_text(settings_admin.settings_text, "Not the header")

        assert excinfo.value.payload["expected"] == "Not the header"
        assert excinfo.value.payload["actual"] == "Settings"

    @pytest.mark.asyncio
    async def test_state_reads_and_visibility(self, admin_page):
        page = BasePage(admin_page)
        await page.goto(sub_urls.dokan_settings)

        await page.multiple_element_visible({"header": settings_admin.settings_text, "save": settings_admin.save_changes})
        assert await page.is_visible(settings_admin.Menus.general)
        assert not await page.is_visible(MISSING, timeout=200)
        assert not await page.click_if_visible(MISSING, timeout=200)
        assert await page.get_text(settings_admin.setting_title) == "General"
        await page.to_be_hidden(settings_admin.update_success_message)

    @pytest.mark.asyncio
    async def test_fill_and_select(self, admin_page):
        page = BasePage(admin_page)
        selling = settings_admin.Selling
        await page.goto(sub_urls.dokan_settings)
        await page.click(settings_admin.Menus.selling_options)

        await page.clear_and_type(selling.percentage, "12.5")
        await page.select_by_value(selling.commission_type, "flat")
        await page.click(selling.shipping_fee_recipient("admin"))

        await page.to_have_value(selling.percentage, "12.5")
        await page.to_have_selected_value(selling.commission_type, "flat")
        assert await page.is_checked(selling.shipping_fee_recipient("admin"))

    @pytest.mark.asyncio
    async def test_rich_text_frame(self, admin_page):
        page = BasePage(admin_page)
        privacy = settings_admin.PrivacyPolicy
        await page.goto(sub_urls.dokan_settings)
        await page.click(settings_admin.Menus.privacy_policy)

        await page.type_frame_selector(privacy.privacy_policy_iframe, privacy.privacy_policy_html_body, "Updated policy")

        assert await page.frame_text(privacy.privacy_policy_iframe, privacy.privacy_policy_html_body) == "Updated policy"


class TestSwitchers:

    @pytest.mark.asyncio
    async def test_enable_and_disable_are_idempotent(self, admin_page):
        page = BasePage(admin_page)
        switch = settings_admin.General.show_vendor_info
        await page.goto(sub_urls.dokan_settings)

        assert await page.switcher_state(switch) is False
        assert await page.enable_switcher(switch) is True
        assert await page.enable_switcher(switch) is False
        assert await page.switcher_state(switch) is True
        assert await page.disable_switcher(switch) is True
        assert await page.disable_switcher(switch) is False

    @pytest.mark.asyncio
    async def test_switch_already_on_skips_network_wait(self, admin_page):
        page = BasePage(admin_page, timeout=500)
        await page.goto(sub_urls.dokan_settings)

        response = await page.enable_switcher_and_wait_for_response(sub_urls.ajax, settings_admin.General.admin_area_access)

        assert response is None


@pytest.mark.marketplace(pro=True, modules=("geolocation",))
class TestTypingWaits:

    @pytest.mark.asyncio
    async def test_typing_waits_for_suggestions(self, admin_page):
        page = BasePage(admin_page)
        geolocation = settings_admin.Geolocation
        await page.goto(sub_urls.dokan_settings)
        await page.click(settings_admin.Menus.geolocation)

        await page.focus(geolocation.default_location)
        response = await page.type_and_wait_for_response(sub_urls.gmap, geolocation.default_location, "Dhaka")

        assert response.status == 200
        assert "input=Dhaka" in response.url
        await page.to_contain_text(geolocation.map_result_first, "Dhaka, NY, USA")
        assert await admin_page.evaluate("() => document.activeElement.name") == "dokan_geolocation[location]"


class TestNetworkWaits:

    @pytest.mark.asyncio
    async def test_save_waits_for_ajax_response(self, admin_page):
        page = BasePage(admin_page)
        await page.goto(sub_urls.dokan_settings)

        response = await page.click_and_wait_for_response_and_load_state(sub_urls.ajax, settings_admin.save_changes)

        assert response.status == 200
        await page.to_contain_text(settings_admin.update_success_message, "Setting has been saved successfully.")

    @pytest.mark.asyncio
    async def test_unexpected_status_is_an_assertion_failure(self, admin_page):
        page = BasePage(admin_page)
        await page.goto(sub_urls.dokan_settings)

        with pytest.raises(AssertionFailure) as excinfo:
            await page.click_and_wait_for_response(sub_urls.ajax, settings_admin.save_changes, expected_status=201)

        assert excinfo.value.payload["actual"] == 200

    @pytest.mark.asyncio
    async def test_missing_response_raises_network_wait_timeout(self, admin_page):
        page = BasePage(admin_page, timeout=800)
        await page.goto(sub_urls.dokan_settings)

        with pytest.raises(NetworkWaitTimeout) as excinfo:
            await page.click_and_wait_for_response(sub_urls.ajax, settings_admin.Menus.selling_options)

        assert excinfo.value.payload["url_pattern"] == sub_urls.ajax

    @pytest.mark.asyncio
    async def test_scroll_reveals_back_to_top(self, admin_page):
        page = BasePage(admin_page)
        await page.goto(sub_urls.dokan_settings)

        await page.scroll_to_bottom()
        await page.to_be_visible(settings_admin.back_to_top)
        await page.scroll_to_top()
        await page.to_be_hidden(settings_admin.back_to_top)
