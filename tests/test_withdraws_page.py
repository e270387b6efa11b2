"""Vendor withdraw requests against the configured minimum."""
from __future__ import annotations

import dataclasses

import pytest

from marketplace_e2e import data as test_data
from marketplace_e2e.pages.settings_page import SettingsPage
from marketplace_e2e.pages.withdraws_page import WithdrawsPage

withdraw_settings = test_data.data.dokan_settings.withdraw
withdraw_request = test_data.data.withdraw_request


async def set_minimum(admin_page, minimum: str) -> None:
    await SettingsPage(admin_page).set_withdraw_settings(
        dataclasses.replace(withdraw_settings, minimum_withdraw_amount=minimum)
    )


class TestWithdrawRequests:

    @pytest.mark.asyncio
    async def test_request_below_minimum_is_rejected(self, admin_page, vendor_page, marketplace_server):
        await set_minimum(admin_page, "50")

        await WithdrawsPage(vendor_page).request_withdraw_expecting_error(
            withdraw_request, withdraw_request.minimum_error("50")
        )

        assert marketplace_server.state["withdraw_requests"] == []

    @pytest.mark.asyncio
    async def test_request_succeeds_without_minimum(self, admin_page, vendor_page, marketplace_server):
        await set_minimum(admin_page, "0")

        await WithdrawsPage(vendor_page).request_withdraw(withdraw_request)

        assert marketplace_server.state["withdraw_requests"] == [{"amount": 10.0, "method": "paypal"}]

    @pytest.mark.asyncio
    async def test_request_above_balance_is_rejected(self, admin_page, vendor_page):
        await set_minimum(admin_page, "0")
        too_much = dataclasses.replace(withdraw_request, amount="5000")

        await WithdrawsPage(vendor_page).request_withdraw_expecting_error(
            too_much, "You don't have enough balance for this request"
        )

    @pytest.mark.asyncio
    async def test_minimum_change_is_persisted_and_enforced(self, admin_page, vendor_page, marketplace_server):
        settings_page = SettingsPage(admin_page)
        withdraws = WithdrawsPage(vendor_page)

        await set_minimum(admin_page, "50")
        assert (await settings_page.read_withdraw_settings())["minimum_withdraw_amount"] == "50"
        await withdraws.request_withdraw_expecting_error(withdraw_request, withdraw_request.minimum_error("50"))

        await set_minimum(admin_page, "0")
        assert (await settings_page.read_withdraw_settings())["minimum_withdraw_amount"] == "0"
        await withdraws.request_withdraw(withdraw_request)

        assert marketplace_server.state["withdraw_requests"] == [{"amount": 10.0, "method": "paypal"}]
