"""Vendor dashboard withdraw requests."""
from __future__ import annotations

from marketplace_e2e import data as test_data
from marketplace_e2e.data import sub_urls
from marketplace_e2e.pages.base_page import BasePage
from marketplace_e2e.selectors import Vendor

vendor_withdraw = Vendor.Withdraw


class WithdrawsPage(BasePage):

    async def _submit_request(self, request: test_data.WithdrawRequest) -> None:
        await self.goto(sub_urls.vendor_withdraw)
        await self.click(vendor_withdraw.request_withdraw)
        await self.clear_and_type(vendor_withdraw.amount, request.amount)
        await self.select_by_value(vendor_withdraw.method, request.method)
        await self.click_and_wait_for_response(sub_urls.ajax, vendor_withdraw.submit)

    async def request_withdraw(self, request: test_data.WithdrawRequest) -> None:
        """Submit a request that must be accepted with no validation error."""
        await self._submit_request(request)
        await self.to_contain_text(vendor_withdraw.success_message, request.success_message)
        await self.to_be_hidden(vendor_withdraw.error_message)

    async def request_withdraw_expecting_error(self, request: test_data.WithdrawRequest, message: str) -> None:
        await self._submit_request(request)
        await self.to_contain_text(vendor_withdraw.error_message, message)
        await self.to_be_hidden(vendor_withdraw.success_message)
