"""Admin onboarding wizard."""
from __future__ import annotations

import pytest

from marketplace_e2e import data as test_data
from marketplace_e2e.pages.setup_wizard_page import SetupWizardPage

wizard = test_data.data.setup_wizard


class TestSetupWizard:

    @pytest.mark.asyncio
    async def test_run_saves_every_step(self, admin_page, marketplace_server):
        await SetupWizardPage(admin_page).run_setup_wizard(wizard)

        saved = marketplace_server.state["settings"]
        assert saved["dokan_general"]["custom_store_url"] == "store"
        assert saved["dokan_selling"]["admin_percentage"] == "10"
        assert saved["dokan_selling"]["new_seller_enable_selling"] == "on"
        assert saved["dokan_withdraw"]["withdraw_limit"] == "5"
        assert saved["dokan_withdraw"]["withdraw_methods_skrill"] == "on"
        assert saved["dokan_withdraw"]["withdraw_order_status_completed"] == "on"
        assert saved["dokan_withdraw"]["withdraw_order_status_on_hold"] == "off"

    @pytest.mark.asyncio
    async def test_skip_saves_nothing(self, admin_page, marketplace_server):
        await SetupWizardPage(admin_page).skip_setup_wizard(wizard)

        saved = marketplace_server.state["settings"]
        assert saved["dokan_general"] == {}
        assert saved["dokan_withdraw"] == {}
