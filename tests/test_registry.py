"""Selector registry, test data registry and payload builders."""
from __future__ import annotations

import dataclasses
from typing import Iterator, Union

import pytest

from marketplace_e2e import data as test_data
from marketplace_e2e import payloads
from marketplace_e2e.locators import Locator, ParamLocator
from marketplace_e2e.selectors import Admin, Common, Vendor


def _walk(namespace) -> Iterator[Union[Locator, ParamLocator]]:
    for value in vars(namespace).values():
        if isinstance(value, (Locator, ParamLocator)):
            yield value
        elif isinstance(value, type):
            yield from _walk(value)


REGISTRY = [*_walk(Common), *_walk(Admin), *_walk(Vendor)]


def test_locator_child_is_css_descendant():
    parent = Locator("settings.switch", 'label.switch[for="x"]', "admin")

    child = parent.child("input", 'input[type="checkbox"]')

    assert child == Locator("settings.switch.input", 'label.switch[for="x"] input[type="checkbox"]', "admin")


def test_param_locator_substitutes_value():
    radio = ParamLocator("selling.status", '//input[@value="{value}"]', "admin")

    locator = radio("pending")

    assert locator.selector == '//input[@value="pending"]'
    assert locator.name == "selling.status[pending]"
    assert locator.role == "admin"


def test_locator_str_names_element_and_selector():
    assert str(Common.Login.submit) == "login.submit <#wp-submit>"


def test_registry_names_are_unique():
    names = [entry.name for entry in REGISTRY]
    assert len(names) == len(set(names))


def test_registry_entries_have_selectors():
    assert REGISTRY
    for entry in REGISTRY:
        selector = entry.selector if isinstance(entry, Locator) else entry.template
        assert selector.strip(), entry.name


def test_settings_locators_are_scoped_to_their_section():
    assert Admin.Settings.Withdraw.minimum_withdraw_amount.selector == (
        '#dokan_withdraw [name="dokan_withdraw[withdraw_limit]"]'
    )
    assert Admin.Settings.General.admin_area_access.selector == (
        '#dokan_general label.switch[for="dokan_general[admin_access]"]'
    )
    assert Admin.Settings.Selling.new_product_status("pending").selector == (
        '#dokan_selling input[type="radio"][name="dokan_selling[product_status]"][value="pending"]'
    )
    assert Admin.Settings.DeliveryTime.delivery_day("sunday").selector == (
        '#dokan_delivery_time label.switch[for="dokan_delivery_time[delivery_day_sunday]"]'
    )
    assert Admin.Settings.Rma.reasons_for_rma_single("Other").selector == (
        '#dokan_rma .dokan-list-field[data-target="dokan_rma[rma_reasons]"] li[data-value="Other"] .remove-item'
    )


def test_vendor_locators_carry_vendor_role():
    assert all(entry.role == "vendor" for entry in _walk(Vendor))
    assert all(entry.role == "admin" for entry in _walk(Admin))


def test_sub_urls_build_step_and_method_paths():
    urls = test_data.sub_urls

    assert urls.setup_wizard_step("store") == "wp-admin/index.php?page=dokan-setup&step=store"
    assert urls.vendor_manage_payment("paypal") == "dashboard/settings/payment-manage-paypal/"


def test_data_bundles_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        test_data.data.vendor_payment.email = "other@example.com"


def test_data_bundle_override_keeps_other_defaults():
    withdraw = dataclasses.replace(test_data.data.dokan_settings.withdraw, minimum_withdraw_amount="50")

    assert withdraw.minimum_withdraw_amount == "50"
    assert withdraw.charge == test_data.WithdrawCharge()
    assert withdraw.save_success_message == test_data.SETTINGS_SAVED


def test_withdraw_minimum_error_message():
    assert test_data.data.withdraw_request.minimum_error("50") == (
        "Withdraw amount must be greater than or equal to 50"
    )


def test_unique_factories_do_not_repeat():
    emails = {test_data.unique_email() for _ in range(20)}
    codes = {payloads.coupon()["code"] for _ in range(20)}

    assert len(emails) == 20
    assert len(codes) == 20
    assert all(code.startswith("e2e-coupon-") for code in codes)
    assert payloads.coupon("fixed")["code"] == "fixed"


def test_currency_payload_shape():
    assert payloads.currency("EUR") == {"update": [{"id": "woocommerce_currency", "value": "EUR"}]}
    assert payloads.default_currency == payloads.currency("USD")


def test_every_payment_module_maps_to_a_gateway():
    assert set(payloads.MODULE_GATEWAYS) == set(payloads.module_ids.payment_modules)


def test_bank_payment_settings_is_a_copy():
    bank = payloads.bank_payment_settings()
    bank["payment"]["bank"]["ac_name"] = "changed"

    assert payloads.payment_settings["payment"]["bank"]["ac_name"] == "accountName"
