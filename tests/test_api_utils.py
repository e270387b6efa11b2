"""REST client against the mock marketplace and canned transports."""
from __future__ import annotations

import httpx
import pytest

from marketplace_e2e import payloads
from marketplace_e2e.api_utils import ApiUtils
from marketplace_e2e.config import Credentials
from marketplace_e2e.errors import FixtureSetupFailure

CREDS = {"admin": Credentials("admin", "pw")}


def _client(handler) -> ApiUtils:
    return ApiUtils(base_url="http://shop.test", credentials=CREDS, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_currency_batch_update_round_trip(api):
    await api.update_batch_wc_settings_options("general", payloads.currency("EUR"))

    options = await api.get_wc_settings("general")

    assert options["woocommerce_currency"] == "EUR"


@pytest.mark.asyncio
async def test_rejected_batch_option_is_a_setup_failure(api):
    payload = {"update": [{"id": "woocommerce_currencyy", "value": "EUR"}]}

    with pytest.raises(FixtureSetupFailure) as excinfo:
        await api.update_batch_wc_settings_options("general", payload)

    error = excinfo.value
    assert error.operation == "update_batch_wc_settings_options"
    assert error.payload["status"] == 200
    assert error.payload["endpoint"].endswith("settings/general/batch")
    assert error.payload["body"]["woocommerce_currencyy"]["code"] == "rest_setting_setting_invalid"
    assert "woocommerce_currencyy" in str(error)
    assert (await api.get_wc_settings("general"))["woocommerce_currency"] == "USD"


@pytest.mark.asyncio
async def test_module_activation_round_trip(api):
    assert await api.activate_modules([payloads.module_ids.live_search, payloads.module_ids.stripe])
    assert set(await api.get_active_modules()) == {"live_search", "stripe"}

    assert await api.deactivate_modules(payloads.module_ids.stripe)
    assert await api.get_active_modules() == ["live_search"]


@pytest.mark.asyncio
async def test_unknown_module_is_a_setup_failure(api):
    with pytest.raises(FixtureSetupFailure) as excinfo:
        await api.activate_modules("no_such_module")

    assert excinfo.value.payload["status"] == 400
    assert excinfo.value.payload["endpoint"].endswith("modules/activate")


@pytest.mark.asyncio
async def test_vendor_cannot_call_admin_endpoints(api):
    with pytest.raises(FixtureSetupFailure) as excinfo:
        await api.get_all_modules(role="vendor")

    assert excinfo.value.payload["status"] == 403


@pytest.mark.asyncio
async def test_store_settings_merge_into_profile(api):
    await api.set_store_settings(payloads.default_store_settings)
    stored = await api.set_store_settings(payloads.bank_payment_settings())

    assert stored["store_name"] == "vendorStore1"
    assert stored["payment"]["bank"]["ac_number"] == "0123456789"
    assert (await api.get_store_settings())["address"]["city"] == "New York"


@pytest.mark.asyncio
async def test_coupon_and_tax_rate_lifecycle(api):
    payload = payloads.coupon()
    coupon = await api.create_coupon(payload)
    tax = await api.create_tax_rate(payloads.tax_rate)

    assert (await api.delete_coupon(coupon["id"]))["code"] == payload["code"]
    assert (await api.delete_tax_rate(tax["id"]))["rate"] == payloads.tax_rate["rate"]

    with pytest.raises(FixtureSetupFailure) as excinfo:
        await api.delete_coupon(coupon["id"])
    assert excinfo.value.payload["status"] == 404


@pytest.mark.asyncio
async def test_server_error_carries_status_and_body():
    async with _client(lambda request: httpx.Response(500, text="database gone")) as api:
        with pytest.raises(FixtureSetupFailure) as excinfo:
            await api.get_wc_settings("general")

    error = excinfo.value
    assert error.operation == "get_wc_settings"
    assert error.payload["status"] == 500
    assert error.payload["body"] == "database gone"
    assert "unexpected HTTP 500" in str(error)


@pytest.mark.asyncio
async def test_non_json_response_is_rejected():
    async with _client(lambda request: httpx.Response(200, text="<html>login</html>")) as api:
        with pytest.raises(FixtureSetupFailure, match="not JSON"):
            await api.get_all_modules()


@pytest.mark.asyncio
async def test_transport_error_is_wrapped():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(refuse) as api:
        with pytest.raises(FixtureSetupFailure) as excinfo:
            await api.activate_modules("stripe")

    assert excinfo.value.payload["status"] is None
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_requests_use_basic_auth_and_force_delete():
    seen = []

    def record(request):
        seen.append(request)
        return httpx.Response(200, json={"id": 7})

    async with _client(record) as api:
        await api.delete_tax_rate(7)

    request = seen[0]
    assert request.method == "DELETE"
    assert request.url.path == "/wp-json/wc/v3/taxes/7"
    assert request.url.params["force"] == "true"
    assert request.headers["authorization"].startswith("Basic ")


@pytest.mark.asyncio
async def test_missing_role_credentials():
    async with _client(lambda request: httpx.Response(200, json=[])) as api:
        with pytest.raises(ValueError, match="vendor"):
            await api.get_store_settings()
