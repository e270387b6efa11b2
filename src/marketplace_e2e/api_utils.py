"""REST client used to seed and restore site state around browser scenarios.

Each method is one named operation against the marketplace or WooCommerce
REST API. Calls authenticate with HTTP basic auth as the requested role.
Nothing here retries; a failed call raises ``FixtureSetupFailure`` and the
scenario that needed it does not start.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import httpx

from marketplace_e2e.config import Credentials, settings
from marketplace_e2e.data import sub_urls
from marketplace_e2e.errors import FixtureSetupFailure

logger = logging.getLogger(__name__)

ModuleIdArg = Union[str, Iterable[str]]


def _as_list(ids: ModuleIdArg) -> List[str]:
    return [ids] if isinstance(ids, str) else list(ids)


class ApiUtils:
    """Async REST client bound to one site.

    Usage:
        async with ApiUtils() as api:
            await api.activate_modules("store_support")
            await api.update_batch_wc_settings_options("general", payloads.currency("EUR"))
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        credentials: Optional[Mapping[str, Credentials]] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or settings.base_url).rstrip("/") + "/"
        self._credentials = dict(credentials) if credentials is not None else None
        self._client = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "ApiUtils":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.dispose()

    async def dispose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    def _auth(self, role: str) -> httpx.BasicAuth:
        if self._credentials is not None:
            if role not in self._credentials:
                raise ValueError(f"No credentials configured for role {role!r}")
            creds = self._credentials[role]
        else:
            creds = settings.credentials(role)
        return httpx.BasicAuth(creds.username, creds.password)

    async def _request(
        self,
        operation: str,
        method: str,
        endpoint: str,
        role: str = "admin",
        **kwargs: Any,
    ) -> Any:
        logger.debug("%s %s %s as %s", operation, method, endpoint, role)
        try:
            response = await self._client.request(method, endpoint, auth=self._auth(role), **kwargs)
        except httpx.HTTPError as exc:
            raise FixtureSetupFailure(
                operation=operation,
                payload={"endpoint": endpoint, "method": method, "status": None},
                message=str(exc),
            ) from exc

        if not response.is_success:
            raise FixtureSetupFailure(
                operation=operation,
                payload={
                    "endpoint": endpoint,
                    "method": method,
                    "status": response.status_code,
                    "body": response.text[:500],
                },
                message=f"unexpected HTTP {response.status_code}",
            )
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise FixtureSetupFailure(
                operation=operation,
                payload={"endpoint": endpoint, "status": response.status_code, "body": response.text[:500]},
                message="response is not JSON",
            ) from exc

    # WooCommerce settings

    async def update_batch_wc_settings_options(
        self, group: str, payload: Mapping[str, Any], role: str = "admin"
    ) -> Dict[str, Any]:
        """Set the listed options of ``group`` to exactly the given values.

        WooCommerce answers 200 even when it rejects options and reports each
        one as an ``error`` entry in ``update``; any such entry is a failure.
        """
        endpoint = f"{sub_urls.Api.wc_settings}/{group}/batch"
        result = await self._request("update_batch_wc_settings_options", "POST", endpoint, role, json=dict(payload))
        rejected = {
            item.get("id"): item["error"]
            for item in (result or {}).get("update", [])
            if isinstance(item, dict) and "error" in item
        }
        if rejected:
            raise FixtureSetupFailure(
                operation="update_batch_wc_settings_options",
                payload={"endpoint": endpoint, "method": "POST", "status": 200, "body": rejected},
                message=f"rejected options: {', '.join(map(str, rejected))}",
            )
        return result

    async def get_wc_settings(self, group: str, role: str = "admin") -> Dict[str, Any]:
        """Current ``{option_id: value}`` map of one settings group."""
        options = await self._request("get_wc_settings", "GET", f"{sub_urls.Api.wc_settings}/{group}", role)
        return {option["id"]: option.get("value") for option in options or []}

    # Modules

    async def get_all_modules(self, role: str = "admin") -> List[Dict[str, Any]]:
        return await self._request("get_all_modules", "GET", sub_urls.Api.modules, role) or []

    async def get_active_modules(self, role: str = "admin") -> List[str]:
        modules = await self.get_all_modules(role)
        return [module["id"] for module in modules if module.get("active")]

    async def activate_modules(self, ids: ModuleIdArg, role: str = "admin") -> bool:
        wanted = _as_list(ids)
        result = await self._request(
            "activate_modules", "PUT", sub_urls.Api.activate_modules, role, json={"module": wanted}
        )
        active = set(result.get("active", [])) if isinstance(result, dict) else set()
        return set(wanted) <= active

    async def deactivate_modules(self, ids: ModuleIdArg, role: str = "admin") -> bool:
        wanted = _as_list(ids)
        result = await self._request(
            "deactivate_modules", "PUT", sub_urls.Api.deactivate_modules, role, json={"module": wanted}
        )
        active = set(result.get("active", [])) if isinstance(result, dict) else set()
        return not (set(wanted) & active)

    # Vendor store

    async def get_store_settings(self, role: str = "vendor") -> Dict[str, Any]:
        return await self._request("get_store_settings", "GET", sub_urls.Api.store_settings, role)

    async def set_store_settings(self, payload: Mapping[str, Any], role: str = "vendor") -> Dict[str, Any]:
        return await self._request(
            "set_store_settings", "PUT", sub_urls.Api.store_settings, role, json=dict(payload)
        )

    # Coupons and taxes

    async def create_coupon(self, payload: Mapping[str, Any], role: str = "admin") -> Dict[str, Any]:
        return await self._request("create_coupon", "POST", sub_urls.Api.coupons, role, json=dict(payload))

    async def delete_coupon(self, coupon_id: int, role: str = "admin") -> Dict[str, Any]:
        return await self._request(
            "delete_coupon", "DELETE", f"{sub_urls.Api.coupons}/{coupon_id}", role, params={"force": "true"}
        )

    async def create_tax_rate(self, payload: Mapping[str, Any], role: str = "admin") -> Dict[str, Any]:
        return await self._request("create_tax_rate", "POST", sub_urls.Api.taxes, role, json=dict(payload))

    async def delete_tax_rate(self, tax_id: int, role: str = "admin") -> Dict[str, Any]:
        return await self._request(
            "delete_tax_rate", "DELETE", f"{sub_urls.Api.taxes}/{tax_id}", role, params={"force": "true"}
        )
