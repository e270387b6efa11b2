"""REST bodies and stored-meta shapes used by fixture setup and teardown."""
from __future__ import annotations

from typing import Any, Dict, Optional

from marketplace_e2e.data import unique_id


class ModuleIds:
    mangopay = "mangopay"
    paypal_marketplace = "paypal_marketplace"
    razorpay = "razorpay"
    stripe = "stripe"
    stripe_express = "stripe_express"
    live_search = "live_search"
    store_support = "store_support"
    vendor_subscription = "product_subscription"
    request_for_quotation = "request_for_quotation"
    live_chat = "live_chat"
    rma = "rma"
    wholesale = "wholesale"
    germanized = "germanized"
    delivery_time = "delivery_time"
    product_advertising = "product_advertising"
    geolocation = "geolocation"
    report_abuse = "report_abuse"
    spmv = "spmv"

    payment_modules = (mangopay, paypal_marketplace, razorpay, stripe, stripe_express)
    settings_modules = (
        live_search, store_support, vendor_subscription, request_for_quotation, live_chat, rma, wholesale,
        germanized, delivery_time, product_advertising, geolocation, report_abuse, spmv,
    )
    all = payment_modules + settings_modules


module_ids = ModuleIds

# Checkout gateway ids rendered by each payment module.
MODULE_GATEWAYS: Dict[str, str] = {
    ModuleIds.mangopay: "dokan_mangopay",
    ModuleIds.paypal_marketplace: "dokan_paypal_marketplace",
    ModuleIds.razorpay: "dokan_razorpay",
    ModuleIds.stripe: "dokan-stripe-connect",
    ModuleIds.stripe_express: "dokan_stripe_express",
}

# wp_options rows, one per admin settings section.
DOKAN_SETTINGS_OPTIONS = (
    "dokan_general",
    "dokan_selling",
    "dokan_withdraw",
    "dokan_reverse_withdrawal",
    "dokan_pages",
    "dokan_appearance",
    "dokan_privacy",
    "dokan_live_search",
    "dokan_store_support",
    "dokan_email_verification",
    "dokan_product_subscription",
    "dokan_quote_settings",
    "dokan_live_chat",
    "dokan_rma",
    "dokan_wholesale",
    "dokan_germanized",
    "dokan_delivery_time",
    "dokan_product_advertisement",
    "dokan_geolocation",
    "dokan_report_abuse",
    "dokan_spmv",
)


def currency(code: str = "USD") -> Dict[str, Any]:
    """Batch body setting the store currency."""
    return {"update": [{"id": "woocommerce_currency", "value": code}]}


default_currency = currency("USD")

def coupon(code: Optional[str] = None) -> Dict[str, Any]:
    """Coupon body; the code is unique per call unless given."""
    return {
        "code": code or unique_id("e2e-coupon"),
        "discount_type": "percent",
        "amount": "10",
        "individual_use": False,
    }

tax_rate: Dict[str, Any] = {
    "country": "",
    "state": "",
    "rate": "5.0000",
    "name": "Tax",
    "priority": 1,
    "shipping": True,
}

default_store_settings: Dict[str, Any] = {
    "store_name": "vendorStore1",
    "social": {},
    "payment": {},
    "phone": "0123456789",
    "show_email": "no",
    "address": {
        "street_1": "abc street",
        "street_2": "xyz street",
        "city": "New York",
        "zip": "10003",
        "country": "US",
        "state": "NY",
    },
    "store_ppp": 12,
}

# Stored shape of the vendor profile payment block.
payment_settings: Dict[str, Any] = {
    "payment": {
        "paypal": {"email": "paypal@g.c"},
        "bank": {
            "ac_name": "accountName",
            "ac_type": "personal",
            "ac_number": "0123456789",
            "bank_name": "bankName",
            "bank_addr": "New York, USA",
            "routing_number": "987654321",
            "iban": "GB33BUKB20201555555555",
            "swift": "BUKBGB22",
            "declaration": "on",
        },
        "skrill": {"email": "skrill@g.c"},
        "dokan_custom": {"value": "0123456789"},
    }
}


def bank_payment_settings() -> Dict[str, Any]:
    return {"payment": {"bank": dict(payment_settings["payment"]["bank"])}}
