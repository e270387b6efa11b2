"""Test data registry.

Scenario inputs are frozen dataclasses shaped like the form they fill; each
field is read by exactly one page-object step. Expected banners and error
texts sit next to the inputs they confirm. Values that must be unique per
run come from the factory functions at the bottom of this module.
"""
from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from typing import Tuple

SETTINGS_SAVED = "Setting has been saved successfully."
WC_SETTINGS_SAVED = "Your settings have been saved."
VENDOR_SETTINGS_SAVED = "Your information has been saved successfully"


class SubUrls:
    """Site-relative paths of every screen and the endpoints waited on."""

    login = "wp-login.php"
    ajax = "wp-admin/admin-ajax.php"

    dokan_settings = "wp-admin/admin.php?page=dokan#/settings"
    wc_settings_general = "wp-admin/admin.php?page=wc-settings&tab=general"
    wc_settings_checkout = "wp-admin/admin.php?page=wc-settings&tab=checkout"
    setup_wizard = "wp-admin/index.php?page=dokan-setup"

    vendor_payments = "dashboard/settings/payment/"
    vendor_withdraw = "dashboard/withdraw/"

    gmap = "maps/api/place/autocomplete"

    @staticmethod
    def setup_wizard_step(step: str) -> str:
        return f"{SubUrls.setup_wizard}&step={step}"

    @staticmethod
    def vendor_manage_payment(method: str) -> str:
        return f"dashboard/settings/payment-manage-{method}/"

    class Api:
        modules = "wp-json/dokan/v1/admin/modules"
        activate_modules = "wp-json/dokan/v1/admin/modules/activate"
        deactivate_modules = "wp-json/dokan/v1/admin/modules/deactivate"
        store_settings = "wp-json/dokan/v1/settings"
        wc_settings = "wp-json/wc/v3/settings"
        coupons = "wp-json/wc/v3/coupons"
        taxes = "wp-json/wc/v3/taxes"


sub_urls = SubUrls


# Admin > Dokan settings


@dataclass(frozen=True)
class GeneralSettings:
    vendor_store_url: str = "store"
    setup_wizard_message: str = "Thank you for choosing The Marketplace to power your online store!"
    selling_product_types: str = "sell_both"
    store_product_per_page: str = "12"
    store_category: str = "Single"
    setting_title: str = "General"
    save_success_message: str = SETTINGS_SAVED


@dataclass(frozen=True)
class SellingSettings:
    commission_type: str = "percentage"
    commission_percentage: str = "10"
    commission_fixed: str = "0"
    shipping_fee_recipient: str = "seller"
    product_tax_fee_recipient: str = "seller"
    shipping_tax_fee_recipient: str = "seller"
    new_product_status: str = "publish"
    setting_title: str = "Selling Options"
    save_success_message: str = SETTINGS_SAVED


@dataclass(frozen=True)
class WithdrawCharge:
    paypal: str = "0"
    bank: str = "0"
    skrill: str = "0"
    custom: str = "0"


@dataclass(frozen=True)
class WithdrawSettings:
    custom_method_name: str = "Bkash"
    custom_method_type: str = "Email"
    charge: WithdrawCharge = field(default_factory=WithdrawCharge)
    minimum_withdraw_amount: str = "5"
    withdraw_threshold: str = "0"
    quarterly_schedule_month: str = "march"
    quarterly_schedule_week: str = "1"
    quarterly_schedule_day: str = "monday"
    monthly_schedule_week: str = "1"
    monthly_schedule_day: str = "monday"
    biweekly_schedule_week: str = "1"
    biweekly_schedule_day: str = "monday"
    weekly_schedule_day: str = "monday"
    setting_title: str = "Withdraw Options"
    save_success_message: str = SETTINGS_SAVED


@dataclass(frozen=True)
class ReverseWithdrawSettings:
    billing_type: str = "by_amount"
    reverse_balance_threshold: str = "150"
    grace_period: str = "7"
    setting_title: str = "Reverse Withdrawal"
    save_success_message: str = SETTINGS_SAVED


@dataclass(frozen=True)
class PageSettings:
    dashboard: str = "Dashboard"
    my_orders: str = "My Orders"
    store_listing: str = "Store List"
    terms_and_conditions: str = "Terms and Conditions"
    setting_title: str = "Page Settings"
    save_success_message: str = SETTINGS_SAVED


@dataclass(frozen=True)
class AppearanceSettings:
    map_api_source: str = "google_maps"
    google_map_api_key: str = "test-google-map-key"
    store_header_template: str = "default"
    store_banner_width: str = "625"
    store_banner_height: str = "300"
    setting_title: str = "Appearance"
    save_success_message: str = SETTINGS_SAVED


@dataclass(frozen=True)
class PrivacyPolicySettings:
    privacy_page: str = "privacy-policy"
    privacy_policy_content: str = "Your personal data will be used to process your request."
    setting_title: str = "Privacy Policy"
    save_success_message: str = SETTINGS_SAVED


@dataclass(frozen=True)
class LiveSearchSettings:
    live_search_option: str = "suggestion_box"
    setting_title: str = "Live Search"
    save_success_message: str = SETTINGS_SAVED


@dataclass(frozen=True)
class StoreSupportSettings:
    display_on_single_product_page: str = "above_tab"
    support_button_label: str = "Get Support"
    setting_title: str = "Store Support"
    save_success_message: str = SETTINGS_SAVED


@dataclass(frozen=True)
class EmailVerificationSettings:
    registration_notice: str = "Please check your email and complete email verification to login."
    login_notice: str = "Please check your email and complete email verification to login."
    setting_title: str = "Email Verification"
    save_success_message: str = SETTINGS_SAVED


@dataclass(frozen=True)
class VendorSubscriptionSettings:
    display_page: str = "Dashboard"
    no_of_days: str = "2"
    product_status: str = "draft"
    cancelling_email_subject: str = "Subscription Package Cancel notification"
    cancelling_email_body: str = "Dear subscriber, Your subscription has expired. Please renew your package to continue using it."
    alert_email_subject: str = "Subscription Ending Soon"
    alert_email_body: str = "Dear subscriber, Your subscription will be ending soon. Please renew your package in a timely"
    setting_title: str = "Vendor Subscription"
    save_success_message: str = SETTINGS_SAVED


@dataclass(frozen=True)
class QuoteSettings:
    decrease_offered_price: str = "10"
    setting_title: str = "Quote"
    save_success_message: str = SETTINGS_SAVED


@dataclass(frozen=True)
class LiveChatSettings:
    chat_provider: str = "talkjs"
    talk_js_app_id: str = "test-app-id"
    talk_js_app_secret: str = "test-app-secret"
    chat_button_position: str = "above_tab"
    setting_title: str = "Live Chat"
    save_success_message: str = SETTINGS_SAVED


@dataclass(frozen=True)
class RmaSettings:
    order_status: str = "wc-processing"
    rma_reasons: Tuple[str, ...] = ("Defective", "Wrong Product", "Other")
    refund_policy: str = "Items can be returned within 14 days of delivery."
    setting_title: str = "RMA"
    save_success_message: str = SETTINGS_SAVED


@dataclass(frozen=True)
class WholesaleSettings:
    who_can_see_wholesale_price: str = "all_user"
    setting_title: str = "Wholesale"
    save_success_message: str = SETTINGS_SAVED


@dataclass(frozen=True)
class EuComplianceSettings:
    setting_title: str = "EU Compliance Fields"
    save_success_message: str = SETTINGS_SAVED


FULL_DAY = "full_day"


@dataclass(frozen=True)
class DeliveryTimeSettings:
    delivery_date_label: str = "Delivery Date"
    delivery_blocked_buffer: str = "0"
    time_slot: str = "30"
    order_per_slot: str = "0"
    delivery_box_info: str = "This store needs %DAY% day(s) to process your delivery request"
    days: Tuple[str, ...] = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
    full_day: bool = True
    opening_time: str = "09:00"
    closing_time: str = "17:00"
    setting_title: str = "Delivery Time"
    save_success_message: str = SETTINGS_SAVED


@dataclass(frozen=True)
class ProductAdvertisingSettings:
    no_of_available_slot: str = "100"
    expire_after_days: str = "10"
    advertisement_cost: str = "15"
    setting_title: str = "Product Advertising"
    save_success_message: str = SETTINGS_SAVED


@dataclass(frozen=True)
class GeolocationSettings:
    location_map_position: str = "top"
    show_map: str = "all"
    radius_search_unit: str = "km"
    radius_search_minimum_distance: str = "0"
    radius_search_maximum_distance: str = "10"
    map_zoom_level: str = "11"
    default_location: str = "New York"
    default_location_match: str = "New York, NY, USA"
    setting_title: str = "Geolocation"
    save_success_message: str = SETTINGS_SAVED


@dataclass(frozen=True)
class ProductReportAbuseSettings:
    reasons_for_abuse_report: str = "This product is fake"
    setting_title: str = "Product Report Abuse"
    save_success_message: str = SETTINGS_SAVED


@dataclass(frozen=True)
class SpmvSettings:
    sell_item_button_text: str = "Sell This Item"
    available_vendor_display_area_title: str = "Other Available Vendor"
    available_vendor_section_display_position: str = "below_tabs"
    show_spmv_products: str = "min_price"
    setting_title: str = "Single Product MultiVendor"
    save_success_message: str = SETTINGS_SAVED


@dataclass(frozen=True)
class DokanSettings:
    general: GeneralSettings = field(default_factory=GeneralSettings)
    selling: SellingSettings = field(default_factory=SellingSettings)
    withdraw: WithdrawSettings = field(default_factory=WithdrawSettings)
    reverse_withdraw: ReverseWithdrawSettings = field(default_factory=ReverseWithdrawSettings)
    page: PageSettings = field(default_factory=PageSettings)
    appearance: AppearanceSettings = field(default_factory=AppearanceSettings)
    privacy_policy: PrivacyPolicySettings = field(default_factory=PrivacyPolicySettings)
    live_search: LiveSearchSettings = field(default_factory=LiveSearchSettings)
    store_support: StoreSupportSettings = field(default_factory=StoreSupportSettings)
    email_verification: EmailVerificationSettings = field(default_factory=EmailVerificationSettings)
    vendor_subscription: VendorSubscriptionSettings = field(default_factory=VendorSubscriptionSettings)
    quote: QuoteSettings = field(default_factory=QuoteSettings)
    live_chat: LiveChatSettings = field(default_factory=LiveChatSettings)
    rma: RmaSettings = field(default_factory=RmaSettings)
    wholesale: WholesaleSettings = field(default_factory=WholesaleSettings)
    eu_compliance: EuComplianceSettings = field(default_factory=EuComplianceSettings)
    delivery_time: DeliveryTimeSettings = field(default_factory=DeliveryTimeSettings)
    product_advertising: ProductAdvertisingSettings = field(default_factory=ProductAdvertisingSettings)
    geolocation: GeolocationSettings = field(default_factory=GeolocationSettings)
    product_report_abuse: ProductReportAbuseSettings = field(default_factory=ProductReportAbuseSettings)
    spmv: SpmvSettings = field(default_factory=SpmvSettings)


# Admin > WooCommerce payments


@dataclass(frozen=True)
class CurrencySettings:
    dollar: str = "USD"
    euro: str = "EUR"
    rupee: str = "INR"
    save_success_message: str = WC_SETTINGS_SAVED


@dataclass(frozen=True)
class PaymentSettings:
    currency: CurrencySettings = field(default_factory=CurrencySettings)
    basic_gateways: Tuple[str, ...] = ("bacs", "cheque", "cod")
    toggle_enabled_class: str = "woocommerce-input-toggle--enabled"
    toggle_disabled_class: str = "woocommerce-input-toggle--disabled"
    save_success_message: str = WC_SETTINGS_SAVED


# Vendor dashboard


@dataclass(frozen=True)
class VendorPayment:
    method_name: str = "paypal"
    email: str = "paypal@g.c"
    custom_value: str = "0123456789"
    bank_account_name: str = "accountName"
    bank_account_type: str = "personal"
    bank_account_number: str = "0123456789"
    bank_name: str = "bankName"
    bank_address: str = "New York, USA"
    bank_routing_number: str = "987654321"
    bank_iban: str = "GB33BUKB20201555555555"
    bank_swift_code: str = "BUKBGB22"
    save_success_message: str = VENDOR_SETTINGS_SAVED


@dataclass(frozen=True)
class WithdrawRequest:
    amount: str = "10"
    method: str = "paypal"
    success_message: str = "Your request has been received successfully and is being reviewed!"
    minimum_error_template: str = "Withdraw amount must be greater than or equal to {minimum}"

    def minimum_error(self, minimum: str) -> str:
        return self.minimum_error_template.format(minimum=minimum)


# Admin > setup wizard


@dataclass(frozen=True)
class SetupWizard:
    vendor_store_url: str = "store"
    shipping_fee_recipient: str = "seller"
    tax_fee_recipient: str = "seller"
    enable_selling: bool = True
    commission_type: str = "percentage"
    admin_commission: str = "10"
    order_status_change: bool = True
    withdraw_methods: Tuple[str, ...] = ("paypal", "bank", "skrill")
    minimum_withdraw_limit: str = "5"
    withdraw_order_status: Tuple[str, ...] = ("wc-completed", "wc-processing")
    step_titles: Tuple[str, ...] = ("Store Setup", "Selling Setup", "Withdraw Setup")
    ready_message: str = "Your Marketplace is Ready!"


@dataclass(frozen=True)
class HarnessData:
    dokan_settings: DokanSettings = field(default_factory=DokanSettings)
    payment: PaymentSettings = field(default_factory=PaymentSettings)
    vendor_payment: VendorPayment = field(default_factory=VendorPayment)
    withdraw_request: WithdrawRequest = field(default_factory=WithdrawRequest)
    setup_wizard: SetupWizard = field(default_factory=SetupWizard)


data = HarnessData()


def unique_suffix(length: int = 4) -> str:
    return secrets.token_hex(length)


def unique_email(prefix: str = "vendor", domain: str = "example.com") -> str:
    """Email address no other run will produce."""
    return f"{prefix}_{unique_suffix()}@{domain}"


def unique_id(prefix: str) -> str:
    """``prefix`` plus a random suffix, for codes and names the site keeps unique."""
    return f"{prefix}-{unique_suffix()}"
