"""Mock marketplace site for exercising the harness without WordPress.

Reproduces the HTTP and DOM surface the page objects and REST client talk to:

- wp-login.php: cookie login for admin / vendor / customer
- Admin settings screen: tabbed sections, switches, rich-text iframes, ajax save
- WooCommerce general (currency) and checkout (gateway toggles) tabs
- Admin setup wizard: store -> selling -> withdraw -> ready
- Vendor dashboard: payout methods and withdraw requests
- REST: modules, WooCommerce settings groups, store settings, coupons, taxes

Settings, gateways and modules live in memory per app instance. Vendor
profile meta is stored in a real SQLAlchemy database through ``DbUtils`` so
fixture writes made with ``DbUtils`` show up in the vendor screens.
Business rules are limited to what the scenarios observe (minimum withdraw
limit, declaration checkbox, tier and module gating).
"""
from __future__ import annotations

import secrets
import threading
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from flask import Flask, Response, jsonify, redirect, render_template_string, request
from markupsafe import Markup, escape
from werkzeug.serving import make_server

from marketplace_e2e.config import Credentials, settings
from marketplace_e2e.db_utils import DbUtils
from marketplace_e2e.helpers import is_truthy_option
from marketplace_e2e.payloads import module_ids

PROFILE_META_KEY = "dokan_profile_settings"
LOGIN_COOKIE = "wordpress_logged_in"
VENDOR_BALANCE = 1000.0

Options = Tuple[Tuple[str, str], ...]

PAGES: Options = (
    ("4", "Dashboard"),
    ("5", "My Orders"),
    ("6", "Store List"),
    ("7", "Terms and Conditions"),
    ("8", "Privacy Policy"),
    ("9", "Subscription"),
)
RECIPIENTS: Options = (("seller", "Vendor"), ("admin", "Admin"))
WEEKDAYS: Options = tuple((day, day.title()) for day in ("monday", "tuesday", "wednesday", "thursday", "friday"))
WEEKS: Options = (("1", "First"), ("2", "Second"), ("3", "Third"), ("L", "Last"))
DELIVERY_DAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
DELIVERY_TIMES: Options = (("full_day", "Full day"), ("09:00", "9:00 am"), ("12:00", "12:00 pm"), ("17:00", "5:00 pm"))


@dataclass(frozen=True)
class Field:
    kind: str
    key: str
    default: str = ""
    options: Options = ()
    pro: bool = False

    @property
    def label(self) -> str:
        return self.key.replace("_", " ").title()


@dataclass(frozen=True)
class Section:
    id: str
    title: str
    fields: Tuple[Field, ...]
    pro: bool = False
    module: Optional[str] = None


def _switch(key: str, default: str = "off", pro: bool = False) -> Field:
    return Field("switch", key, default, pro=pro)


def _text(key: str, default: str = "", pro: bool = False) -> Field:
    return Field("text", key, default, pro=pro)


def _select(key: str, options: Options, default: str = "", pro: bool = False) -> Field:
    return Field("select", key, default or options[0][0], options, pro)


def _radio(key: str, options: Options, default: str = "", pro: bool = False) -> Field:
    return Field("radio", key, default or options[0][0], options, pro)


SECTIONS: Tuple[Section, ...] = (
    Section("dokan_general", "General", (
        _switch("admin_access", "on"),
        _text("custom_store_url", "store"),
        Field("richtext", "setup_wizard_message", "Thank you for choosing the marketplace."),
        _radio("global_digital_mode", (("sell_both", "Both"), ("sell_digital", "Digital"), ("sell_physical", "Physical")), pro=True),
        _switch("seller_enable_terms_and_conditions"),
        _text("store_products_per_page", "12"),
        _switch("enable_tc_on_reg", pro=True),
        _radio("store_category_type", (("None", "None"), ("Single", "Single"), ("Multiple", "Multiple")), pro=True),
        _switch("show_vendor_info"),
        _switch("enabled_more_products_tab", "on"),
    )),
    Section("dokan_selling", "Selling Options", (
        _select("commission_type", (("percentage", "Percentage"), ("flat", "Flat"), ("combine", "Combine"))),
        _text("admin_percentage", "10"),
        _text("additional_fee", "0"),
        _radio("shipping_fee_recipient", RECIPIENTS),
        _radio("tax_fee_recipient", RECIPIENTS),
        _radio("shipping_tax_fee_recipient", RECIPIENTS),
        _switch("new_seller_enable_selling", "on"),
        _switch("one_step_product_create", "on"),
        _switch("order_status_change", "on"),
        _radio("product_status", (("publish", "Published"), ("pending", "Pending Review")), pro=True),
        _switch("product_vendors_can_create_tags", pro=True),
        _switch("discount_edit_order", pro=True),
        _switch("discount_edit_product", pro=True),
        _switch("catalog_mode_hide_add_to_cart_button"),
        _switch("catalog_mode_hide_product_price"),
    )),
    Section("dokan_withdraw", "Withdraw Options", (
        _switch("withdraw_methods_paypal", "on"),
        _switch("withdraw_methods_bank", "on"),
        _switch("withdraw_methods_dokan_custom", pro=True),
        _switch("withdraw_methods_skrill", pro=True),
        _text("withdraw_method_name", pro=True),
        _text("withdraw_method_type", pro=True),
        _text("withdraw_charge_paypal", "0"),
        _text("withdraw_charge_bank", "0"),
        _text("withdraw_charge_skrill", "0", pro=True),
        _text("withdraw_charge_dokan_custom", "0", pro=True),
        _text("withdraw_limit", "50"),
        _switch("withdraw_order_status_completed", "on"),
        _switch("withdraw_order_status_processing"),
        _text("withdraw_threshold", "0", pro=True),
        _switch("disbursement_manual", "on", pro=True),
        _switch("disbursement_auto", pro=True),
        _switch("disbursement_schedule_quarterly", pro=True),
        _switch("disbursement_schedule_monthly", pro=True),
        _switch("disbursement_schedule_biweekly", pro=True),
        _switch("disbursement_schedule_weekly", pro=True),
        _select("quarterly_schedule_month", (("january", "January"), ("february", "February"), ("march", "March")), pro=True),
        _select("quarterly_schedule_week", WEEKS, pro=True),
        _select("quarterly_schedule_day", WEEKDAYS, pro=True),
        _select("monthly_schedule_week", WEEKS, pro=True),
        _select("monthly_schedule_day", WEEKDAYS, pro=True),
        _select("biweekly_schedule_week", (("1", "1st and 3rd"), ("2", "2nd and 4th")), pro=True),
        _select("biweekly_schedule_day", WEEKDAYS, pro=True),
        _select("weekly_schedule_day", WEEKDAYS, pro=True),
    )),
    Section("dokan_reverse_withdrawal", "Reverse Withdrawal", (
        _switch("enabled"),
        _switch("payment_gateways_cod"),
        _select("billing_type", (("by_amount", "By Amount"), ("monthly", "Monthly"))),
        _text("reverse_balance_threshold", "150"),
        _text("due_period", "7"),
        _switch("failed_actions_enable_catalog_mode"),
        _switch("failed_actions_hide_withdraw_menu"),
        _switch("failed_actions_status_inactive"),
        _switch("display_notice"),
        _switch("send_announcement", pro=True),
    )),
    Section("dokan_pages", "Page Settings", (
        _select("dashboard", PAGES),
        _select("my_orders", PAGES, "5"),
        _select("store_listing", PAGES, "6"),
        _select("reg_tc_page", PAGES, "7"),
    )),
    Section("dokan_appearance", "Appearance", (
        _switch("store_map", "on"),
        _radio("map_api_source", (("google_maps", "Google Maps"), ("mapbox", "Mapbox"))),
        _text("gmap_api_key"),
        _text("mapbox_access_token"),
        _switch("contact_seller", "on"),
        _radio("store_header_template", (("default", "Default"), ("layout1", "Layout 1"), ("layout2", "Layout 2"), ("layout3", "Layout 3"))),
        _text("store_banner_width", "625", pro=True),
        _text("store_banner_height", "300", pro=True),
        _switch("store_open_close", "on", pro=True),
    )),
    Section("dokan_privacy", "Privacy Policy", (
        _switch("enable_privacy", "on"),
        _select("privacy_page", (("privacy-policy", "Privacy Policy"), ("terms", "Terms and Conditions"))),
        Field("richtext", "privacy_policy", "Your personal data will be used to support your experience."),
    )),
    Section("dokan_live_search", "Live Search", (
        _select("live_search_option", (("suggestion_box", "Search with Suggestion Box"), ("old_live_search", "Autoload Replace Current Content"))),
    ), module="live_search"),
    Section("dokan_store_support", "Store Support", (
        _switch("enabled_for_customer_order"),
        _select("store_support_product_page", (("above_tab", "Above Product Tab"), ("inside_tab", "Inside Product Tab"), ("dont_show", "Don't Show"))),
        _text("support_button_label", "Get Support"),
    ), module="store_support"),
    Section("dokan_email_verification", "Email Verification", (
        _switch("enabled"),
        _text("registration_notice"),
        _text("login_notice"),
    ), pro=True),
    Section("dokan_product_subscription", "Vendor Subscription", (
        _select("subscription_pack", PAGES, "9"),
        _switch("enable_pricing"),
        _switch("enable_subscription_pack_in_reg"),
        _switch("notify_by_email"),
        _text("no_of_days_before_mail", "2"),
        _select("product_status_after_end", (("publish", "Published"), ("pending", "Pending Review"), ("draft", "Draft"))),
        _text("cancelling_email_subject"),
        Field("textarea", "cancelling_email_body"),
        _text("alert_email_subject"),
        Field("textarea", "alert_email_body"),
    ), module="product_subscription"),
    Section("dokan_quote_settings", "Quote", (
        _switch("enable_out_of_stock"),
        _switch("enable_ajax_add_to_quote"),
        _switch("redirect_to_quote_page"),
        _text("decrease_offered_price", "0"),
    ), module="request_for_quotation"),
    Section("dokan_live_chat", "Live Chat", (
        _switch("enable"),
        _radio("provider", (("messenger", "Facebook Messenger"), ("talkjs", "TalkJS"), ("tawkto", "Tawk.to"), ("whatsapp", "WhatsApp"))),
        _text("app_id"),
        _text("app_secret"),
        _switch("chat_button_seller_page"),
        _select("chat_button_product_page", (("above_tab", "Above Product Tab"), ("inside_tab", "Inside Product Tab"), ("dont_show", "Don't Show"))),
    ), module="live_chat"),
    Section("dokan_rma", "RMA", (
        _select("rma_order_status", (("wc-completed", "Completed"), ("wc-processing", "Processing"), ("wc-on-hold", "On hold"))),
        _switch("rma_enable_refund_request"),
        _switch("rma_enable_coupon_request"),
        Field("list", "rma_reasons", "Defective|Wrong Product"),
        Field("richtext", "rma_policy", "Refund Policy"),
    ), module="rma"),
    Section("dokan_wholesale", "Wholesale", (
        _radio("wholesale_price_display", (("all_user", "Display wholesale price to all users"), ("wholesale_customer", "Display wholesale price to wholesale customers only"))),
        _switch("display_price_in_shop_archieve"),
        _switch("need_approval_for_wholesale_customer", "on"),
    ), module="wholesale"),
    Section("dokan_germanized", "EU Compliance Fields", tuple(
        _switch(key) for key in (
            "vendor_company_name", "vendor_company_id_number", "vendor_vat_number", "vendor_bank_name", "vendor_bank_iban",
            "vendor_show_on_registration", "customer_company_id_number", "customer_vat_number", "customer_bank_name",
            "customer_bank_iban", "enabled_germanized", "override_invoice_number",
        )
    ), module="germanized"),
    Section("dokan_delivery_time", "Delivery Time", (
        _switch("allow_vendor_override_settings"),
        _switch("enable_delivery"),
        _switch("enable_store_pickup"),
        _text("delivery_date_label", "Delivery Date"),
        _text("preorder_date", "0"),
        _text("time_slot_minutes", "30"),
        _text("order_per_slot", "0"),
        _text("delivery_box_info", "This store needs %DAY% day(s) to process your delivery request"),
        _switch("selected_date_time_required", "on"),
        *(
            f
            for day in DELIVERY_DAYS
            for f in (
                _switch(f"delivery_day_{day}"),
                _select(f"opening_time_{day}", DELIVERY_TIMES),
                _select(f"closing_time_{day}", DELIVERY_TIMES),
            )
        ),
    ), module="delivery_time"),
    Section("dokan_product_advertisement", "Product Advertising", (
        _text("total_available_slot", "100"),
        _text("expire_after_days", "10"),
        _switch("vendor_can_purchase_advertisement", "on"),
        _text("cost", "15"),
        _switch("enable_advertisement_for_subscription"),
        _switch("featured"),
        _switch("display_on_top"),
        _switch("hide_out_of_stock_items"),
    ), module="product_advertising"),
    Section("dokan_geolocation", "Geolocation", (
        _radio("show_locations_map", (("top", "Top"), ("left", "Left"), ("right", "Right"))),
        _radio("show_location_map_pages", (("all", "Both"), ("store_listing", "Store Listing"), ("shop", "Shop Page"))),
        _switch("show_filters_before_locations_map", "on"),
        _switch("show_product_location_in_wc_tab", "on"),
        _radio("distance_unit", (("km", "Kilometers"), ("miles", "Miles"))),
        _text("distance_min", "0"),
        _text("distance_max", "10"),
        _text("map_zoom", "11"),
        Field("location", "location"),
    ), module="geolocation"),
    Section("dokan_report_abuse", "Product Report Abuse", (
        Field("list", "abuse_reasons", "This content is spam|This content is abusive|Other"),
    ), module="report_abuse"),
    Section("dokan_spmv", "Single Product MultiVendor", (
        _switch("enable_pricing"),
        _text("sell_item_btn", "Sell This Item"),
        _text("available_vendor_list_title", "Other Available Vendor"),
        _select("available_vendor_list_position", (("below_tabs", "Below Product Tabs"), ("inside_tabs", "Inside Product Tabs"), ("after_tabs", "After Single Product"))),
        _select("show_order", (("show_all", "Show all products"), ("min_price", "Min Price"), ("max_price", "Max Price"), ("top_rated_vendor", "Top rated vendor"))),
    ), module="spmv"),
)

MODULES = module_ids.all

BASIC_GATEWAYS: Tuple[Tuple[str, str], ...] = (
    ("bacs", "Direct bank transfer"),
    ("cheque", "Check payments"),
    ("cod", "Cash on delivery"),
)
MODULE_GATEWAYS: Tuple[Tuple[str, str, str], ...] = (
    ("mangopay", "dokan_mangopay", "MangoPay"),
    ("paypal_marketplace", "dokan_paypal_marketplace", "PayPal Marketplace"),
    ("razorpay", "dokan_razorpay", "Razorpay"),
    ("stripe", "dokan-stripe-connect", "Dokan Credit card (Stripe)"),
    ("stripe_express", "dokan_stripe_express", "Dokan Express Payment Methods"),
)

CURRENCIES: Options = (
    ("USD", "United States (US) dollar ($)"),
    ("EUR", "Euro (€)"),
    ("INR", "Indian rupee (₹)"),
    ("GBP", "Pound sterling (£)"),
)

# method slug -> (label, field keys, pro only)
PAYMENT_METHODS: Dict[str, Tuple[str, Tuple[str, ...], bool]] = {
    "paypal": ("PayPal", ("email",), False),
    "bank": ("Bank Transfer", ("ac_name", "ac_type", "ac_number", "routing_number", "bank_name", "bank_addr", "iban", "swift", "declaration"), False),
    "skrill": ("Skrill", ("email",), True),
    "dokan_custom": ("Custom", ("value",), True),
}

WIZARD_STEPS: Tuple[Tuple[str, str], ...] = (
    ("introduction", "Introduction"),
    ("store", "Store"),
    ("selling", "Selling"),
    ("withdraw", "Withdraw"),
    ("next_steps", "Ready!"),
)

CSS = """
body { font-family: sans-serif; margin: 0; padding: 16px; }
.nav-tab { display: inline-block; padding: 6px 10px; cursor: pointer; border: 1px solid #ccc; }
.nav-tab-active { background: #fff; border-bottom-color: #fff; }
.group { display: none; } .group.active { display: block; }
.field-row { padding: 6px 0; } .field-row.hidden { display: none; }
label.switch { position: relative; display: inline-block; width: 40px; height: 20px; }
label.switch input { position: absolute; opacity: 0; width: 0; height: 0; }
label.switch .slider { position: absolute; inset: 0; background: #ccc; border-radius: 20px; cursor: pointer; }
label.switch input:checked + .slider { background: rgb(0, 144, 255); }
iframe.richtext { width: 480px; height: 80px; border: 1px solid #ccc; }
.spacer { height: 3000px; }
.back-to-top { position: fixed; right: 20px; bottom: 20px; display: none; padding: 6px 10px; background: #eee; cursor: pointer; }
.woocommerce-input-toggle { display: inline-block; width: 32px; height: 16px; background: #ccc; border-radius: 8px; cursor: pointer; }
.woocommerce-input-toggle--enabled { background: #2271b1; }
.dokan-withdraw-request-popup { display: none; } .dokan-withdraw-request-popup.open { display: block; }
"""

LAYOUT = """<!doctype html>
<html><head><meta charset="utf-8"><title>{{ title }}</title><style>{{ css }}</style></head>
<body class="{{ body_class }}">{{ content }}</body></html>"""

LOGIN_PAGE = """
<div id="login">
  <h1>Log In</h1>
  {% if error %}<div id="login_error">{{ error }}</div>{% endif %}
  <form name="loginform" id="loginform" method="post" action="/wp-login.php">
    <p><label for="user_login">Username or Email Address</label><input type="text" name="log" id="user_login"></p>
    <p><label for="user_pass">Password</label><input type="password" name="pwd" id="user_pass"></p>
    <p class="submit"><input type="submit" name="wp-submit" id="wp-submit" value="Log In"></p>
  </form>
</div>
"""

SETTINGS_PAGE = """
<div class="dokan-settings-wrap">
  <h1 class="settings-header">Settings</h1>
  <div class="search-box">
    <input type="text" class="search-box-input" placeholder="Search e.g. vendor">
    <span class="search-close" role="button">&times;</span>
  </div>
  <div class="nav-tab-wrapper">
    {% for section in sections %}<div class="nav-tab{% if loop.first %} nav-tab-active{% endif %}" data-section="{{ section.id }}" data-title="{{ section.title }}">{{ section.title }}</div>{% endfor %}
  </div>
  <div class="metabox-holder">
    <h2 id="settings-section-title">{{ sections[0].title }}</h2>
    {% for section in sections %}
    <form class="group{% if loop.first %} active{% endif %}" id="{{ section.id }}">
      {% for f in section.fields %}{% set name = section.id ~ '[' ~ f.key ~ ']' %}
      <div class="field-row" data-field="{{ f.key }}">
        <span class="field-label">{{ f.label }}</span>
        {% if f.kind == 'switch' %}
        <label class="switch" for="{{ name }}"><input type="checkbox" id="{{ name }}" name="{{ name }}" value="on"{% if f.value == 'on' %} checked{% endif %}><span class="slider"></span></label>
        {% elif f.kind == 'text' %}
        <input type="text" name="{{ name }}" value="{{ f.value }}">
        {% elif f.kind == 'textarea' %}
        <textarea name="{{ name }}">{{ f.value }}</textarea>
        {% elif f.kind == 'select' %}
        <select name="{{ name }}">{% for value, label in f.options %}<option value="{{ value }}"{% if value == f.value %} selected{% endif %}>{{ label }}</option>{% endfor %}</select>
        {% elif f.kind == 'radio' %}
        {% for value, label in f.options %}<label class="radio"><input type="radio" name="{{ name }}" value="{{ value }}"{% if value == f.value %} checked{% endif %}> {{ label }}</label>{% endfor %}
        {% elif f.kind == 'richtext' %}
        <iframe id="{{ section.id }}_{{ f.key }}_ifr" class="richtext" data-target="{{ name }}" srcdoc="{{ f.srcdoc }}"></iframe>
        <textarea name="{{ name }}" hidden>{{ f.value }}</textarea>
        {% elif f.kind == 'list' %}
        <div class="dokan-list-field" data-target="{{ name }}">
          <ul class="dokan-list-items">{% for item in f.entries %}<li data-value="{{ item }}"><span>{{ item }}</span> <a class="remove-item" role="button">&times;</a></li>{% endfor %}</ul>
          <input type="text" class="list-input"> <button type="button" class="list-add">Add</button>
          <input type="hidden" name="{{ name }}" value="{{ f.value }}">
        </div>
        {% elif f.kind == 'location' %}
        <input type="text" name="{{ name }}" value="{{ f.value }}" class="location-search" autocomplete="off">
        <ul class="pac-container"></ul>
        {% endif %}
      </div>
      {% endfor %}
    </form>
    {% endfor %}
    <p class="submit"><button type="button" id="submit" class="button button-primary">Save Changes</button></p>
    <div class="settings-success" style="display: none"><p></p></div>
  </div>
  <div class="spacer"></div>
  <a class="back-to-top" role="button">Back to top</a>
</div>
<script>
const tabs = document.querySelectorAll('.nav-tab');
const banner = document.querySelector('.settings-success');
tabs.forEach((tab) => tab.addEventListener('click', () => {
  document.querySelectorAll('.group').forEach((group) => group.classList.toggle('active', group.id === tab.dataset.section));
  tabs.forEach((other) => other.classList.toggle('nav-tab-active', other === tab));
  document.getElementById('settings-section-title').textContent = tab.dataset.title;
  banner.style.display = 'none';
}));
document.getElementById('submit').addEventListener('click', async () => {
  const form = document.querySelector('.group.active');
  form.querySelectorAll('iframe.richtext').forEach((frame) => {
    form.elements.namedItem(frame.dataset.target).value = frame.contentDocument.body.innerText.trim();
  });
  const body = new URLSearchParams(new FormData(form));
  body.set('action', 'dokan_save_settings');
  body.set('section', form.id);
  const response = await fetch('/wp-admin/admin-ajax.php', { method: 'POST', body });
  const result = await response.json();
  banner.querySelector('p').textContent = result.data.message;
  banner.style.display = result.success ? 'block' : 'none';
});
const search = document.querySelector('.search-box-input');
search.addEventListener('input', () => {
  const query = search.value.trim().toLowerCase();
  document.querySelectorAll('.field-row').forEach((row) => {
    row.classList.toggle('hidden', query !== '' && !row.textContent.toLowerCase().includes(query));
  });
});
document.querySelector('.search-close').addEventListener('click', () => {
  search.value = '';
  document.querySelectorAll('.field-row').forEach((row) => row.classList.remove('hidden'));
});
document.querySelectorAll('.dokan-list-field').forEach((field) => {
  const list = field.querySelector('.dokan-list-items');
  const stored = field.querySelector('input[type="hidden"]');
  const input = field.querySelector('.list-input');
  const sync = () => { stored.value = [...list.querySelectorAll('li')].map((li) => li.dataset.value).join('|'); };
  const bindRemove = (li) => li.querySelector('.remove-item').addEventListener('click', () => { li.remove(); sync(); });
  list.querySelectorAll('li').forEach(bindRemove);
  field.querySelector('.list-add').addEventListener('click', () => {
    const value = input.value.trim();
    if (!value) { return; }
    const li = document.createElement('li');
    li.dataset.value = value;
    li.innerHTML = '<span></span> <a class="remove-item" role="button">&times;</a>';
    li.querySelector('span').textContent = value;
    list.appendChild(li);
    bindRemove(li);
    input.value = '';
    sync();
  });
});
document.querySelectorAll('.location-search').forEach((input) => {
  const results = input.parentElement.querySelector('.pac-container');
  input.addEventListener('input', async () => {
    const response = await fetch('/maps/api/place/autocomplete/json?input=' + encodeURIComponent(input.value));
    const data = await response.json();
    results.innerHTML = '';
    data.predictions.forEach((prediction) => {
      const item = document.createElement('li');
      item.className = 'pac-item';
      item.textContent = prediction.description;
      item.addEventListener('click', () => { input.value = prediction.description; results.innerHTML = ''; });
      results.appendChild(item);
    });
  });
});
const backToTop = document.querySelector('.back-to-top');
window.addEventListener('scroll', () => { backToTop.style.display = window.scrollY > 300 ? 'block' : 'none'; });
backToTop.addEventListener('click', () => window.scrollTo(0, 0));
</script>
"""

WC_GENERAL_PAGE = """
<div class="wrap woocommerce">
  <h1>General</h1>
  {% if notice %}<div id="message" class="updated inline"><p><strong>{{ notice }}</strong></p></div>{% endif %}
  <form method="post" id="mainform" action="">
    <table class="form-table">
      <tr><th><label for="woocommerce_currency">Currency</label></th>
        <td><select name="woocommerce_currency" id="woocommerce_currency">
          {% for value, label in currencies %}<option value="{{ value }}"{% if value == options.woocommerce_currency %} selected{% endif %}>{{ label }}</option>{% endfor %}
        </select></td></tr>
      <tr><th><label for="woocommerce_price_num_decimals">Number of decimals</label></th>
        <td><input type="number" name="woocommerce_price_num_decimals" id="woocommerce_price_num_decimals" value="{{ options.woocommerce_price_num_decimals }}"></td></tr>
    </table>
    <p class="submit"><button name="save" class="button-primary" type="submit" value="Save changes">Save changes</button></p>
  </form>
</div>
"""

WC_CHECKOUT_PAGE = """
<div class="wrap woocommerce">
  <h1>Payments</h1>
  {% if notice %}<div id="message" class="updated inline"><p><strong>{{ notice }}</strong></p></div>{% endif %}
  <form method="post" id="mainform" action="">
    <table class="wc_gateways widefat">
      <tbody>
      {% for gateway_id, title, enabled in gateways %}
        <tr data-gateway_id="{{ gateway_id }}">
          <td class="name">{{ title }}</td>
          <td class="status"><span class="woocommerce-input-toggle woocommerce-input-toggle--{{ 'enabled' if enabled else 'disabled' }}" role="switch" data-gateway="{{ gateway_id }}">{{ 'Yes' if enabled else 'No' }}</span></td>
        </tr>
      {% endfor %}
      </tbody>
    </table>
    <p class="submit"><button name="save" class="button-primary" type="submit" value="Save changes">Save changes</button></p>
  </form>
</div>
<script>
document.querySelectorAll('.woocommerce-input-toggle').forEach((toggle) => toggle.addEventListener('click', async () => {
  const body = new URLSearchParams({ action: 'woocommerce_toggle_gateway_enabled', gateway_id: toggle.dataset.gateway });
  const response = await fetch('/wp-admin/admin-ajax.php', { method: 'POST', body });
  const result = await response.json();
  if (!result.success) { return; }
  toggle.classList.toggle('woocommerce-input-toggle--enabled', result.data === true);
  toggle.classList.toggle('woocommerce-input-toggle--disabled', result.data !== true);
  toggle.textContent = result.data === true ? 'Yes' : 'No';
}));
</script>
"""

VENDOR_PAYMENT_PAGE = """
<div class="dokan-dashboard-wrap">
  <div class="dokan-dashboard-content">
    <header><h1 class="entry-title">Payment Method</h1></header>
    <ul class="dokan-payment-methods">
      {% for slug, label, configured in methods %}
      <li data-method="{{ slug }}">{{ label }}{% if configured %} <small>(configured)</small>{% endif %}
        <a class="dokan-manage-method" href="/dashboard/settings/payment-manage-{{ slug }}/">Manage</a></li>
      {% endfor %}
    </ul>
  </div>
</div>
"""

VENDOR_MANAGE_PAYMENT_PAGE = """
<div class="dokan-dashboard-wrap">
  <div class="dokan-dashboard-content">
    <header><h1 class="entry-title">{{ label }}</h1></header>
    <div class="dokan-ajax-response"></div>
    <form class="dokan-payment-form" data-method="{{ slug }}">
      {% if slug == 'bank' %}
      <input type="text" name="settings[bank][ac_name]" value="{{ values.ac_name }}" placeholder="Account holder">
      <select name="settings[bank][ac_type]">
        <option value="">Please select</option>
        {% for value in ('personal', 'business') %}<option value="{{ value }}"{% if value == values.ac_type %} selected{% endif %}>{{ value.title() }}</option>{% endfor %}
      </select>
      <input type="text" name="settings[bank][ac_number]" value="{{ values.ac_number }}" placeholder="Account number">
      <input type="text" name="settings[bank][routing_number]" value="{{ values.routing_number }}" placeholder="Routing number">
      <input type="text" name="settings[bank][bank_name]" value="{{ values.bank_name }}" placeholder="Bank name">
      <textarea name="settings[bank][bank_addr]" placeholder="Bank address">{{ values.bank_addr }}</textarea>
      <input type="text" name="settings[bank][iban]" value="{{ values.iban }}" placeholder="IBAN">
      <input type="text" name="settings[bank][swift]" value="{{ values.swift }}" placeholder="SWIFT">
      <label><input type="checkbox" id="declaration" name="settings[bank][declaration]" value="on"{% if values.declaration == 'on' %} checked{% endif %}> I attest that I am the owner and have full authorization to this bank account</label>
      {% else %}
      {% for key in keys %}<input type="text" name="settings[{{ slug }}][{{ key }}]" value="{{ values[key] }}" placeholder="{{ key }}">{% endfor %}
      {% endif %}
      <button type="button" name="dokan_update_payment_settings" class="dokan-btn dokan-btn-theme">Update Account</button>
      <button type="button" class="dokan-btn dokan-payment-disconnect-btn">Remove</button>
    </form>
  </div>
</div>
<script>
const form = document.querySelector('form.dokan-payment-form');
async function send(remove) {
  const body = new URLSearchParams(new FormData(form));
  body.set('action', 'dokan_settings');
  body.set('method', form.dataset.method);
  if (remove) { body.set('remove', '1'); }
  const response = await fetch('/wp-admin/admin-ajax.php', { method: 'POST', body });
  const result = await response.json();
  if (remove && result.success) {
    form.querySelectorAll('input[type="text"], textarea, select').forEach((input) => { input.value = ''; });
    form.querySelectorAll('input[type="checkbox"]').forEach((input) => { input.checked = false; });
  }
  const box = document.querySelector('.dokan-ajax-response');
  box.innerHTML = '';
  const alert = document.createElement('div');
  alert.className = 'dokan-alert ' + (result.success ? 'dokan-alert-success' : 'dokan-alert-danger');
  alert.textContent = result.data.message;
  box.appendChild(alert);
}
document.querySelector('button[name="dokan_update_payment_settings"]').addEventListener('click', () => send(false));
document.querySelector('.dokan-payment-disconnect-btn').addEventListener('click', () => send(true));
</script>
"""

VENDOR_WITHDRAW_PAGE = """
<div class="dokan-dashboard-wrap">
  <div class="dokan-dashboard-content dokan-withdraw-area">
    <header><h1 class="entry-title">Withdraw</h1></header>
    <div class="dokan-withdraw-balance">Your Balance: ${{ '%.2f' % balance }}. Minimum Withdraw Amount: ${{ limit }}</div>
    <button type="button" id="dokan-request-withdraw-button" class="dokan-btn">Request Withdraw</button>
    <div class="dokan-withdraw-request-popup">
      <input type="text" id="dokan-withdraw-amount" name="withdraw_amount">
      <select id="dokan-withdraw-method" name="withdraw_method">
        {% for method in methods %}<option value="{{ method }}">{{ method }}</option>{% endfor %}
      </select>
      <button type="button" id="dokan-withdraw-request-submit" class="dokan-btn dokan-btn-theme">Submit Request</button>
    </div>
    <div class="dokan-withdraw-request-response"></div>
  </div>
</div>
<script>
document.getElementById('dokan-request-withdraw-button').addEventListener('click', () => {
  document.querySelector('.dokan-withdraw-request-popup').classList.add('open');
});
document.getElementById('dokan-withdraw-request-submit').addEventListener('click', async () => {
  const body = new URLSearchParams({
    action: 'dokan_handle_withdraw_request',
    amount: document.getElementById('dokan-withdraw-amount').value,
    method: document.getElementById('dokan-withdraw-method').value,
  });
  const response = await fetch('/wp-admin/admin-ajax.php', { method: 'POST', body });
  const result = await response.json();
  const box = document.querySelector('.dokan-withdraw-request-response');
  box.innerHTML = '';
  const alert = document.createElement('div');
  alert.className = 'dokan-alert ' + (result.success ? 'dokan-alert-success' : 'dokan-alert-danger');
  alert.textContent = result.data.message;
  box.appendChild(alert);
});
</script>
"""

WIZARD_PAGE = """
<h1 id="wc-logo">Marketplace</h1>
<ol class="wc-setup-steps">
  {% for key, label in steps %}<li class="{{ 'active' if key == step else '' }}">{{ label }}</li>{% endfor %}
</ol>
<div class="wc-setup-content">
{% if step == 'introduction' %}
  <h1>Welcome to the world of Dokan!</h1>
  <p>Thank you for choosing Dokan to power your online marketplace!</p>
  <p class="wc-setup-actions step">
    <a href="{{ next_url }}" class="button-primary button button-large button-next">Let's Go!</a>
    <a href="/wp-admin/" class="button button-large">Not right now</a>
  </p>
{% elif step == 'next_steps' %}
  <div class="dokan-setup-done">
    <h1>Your Marketplace is Ready!</h1>
    <div class="dokan-setup-done-content">
      <a class="button button-primary" href="/wp-admin/">Visit Dokan Dashboard</a>
    </div>
  </div>
{% else %}
  <form method="post">
  {% if step == 'store' %}
    <h1>Store Setup</h1>
    <label for="custom_store_url">Vendor Store URL</label>
    <input type="text" id="custom_store_url" name="custom_store_url" value="{{ values.custom_store_url }}">
    <label for="shipping_fee_recipient">Shipping Fee</label>
    <select id="shipping_fee_recipient" name="shipping_fee_recipient">
      {% for value, label in recipients %}<option value="{{ value }}"{% if value == values.shipping_fee_recipient %} selected{% endif %}>{{ label }}</option>{% endfor %}
    </select>
    <label for="tax_fee_recipient">Tax Fee</label>
    <select id="tax_fee_recipient" name="tax_fee_recipient">
      {% for value, label in recipients %}<option value="{{ value }}"{% if value == values.tax_fee_recipient %} selected{% endif %}>{{ label }}</option>{% endfor %}
    </select>
  {% elif step == 'selling' %}
    <h1>Selling Setup</h1>
    <label><input type="checkbox" id="new_seller_enable_selling" name="new_seller_enable_selling" value="on"{% if values.new_seller_enable_selling == 'on' %} checked{% endif %}> New Vendor Enable Selling</label>
    <select name="commission_type">
      {% for value in ('percentage', 'flat') %}<option value="{{ value }}"{% if value == values.commission_type %} selected{% endif %}>{{ value.title() }}</option>{% endfor %}
    </select>
    <input type="text" id="admin_percentage" name="admin_percentage" value="{{ values.admin_percentage }}">
    <label><input type="checkbox" id="order_status_change" name="order_status_change" value="on"{% if values.order_status_change == 'on' %} checked{% endif %}> Order Status Change</label>
  {% elif step == 'withdraw' %}
    <h1>Withdraw Setup</h1>
    {% for method in ('paypal', 'bank', 'skrill') %}
    <label><input type="checkbox" id="withdraw_methods[{{ method }}]" name="withdraw_methods[{{ method }}]" value="{{ method }}"{% if values['withdraw_methods_' ~ method] == 'on' %} checked{% endif %}> {{ method }}</label>
    {% endfor %}
    <input type="text" id="withdraw_limit" name="withdraw_limit" value="{{ values.withdraw_limit }}">
    {% for status in ('wc-completed', 'wc-processing', 'wc-on-hold') %}
    <label><input type="checkbox" id="withdraw_order_status[{{ status }}]" name="withdraw_order_status[{{ status }}]" value="{{ status }}"{% if values['withdraw_order_status_' ~ status[3:].replace('-', '_')] == 'on' %} checked{% endif %}> {{ status }}</label>
    {% endfor %}
  {% endif %}
    <p class="wc-setup-actions step">
      <input type="submit" class="button-primary button button-large button-next" value="Continue" name="save_step">
      <a href="{{ next_url }}" class="button button-large button-next">Skip this step</a>
    </p>
  </form>
{% endif %}
</div>
"""

LANDING_PAGE = """<div class="wrap"><h1>{{ heading }}</h1><p>Logged in as {{ username }}.</p></div>"""


def _page(title: str, template: str, body_class: str = "", **context: Any) -> str:
    content = Markup(render_template_string(template, **context))
    return render_template_string(LAYOUT, title=title, css=Markup(CSS), body_class=body_class, content=content)


def create_mock_marketplace_app(
    db_url: str,
    pro: bool = False,
    modules: Iterable[str] = (),
    users: Optional[Mapping[str, Credentials]] = None,
    vendor_id: int = 2,
    db_prefix: str = "wp_",
) -> Flask:
    """Create and configure the mock marketplace Flask app.

    Args:
        db_url: SQLAlchemy URL holding the usermeta/options tables (created if missing)
        pro: render and accept pro-tier fields
        modules: module ids active at start
        users: role -> credentials (default: the configured credentials)
        vendor_id: user id of the vendor account
    """
    app = Flask(__name__)
    app.config["TESTING"] = True

    db = DbUtils(db_url, db_prefix)
    db.create_schema()

    roles = users or settings.profile.users
    accounts: Dict[str, Tuple[str, str, int]] = {}
    for role, creds in roles.items():
        user_id = {"admin": 1, "vendor": vendor_id}.get(role, vendor_id + 1)
        accounts[creds.username] = (creds.password, role, user_id)

    lock = threading.Lock()
    state: Dict[str, Any] = {
        "pro": pro,
        "modules": set(modules),
        "settings": {section.id: {} for section in SECTIONS},
        "wc": {
            "general": {
                "woocommerce_currency": "USD",
                "woocommerce_price_thousand_sep": ",",
                "woocommerce_price_decimal_sep": ".",
                "woocommerce_price_num_decimals": "2",
            }
        },
        "gateways": {gateway_id: False for gateway_id, _ in BASIC_GATEWAYS},
        "sessions": {},
        "notices": {},
        "coupons": {},
        "taxes": {},
        "next_id": 100,
        "withdraw_requests": [],
    }
    app.extensions["mock_marketplace"] = {"state": state, "db": db}

    # helpers

    def module_on(module: Optional[str]) -> bool:
        return state["pro"] and module in state["modules"]

    def visible_sections() -> List[Section]:
        shown = []
        for section in SECTIONS:
            if section.pro and not state["pro"]:
                continue
            if section.module and not module_on(section.module):
                continue
            shown.append(section)
        return shown

    def visible_fields(section: Section) -> List[Field]:
        return [f for f in section.fields if state["pro"] or not f.pro]

    def setting(section_id: str, key: str) -> str:
        section = next(s for s in SECTIONS if s.id == section_id)
        default = next((f.default for f in section.fields if f.key == key), "")
        return state["settings"][section_id].get(key, default)

    def current_user() -> Optional[Tuple[str, str, int]]:
        token = request.cookies.get(LOGIN_COOKIE)
        username = state["sessions"].get(token) if token else None
        if username is None:
            return None
        _, role, user_id = accounts[username]
        return username, role, user_id

    def require(role: str):
        user = current_user()
        if user is None or user[1] != role:
            return None
        return user

    def rest_user() -> Optional[Tuple[str, str, int]]:
        auth = request.authorization
        if auth is None or auth.username not in accounts:
            return None
        password, role, user_id = accounts[auth.username]
        if auth.password != password:
            return None
        return auth.username, role, user_id

    def rest_error(code: str, message: str, status: int) -> Tuple[Response, int]:
        return jsonify({"code": code, "message": message, "data": {"status": status}}), status

    def rest_guard(*allowed: str):
        user = rest_user()
        if user is None:
            return rest_error("rest_not_logged_in", "You are not currently logged in.", 401)
        if user[1] not in allowed:
            return rest_error("rest_forbidden", "Sorry, you are not allowed to do that.", 403)
        return None

    def ajax_result(success: bool, message: str, **extra: Any) -> Response:
        return jsonify({"success": success, "data": {"message": message, **extra}})

    def profile_payment() -> Dict[str, Any]:
        meta = db.get_user_meta_sync(vendor_id, PROFILE_META_KEY)
        payment = meta.get("payment") if isinstance(meta, dict) else None
        return payment if isinstance(payment, dict) else {}

    def available_methods() -> List[str]:
        return [slug for slug, (_, _, pro_only) in PAYMENT_METHODS.items() if state["pro"] or not pro_only]

    # login / landing

    @app.route("/wp-login.php", methods=["GET", "POST"])
    def login():
        if request.method == "GET":
            return _page("Log In", LOGIN_PAGE, "login", error=None)
        username = request.form.get("log", "")
        password = request.form.get("pwd", "")
        account = accounts.get(username)
        if account is None or account[0] != password:
            return _page("Log In", LOGIN_PAGE, "login", error="Error: The username or password you entered is incorrect.")
        token = secrets.token_hex(16)
        state["sessions"][token] = username
        target = {"admin": "/wp-admin/", "vendor": "/dashboard/"}.get(account[1], "/my-account/")
        response = redirect(target)
        response.set_cookie(LOGIN_COOKIE, token, path="/", httponly=True)
        return response

    @app.route("/wp-admin/")
    def admin_dashboard():
        user = require("admin")
        if user is None:
            return redirect("/wp-login.php")
        return _page("Dashboard", LANDING_PAGE, heading="Dashboard", username=user[0])

    @app.route("/dashboard/")
    def vendor_dashboard():
        user = require("vendor")
        if user is None:
            return redirect("/wp-login.php")
        return _page("Vendor Dashboard", LANDING_PAGE, heading="Vendor Dashboard", username=user[0])

    @app.route("/my-account/")
    def customer_account():
        user = current_user()
        if user is None:
            return redirect("/wp-login.php")
        return _page("My account", LANDING_PAGE, heading="My account", username=user[0])

    # admin screens

    def render_settings() -> str:
        sections = []
        for section in visible_sections():
            fields = []
            for f in visible_fields(section):
                value = setting(section.id, f.key)
                srcdoc = ""
                if f.kind == "richtext":
                    srcdoc = f'<html><body id="tinymce" contenteditable="true">{escape(value)}</body></html>'
                entries = value.split("|") if f.kind == "list" and value else []
                fields.append({
                    "kind": f.kind, "key": f.key, "label": f.label, "options": f.options,
                    "value": value, "srcdoc": srcdoc, "entries": entries,
                })
            sections.append({"id": section.id, "title": section.title, "fields": fields})
        return _page("Settings", SETTINGS_PAGE, "dokan-admin", sections=sections)

    def render_wc_settings(tab: str, user: Tuple[str, str, int]) -> str:
        notice = state["notices"].pop(user[0], None)
        if tab == "checkout":
            gateways = [(gateway_id, title, state["gateways"][gateway_id]) for gateway_id, title in BASIC_GATEWAYS]
            for module, gateway_id, title in MODULE_GATEWAYS:
                if module_on(module):
                    gateways.append((gateway_id, title, state["gateways"].get(gateway_id, False)))
            return _page("Payments", WC_CHECKOUT_PAGE, "woocommerce", gateways=gateways, notice=notice)
        return _page("General", WC_GENERAL_PAGE, "woocommerce", currencies=CURRENCIES, options=state["wc"]["general"], notice=notice)

    @app.route("/wp-admin/admin.php", methods=["GET", "POST"])
    def admin_page():
        user = require("admin")
        if user is None:
            return redirect("/wp-login.php")
        page = request.args.get("page", "")
        if page == "dokan":
            return render_settings()
        if page == "wc-settings":
            tab = request.args.get("tab", "general")
            if request.method == "POST":
                with lock:
                    if tab == "general":
                        for key in ("woocommerce_currency", "woocommerce_price_num_decimals"):
                            if key in request.form:
                                state["wc"]["general"][key] = request.form[key]
                    state["notices"][user[0]] = "Your settings have been saved."
                return redirect(request.full_path)
            return render_wc_settings(tab, user)
        return Response("Sorry, you are not allowed to access this page.", status=403)

    @app.route("/wp-admin/index.php", methods=["GET", "POST"])
    def setup_wizard():
        user = require("admin")
        if user is None:
            return redirect("/wp-login.php")
        if request.args.get("page") != "dokan-setup":
            return admin_dashboard()
        keys = [key for key, _ in WIZARD_STEPS]
        step = request.args.get("step", "introduction")
        if step not in keys:
            step = "introduction"
        next_step = keys[min(keys.index(step) + 1, len(keys) - 1)]
        next_url = f"/wp-admin/index.php?page=dokan-setup&step={next_step}"

        if request.method == "POST":
            form = request.form
            with lock:
                if step == "store":
                    state["settings"]["dokan_general"]["custom_store_url"] = form.get("custom_store_url", "")
                    state["settings"]["dokan_selling"]["shipping_fee_recipient"] = form.get("shipping_fee_recipient", "seller")
                    state["settings"]["dokan_selling"]["tax_fee_recipient"] = form.get("tax_fee_recipient", "seller")
                elif step == "selling":
                    selling = state["settings"]["dokan_selling"]
                    selling["new_seller_enable_selling"] = "on" if form.get("new_seller_enable_selling") else "off"
                    selling["commission_type"] = form.get("commission_type", "percentage")
                    selling["admin_percentage"] = form.get("admin_percentage", "")
                    selling["order_status_change"] = "on" if form.get("order_status_change") else "off"
                elif step == "withdraw":
                    withdraw = state["settings"]["dokan_withdraw"]
                    for method in ("paypal", "bank", "skrill"):
                        withdraw[f"withdraw_methods_{method}"] = "on" if form.get(f"withdraw_methods[{method}]") else "off"
                    withdraw["withdraw_limit"] = form.get("withdraw_limit", "")
                    for status in ("wc-completed", "wc-processing", "wc-on-hold"):
                        key = "withdraw_order_status_" + status[3:].replace("-", "_")
                        withdraw[key] = "on" if form.get(f"withdraw_order_status[{status}]") else "off"
            return redirect(next_url)

        values = {
            "custom_store_url": setting("dokan_general", "custom_store_url"),
            "shipping_fee_recipient": setting("dokan_selling", "shipping_fee_recipient"),
            "tax_fee_recipient": setting("dokan_selling", "tax_fee_recipient"),
            "new_seller_enable_selling": setting("dokan_selling", "new_seller_enable_selling"),
            "commission_type": setting("dokan_selling", "commission_type"),
            "admin_percentage": setting("dokan_selling", "admin_percentage"),
            "order_status_change": setting("dokan_selling", "order_status_change"),
            "withdraw_methods_paypal": setting("dokan_withdraw", "withdraw_methods_paypal"),
            "withdraw_methods_bank": setting("dokan_withdraw", "withdraw_methods_bank"),
            "withdraw_methods_skrill": state["settings"]["dokan_withdraw"].get("withdraw_methods_skrill", "off"),
            "withdraw_limit": setting("dokan_withdraw", "withdraw_limit"),
            "withdraw_order_status_completed": setting("dokan_withdraw", "withdraw_order_status_completed"),
            "withdraw_order_status_processing": setting("dokan_withdraw", "withdraw_order_status_processing"),
            "withdraw_order_status_on_hold": state["settings"]["dokan_withdraw"].get("withdraw_order_status_on_hold", "off"),
        }
        return _page(
            "Marketplace Setup", WIZARD_PAGE, "wc-setup",
            steps=WIZARD_STEPS, step=step, next_url=next_url, values=values, recipients=RECIPIENTS,
        )

    # vendor screens

    @app.route("/dashboard/settings/payment/")
    def vendor_payment():
        if require("vendor") is None:
            return redirect("/wp-login.php")
        payment = profile_payment()
        methods = []
        for slug in available_methods():
            label, keys, _ = PAYMENT_METHODS[slug]
            stored = payment.get(slug) if isinstance(payment.get(slug), dict) else {}
            methods.append((slug, label, any(stored.get(key) for key in keys)))
        return _page("Payment Method", VENDOR_PAYMENT_PAGE, "dokan-dashboard", methods=methods)

    @app.route("/dashboard/settings/payment-manage-<slug>/")
    def vendor_manage_payment(slug: str):
        if require("vendor") is None:
            return redirect("/wp-login.php")
        if slug not in available_methods():
            return Response("Not Found", status=404)
        label, keys, _ = PAYMENT_METHODS[slug]
        stored = profile_payment().get(slug)
        stored = stored if isinstance(stored, dict) else {}
        values = {key: str(stored.get(key) or "") for key in keys}
        return _page(label, VENDOR_MANAGE_PAYMENT_PAGE, "dokan-dashboard", slug=slug, label=label, keys=keys, values=values)

    @app.route("/dashboard/withdraw/")
    def vendor_withdraw():
        if require("vendor") is None:
            return redirect("/wp-login.php")
        methods = [m for m in ("paypal", "bank", "skrill") if is_truthy_option(setting("dokan_withdraw", f"withdraw_methods_{m}"))]
        return _page(
            "Withdraw", VENDOR_WITHDRAW_PAGE, "dokan-dashboard",
            balance=VENDOR_BALANCE, limit=setting("dokan_withdraw", "withdraw_limit"), methods=methods or ["paypal"],
        )

    # ajax

    @app.route("/wp-admin/admin-ajax.php", methods=["POST"])
    def admin_ajax():
        action = request.form.get("action", "")
        user = current_user()
        if user is None:
            return jsonify({"success": False, "data": {"message": "Session expired"}}), 403

        if action == "dokan_save_settings" and user[1] == "admin":
            section_id = request.form.get("section", "")
            section = next((s for s in visible_sections() if s.id == section_id), None)
            if section is None:
                return ajax_result(False, f"Unknown settings section {section_id}")
            with lock:
                values = state["settings"][section.id]
                for f in visible_fields(section):
                    name = f"{section.id}[{f.key}]"
                    if f.kind == "switch":
                        values[f.key] = "on" if request.form.get(name) == "on" else "off"
                    elif name in request.form:
                        values[f.key] = request.form[name]
            return ajax_result(True, "Setting has been saved successfully.")

        if action == "woocommerce_toggle_gateway_enabled" and user[1] == "admin":
            gateway_id = request.form.get("gateway_id", "")
            known = {g for g, _ in BASIC_GATEWAYS} | {g for m, g, _ in MODULE_GATEWAYS if module_on(m)}
            if gateway_id not in known:
                return jsonify({"success": False, "data": "invalid_gateway_id"})
            with lock:
                state["gateways"][gateway_id] = not state["gateways"].get(gateway_id, False)
                enabled = state["gateways"][gateway_id]
            return jsonify({"success": True, "data": enabled})

        if action == "dokan_settings" and user[1] == "vendor":
            slug = request.form.get("method", "")
            if slug not in available_methods():
                return ajax_result(False, "Invalid payment method")
            _, keys, _ = PAYMENT_METHODS[slug]
            if request.form.get("remove") == "1":
                values = {key: "" for key in keys}
            else:
                values = {key: request.form.get(f"settings[{slug}][{key}]", "") for key in keys}
                if slug == "bank" and values.get("declaration") != "on":
                    return ajax_result(False, "You must attest that the bank account is yours.")
            db.update_user_meta_sync(vendor_id, PROFILE_META_KEY, {"payment": {slug: values}})
            return ajax_result(True, "Your information has been saved successfully")

        if action == "dokan_handle_withdraw_request" and user[1] == "vendor":
            limit_raw = setting("dokan_withdraw", "withdraw_limit") or "0"
            try:
                amount = float(request.form.get("amount", ""))
            except ValueError:
                return ajax_result(False, "Withdraw amount required")
            try:
                limit = float(limit_raw)
            except ValueError:
                limit = 0.0
            if amount <= 0:
                return ajax_result(False, "Withdraw amount required")
            if limit > 0 and amount < limit:
                return ajax_result(False, f"Withdraw amount must be greater than or equal to {limit_raw}")
            if amount > VENDOR_BALANCE:
                return ajax_result(False, "You don't have enough balance for this request")
            with lock:
                state["withdraw_requests"].append({"amount": amount, "method": request.form.get("method", "")})
            return ajax_result(True, "Your request has been received successfully and is being reviewed!")

        return jsonify({"success": False, "data": {"message": "You have no permission to do this action"}}), 403

    # place autocomplete behind the geolocation address box

    @app.route("/maps/api/place/autocomplete/json")
    def place_autocomplete():
        query = request.args.get("input", "").strip()
        if not query:
            return jsonify({"predictions": [], "status": "ZERO_RESULTS"})
        predictions = [{"description": f"{query}, NY, USA"}, {"description": f"{query} Mills, NY, USA"}]
        return jsonify({"predictions": predictions, "status": "OK"})

    # REST

    @app.route("/wp-json/dokan/v1/admin/modules", methods=["GET"])
    def rest_modules():
        denied = rest_guard("admin")
        if denied:
            return denied
        return jsonify([{"id": module, "name": module.replace("_", " ").title(), "active": module in state["modules"]} for module in MODULES])

    @app.route("/wp-json/dokan/v1/admin/modules/<operation>", methods=["PUT"])
    def rest_toggle_modules(operation: str):
        denied = rest_guard("admin")
        if denied:
            return denied
        if operation not in ("activate", "deactivate"):
            return rest_error("rest_no_route", "No route was found matching the URL and request method.", 404)
        wanted = (request.get_json(silent=True) or {}).get("module") or []
        unknown = [module for module in wanted if module not in MODULES]
        if unknown:
            return rest_error("dokan_rest_invalid_module", f"Invalid module: {', '.join(unknown)}", 400)
        with lock:
            if operation == "activate":
                state["modules"].update(wanted)
            else:
                state["modules"].difference_update(wanted)
        return jsonify({"active": sorted(state["modules"])})

    @app.route("/wp-json/wc/v3/settings/<group>", methods=["GET"])
    def rest_wc_settings(group: str):
        denied = rest_guard("admin")
        if denied:
            return denied
        if group not in state["wc"]:
            return rest_error("rest_setting_setting_group_invalid", "Invalid setting group.", 404)
        return jsonify([{"id": key, "value": value} for key, value in state["wc"][group].items()])

    @app.route("/wp-json/wc/v3/settings/<group>/batch", methods=["POST"])
    def rest_wc_settings_batch(group: str):
        denied = rest_guard("admin")
        if denied:
            return denied
        if group not in state["wc"]:
            return rest_error("rest_setting_setting_group_invalid", "Invalid setting group.", 404)
        updates = (request.get_json(silent=True) or {}).get("update") or []
        result = []
        with lock:
            for item in updates:
                option_id = item.get("id")
                if option_id not in state["wc"][group]:
                    result.append({"id": option_id, "error": {"code": "rest_setting_setting_invalid", "message": "Invalid setting."}})
                    continue
                state["wc"][group][option_id] = item.get("value")
                result.append({"id": option_id, "value": item.get("value")})
        return jsonify({"update": result})

    @app.route("/wp-json/dokan/v1/settings", methods=["GET", "PUT"])
    def rest_store_settings():
        denied = rest_guard("vendor", "admin")
        if denied:
            return denied
        if request.method == "PUT":
            payload = request.get_json(silent=True) or {}
            return jsonify(db.update_user_meta_sync(vendor_id, PROFILE_META_KEY, payload))
        return jsonify(db.get_user_meta_sync(vendor_id, PROFILE_META_KEY) or {})

    def rest_collection(kind: str, payload_key: str):
        store = state[kind]

        def create():
            denied = rest_guard("admin")
            if denied:
                return denied
            payload = request.get_json(silent=True) or {}
            if payload_key not in payload:
                return rest_error("rest_missing_callback_param", f"Missing parameter(s): {payload_key}", 400)
            with lock:
                state["next_id"] += 1
                item = {"id": state["next_id"], **payload}
                store[item["id"]] = item
            return jsonify(item), 201

        def delete(item_id: int):
            denied = rest_guard("admin")
            if denied:
                return denied
            with lock:
                item = store.pop(item_id, None)
            if item is None:
                return rest_error(f"woocommerce_rest_{kind}_invalid_id", "Invalid ID.", 404)
            return jsonify(item)

        return create, delete

    create_coupon, delete_coupon = rest_collection("coupons", "code")
    app.add_url_rule("/wp-json/wc/v3/coupons", "create_coupon", create_coupon, methods=["POST"])
    app.add_url_rule("/wp-json/wc/v3/coupons/<int:item_id>", "delete_coupon", delete_coupon, methods=["DELETE"])
    create_tax, delete_tax = rest_collection("taxes", "rate")
    app.add_url_rule("/wp-json/wc/v3/taxes", "create_tax", create_tax, methods=["POST"])
    app.add_url_rule("/wp-json/wc/v3/taxes/<int:item_id>", "delete_tax", delete_tax, methods=["DELETE"])

    return app


class MockMarketplaceServer:
    """Serve the mock app from a background thread on an ephemeral port."""

    def __init__(self, app: Flask, host: str = "127.0.0.1", port: int = 0):
        self.app = app
        self.host = host
        self.server = make_server(host, port, app, threaded=True)
        self.port = self.server.server_port
        self.thread: Optional[threading.Thread] = None

    def start(self) -> "MockMarketplaceServer":
        self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.thread.start()
        return self

    def stop(self) -> None:
        self.server.shutdown()
        if self.thread:
            self.thread.join(timeout=5)

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}/"

    @property
    def state(self) -> Dict[str, Any]:
        return self.app.extensions["mock_marketplace"]["state"]
