"""Selector registry.

One entry per UI element, namespaced by role and screen. Page objects only
ever reference these attributes; a renamed or moved element is fixed here
and nowhere else.
"""
from __future__ import annotations

from marketplace_e2e.locators import Locator, ParamLocator


def _field(section: str, key: str, name: str) -> Locator:
    return Locator(f"settings.{name}", f'#{section} [name="{section}[{key}]"]', "admin")


def _switch(section: str, key: str, name: str) -> Locator:
    return Locator(f"settings.{name}", f'#{section} label.switch[for="{section}[{key}]"]', "admin")


def _radio(section: str, key: str, name: str) -> ParamLocator:
    return ParamLocator(
        f"settings.{name}",
        f'#{section} input[type="radio"][name="{section}[{key}]"][value="{{value}}"]',
        "admin",
    )


def _frame(section: str, key: str, name: str) -> Locator:
    return Locator(f"settings.{name}", f'#{section} iframe[id="{section}_{key}_ifr"]', "admin")


def _menu(section: str, name: str) -> Locator:
    return Locator(f"settings.menus.{name}", f'.nav-tab-wrapper .nav-tab[data-section="{section}"]', "admin")


def _param_field(section: str, key_prefix: str, name: str) -> ParamLocator:
    return ParamLocator(f"settings.{name}", f'#{section} [name="{section}[{key_prefix}{{value}}]"]', "admin")


def _param_switch(section: str, key_prefix: str, name: str) -> ParamLocator:
    return ParamLocator(f"settings.{name}", f'#{section} label.switch[for="{section}[{key_prefix}{{value}}]"]', "admin")


def _list(section: str, key: str) -> str:
    return f'#{section} .dokan-list-field[data-target="{section}[{key}]"]'


class Common:
    class Login:
        username = Locator("login.username", "#user_login", "guest")
        password = Locator("login.password", "#user_pass", "guest")
        submit = Locator("login.submit", "#wp-submit", "guest")
        error = Locator("login.error", "#login_error", "guest")


class Admin:
    class Settings:
        settings_text = Locator("settings.header", ".dokan-settings-wrap h1.settings-header", "admin")
        setting_title = Locator("settings.title", "#settings-section-title", "admin")
        fields = Locator("settings.fields", ".dokan-settings-wrap .metabox-holder", "admin")
        save_changes = Locator("settings.saveChanges", "#submit", "admin")
        update_success_message = Locator("settings.successMessage", ".settings-success p", "admin")
        back_to_top = Locator("settings.backToTop", ".back-to-top", "admin")
        field_row = ParamLocator("settings.fieldRow", '.field-row[data-field="{value}"]', "admin")

        class Search:
            search_box = Locator("settings.search.box", ".dokan-settings-wrap .search-box", "admin")
            input = Locator("settings.search.input", ".search-box input.search-box-input", "admin")
            close = Locator("settings.search.close", ".search-box .search-close", "admin")

        class Menus:
            general = _menu("dokan_general", "general")
            selling_options = _menu("dokan_selling", "sellingOptions")
            withdraw_options = _menu("dokan_withdraw", "withdrawOptions")
            reverse_withdrawal = _menu("dokan_reverse_withdrawal", "reverseWithdrawal")
            page_settings = _menu("dokan_pages", "pageSettings")
            appearance = _menu("dokan_appearance", "appearance")
            privacy_policy = _menu("dokan_privacy", "privacyPolicy")
            live_search = _menu("dokan_live_search", "liveSearch")
            store_support = _menu("dokan_store_support", "storeSupport")
            email_verification = _menu("dokan_email_verification", "emailVerification")
            vendor_subscription = _menu("dokan_product_subscription", "vendorSubscription")
            quote = _menu("dokan_quote_settings", "quote")
            live_chat = _menu("dokan_live_chat", "liveChat")
            rma = _menu("dokan_rma", "rma")
            wholesale = _menu("dokan_wholesale", "wholesale")
            eu_compliance_fields = _menu("dokan_germanized", "euComplianceFields")
            delivery_time = _menu("dokan_delivery_time", "deliveryTime")
            product_advertising = _menu("dokan_product_advertisement", "productAdvertising")
            geolocation = _menu("dokan_geolocation", "geolocation")
            product_report_abuse = _menu("dokan_report_abuse", "productReportAbuse")
            single_product_multi_vendor = _menu("dokan_spmv", "singleProductMultiVendor")

        sections = (Search.search_box, fields, Menus.general)
        header = (settings_text, Search.input)

        class General:
            admin_area_access = _switch("dokan_general", "admin_access", "general.adminAreaAccess")
            vendor_store_url = _field("dokan_general", "custom_store_url", "general.vendorStoreUrl")
            setup_wizard_message_iframe = _frame("dokan_general", "setup_wizard_message", "general.setupWizardMessageIframe")
            setup_wizard_message_html_body = Locator("settings.general.setupWizardMessageBody", "body#tinymce", "admin")
            selling_product_types = _radio("dokan_general", "global_digital_mode", "general.sellingProductTypes")
            store_terms_and_conditions = _switch("dokan_general", "seller_enable_terms_and_conditions", "general.storeTermsAndConditions")
            store_product_per_page = _field("dokan_general", "store_products_per_page", "general.storeProductPerPage")
            enable_terms_and_condition = _switch("dokan_general", "enable_tc_on_reg", "general.enableTermsAndCondition")
            store_category = _radio("dokan_general", "store_category_type", "general.storeCategory")
            show_vendor_info = _switch("dokan_general", "show_vendor_info", "general.showVendorInfo")
            enable_more_products_tab = _switch("dokan_general", "enabled_more_products_tab", "general.enableMoreProductsTab")

        class Selling:
            commission_type = _field("dokan_selling", "commission_type", "selling.commissionType")
            percentage = _field("dokan_selling", "admin_percentage", "selling.percentage")
            fixed = _field("dokan_selling", "additional_fee", "selling.fixed")
            shipping_fee_recipient = _radio("dokan_selling", "shipping_fee_recipient", "selling.shippingFeeRecipient")
            product_tax_fee_recipient = _radio("dokan_selling", "tax_fee_recipient", "selling.productTaxFeeRecipient")
            shipping_tax_fee_recipient = _radio("dokan_selling", "shipping_tax_fee_recipient", "selling.shippingTaxFeeRecipient")
            enable_selling = _switch("dokan_selling", "new_seller_enable_selling", "selling.enableSelling")
            one_page_product_create = _switch("dokan_selling", "one_step_product_create", "selling.onePageProductCreate")
            order_status_change = _switch("dokan_selling", "order_status_change", "selling.orderStatusChange")
            new_product_status = _radio("dokan_selling", "product_status", "selling.newProductStatus")
            vendors_can_create_tags = _switch("dokan_selling", "product_vendors_can_create_tags", "selling.vendorsCanCreateTags")
            order_discount = _switch("dokan_selling", "discount_edit_order", "selling.orderDiscount")
            product_discount = _switch("dokan_selling", "discount_edit_product", "selling.productDiscount")
            remove_add_to_cart_button = _switch("dokan_selling", "catalog_mode_hide_add_to_cart_button", "selling.removeAddToCartButton")
            hide_product_price = _switch("dokan_selling", "catalog_mode_hide_product_price", "selling.hideProductPrice")

        class Withdraw:
            withdraw_methods_paypal = _switch("dokan_withdraw", "withdraw_methods_paypal", "withdraw.methodsPaypal")
            withdraw_methods_bank_transfer = _switch("dokan_withdraw", "withdraw_methods_bank", "withdraw.methodsBankTransfer")
            withdraw_methods_custom = _switch("dokan_withdraw", "withdraw_methods_dokan_custom", "withdraw.methodsCustom")
            withdraw_methods_skrill = _switch("dokan_withdraw", "withdraw_methods_skrill", "withdraw.methodsSkrill")
            custom_method_name = _field("dokan_withdraw", "withdraw_method_name", "withdraw.customMethodName")
            custom_method_type = _field("dokan_withdraw", "withdraw_method_type", "withdraw.customMethodType")
            paypal_charge_percentage = _field("dokan_withdraw", "withdraw_charge_paypal", "withdraw.paypalCharge")
            bank_transfer_charge_fixed = _field("dokan_withdraw", "withdraw_charge_bank", "withdraw.bankCharge")
            skrill_charge_percentage = _field("dokan_withdraw", "withdraw_charge_skrill", "withdraw.skrillCharge")
            custom_charge_percentage = _field("dokan_withdraw", "withdraw_charge_dokan_custom", "withdraw.customCharge")
            minimum_withdraw_amount = _field("dokan_withdraw", "withdraw_limit", "withdraw.minimumWithdrawAmount")
            order_status_completed = _switch("dokan_withdraw", "withdraw_order_status_completed", "withdraw.orderStatusCompleted")
            order_status_processing = _switch("dokan_withdraw", "withdraw_order_status_processing", "withdraw.orderStatusProcessing")
            withdraw_threshold = _field("dokan_withdraw", "withdraw_threshold", "withdraw.threshold")
            disbursement_manual = _switch("dokan_withdraw", "disbursement_manual", "withdraw.disbursementManual")
            disbursement_auto = _switch("dokan_withdraw", "disbursement_auto", "withdraw.disbursementAuto")
            schedule_quarterly = _switch("dokan_withdraw", "disbursement_schedule_quarterly", "withdraw.scheduleQuarterly")
            schedule_monthly = _switch("dokan_withdraw", "disbursement_schedule_monthly", "withdraw.scheduleMonthly")
            schedule_biweekly = _switch("dokan_withdraw", "disbursement_schedule_biweekly", "withdraw.scheduleBiweekly")
            schedule_weekly = _switch("dokan_withdraw", "disbursement_schedule_weekly", "withdraw.scheduleWeekly")
            quarterly_schedule_month = _field("dokan_withdraw", "quarterly_schedule_month", "withdraw.quarterlyMonth")
            quarterly_schedule_week = _field("dokan_withdraw", "quarterly_schedule_week", "withdraw.quarterlyWeek")
            quarterly_schedule_day = _field("dokan_withdraw", "quarterly_schedule_day", "withdraw.quarterlyDay")
            monthly_schedule_week = _field("dokan_withdraw", "monthly_schedule_week", "withdraw.monthlyWeek")
            monthly_schedule_day = _field("dokan_withdraw", "monthly_schedule_day", "withdraw.monthlyDay")
            biweekly_schedule_week = _field("dokan_withdraw", "biweekly_schedule_week", "withdraw.biweeklyWeek")
            biweekly_schedule_day = _field("dokan_withdraw", "biweekly_schedule_day", "withdraw.biweeklyDay")
            weekly_schedule_day = _field("dokan_withdraw", "weekly_schedule_day", "withdraw.weeklyDay")

        class ReverseWithdraw:
            enable_reverse_withdrawal = _switch("dokan_reverse_withdrawal", "enabled", "reverseWithdraw.enable")
            enable_for_cod_gateway = _switch("dokan_reverse_withdrawal", "payment_gateways_cod", "reverseWithdraw.enableForCod")
            billing_type = _field("dokan_reverse_withdrawal", "billing_type", "reverseWithdraw.billingType")
            reverse_balance_threshold = _field("dokan_reverse_withdrawal", "reverse_balance_threshold", "reverseWithdraw.threshold")
            grace_period = _field("dokan_reverse_withdrawal", "due_period", "reverseWithdraw.gracePeriod")
            disable_add_to_cart_button = _switch("dokan_reverse_withdrawal", "failed_actions_enable_catalog_mode", "reverseWithdraw.disableAddToCart")
            hide_withdraw_menu = _switch("dokan_reverse_withdrawal", "failed_actions_hide_withdraw_menu", "reverseWithdraw.hideWithdrawMenu")
            make_vendor_status_inactive = _switch("dokan_reverse_withdrawal", "failed_actions_status_inactive", "reverseWithdraw.statusInactive")
            display_notice_during_grace_period = _switch("dokan_reverse_withdrawal", "display_notice", "reverseWithdraw.displayNotice")
            send_announcement = _switch("dokan_reverse_withdrawal", "send_announcement", "reverseWithdraw.sendAnnouncement")

        class Page:
            dashboard = _field("dokan_pages", "dashboard", "page.dashboard")
            my_orders = _field("dokan_pages", "my_orders", "page.myOrders")
            store_listing = _field("dokan_pages", "store_listing", "page.storeListing")
            terms_and_conditions = _field("dokan_pages", "reg_tc_page", "page.termsAndConditions")

        class Appearance:
            show_map_on_store_page = _switch("dokan_appearance", "store_map", "appearance.showMap")
            map_api_source = _radio("dokan_appearance", "map_api_source", "appearance.mapApiSource")
            google_map_api_key = _field("dokan_appearance", "gmap_api_key", "appearance.googleMapApiKey")
            mapbox_access_token = _field("dokan_appearance", "mapbox_access_token", "appearance.mapboxAccessToken")
            show_contact_form_on_store_page = _switch("dokan_appearance", "contact_seller", "appearance.contactForm")
            store_header_template = _radio("dokan_appearance", "store_header_template", "appearance.storeHeaderTemplate")
            store_banner_width = _field("dokan_appearance", "store_banner_width", "appearance.bannerWidth")
            store_banner_height = _field("dokan_appearance", "store_banner_height", "appearance.bannerHeight")
            store_opening_closing_time_widget = _switch("dokan_appearance", "store_open_close", "appearance.openingClosingTime")

        class PrivacyPolicy:
            enable_privacy_policy = _switch("dokan_privacy", "enable_privacy", "privacyPolicy.enable")
            privacy_page = _field("dokan_privacy", "privacy_page", "privacyPolicy.page")
            privacy_policy_iframe = _frame("dokan_privacy", "privacy_policy", "privacyPolicy.contentIframe")
            privacy_policy_html_body = Locator("settings.privacyPolicy.contentBody", "body#tinymce", "admin")

        class LiveSearch:
            live_search_options = _field("dokan_live_search", "live_search_option", "liveSearch.option")

        class StoreSupport:
            display_on_order_details = _switch("dokan_store_support", "enabled_for_customer_order", "storeSupport.onOrderDetails")
            display_on_single_product_page = _field("dokan_store_support", "store_support_product_page", "storeSupport.onProductPage")
            support_button_label = _field("dokan_store_support", "support_button_label", "storeSupport.buttonLabel")

        class EmailVerification:
            enable_email_verification = _switch("dokan_email_verification", "enabled", "emailVerification.enable")
            registration_notice = _field("dokan_email_verification", "registration_notice", "emailVerification.registrationNotice")
            login_notice = _field("dokan_email_verification", "login_notice", "emailVerification.loginNotice")

        class VendorSubscription:
            subscription_page = _field("dokan_product_subscription", "subscription_pack", "vendorSubscription.page")
            enable_product_subscription = _switch("dokan_product_subscription", "enable_pricing", "vendorSubscription.enable")
            enable_subscription_in_registration_form = _switch("dokan_product_subscription", "enable_subscription_pack_in_reg", "vendorSubscription.inRegistration")
            enable_email_notification = _switch("dokan_product_subscription", "notify_by_email", "vendorSubscription.emailNotification")
            no_of_days = _field("dokan_product_subscription", "no_of_days_before_mail", "vendorSubscription.noOfDays")
            product_status = _field("dokan_product_subscription", "product_status_after_end", "vendorSubscription.productStatus")
            cancelling_email_subject = _field("dokan_product_subscription", "cancelling_email_subject", "vendorSubscription.cancelSubject")
            cancelling_email_body = _field("dokan_product_subscription", "cancelling_email_body", "vendorSubscription.cancelBody")
            alert_email_subject = _field("dokan_product_subscription", "alert_email_subject", "vendorSubscription.alertSubject")
            alert_email_body = _field("dokan_product_subscription", "alert_email_body", "vendorSubscription.alertBody")

        class Quote:
            enable_quote_for_out_of_stock_products = _switch("dokan_quote_settings", "enable_out_of_stock", "quote.outOfStock")
            enable_ajax_add_to_quote = _switch("dokan_quote_settings", "enable_ajax_add_to_quote", "quote.ajaxAddToQuote")
            redirect_to_quote_page = _switch("dokan_quote_settings", "redirect_to_quote_page", "quote.redirectToQuotePage")
            decrease_offered_price = _field("dokan_quote_settings", "decrease_offered_price", "quote.decreaseOfferedPrice")

        class LiveChat:
            enable_live_chat = _switch("dokan_live_chat", "enable", "liveChat.enable")
            chat_provider = _radio("dokan_live_chat", "provider", "liveChat.provider")
            talk_js_app_id = _field("dokan_live_chat", "app_id", "liveChat.appId")
            talk_js_app_secret = _field("dokan_live_chat", "app_secret", "liveChat.appSecret")
            chat_button_on_vendor_page = _switch("dokan_live_chat", "chat_button_seller_page", "liveChat.vendorPageButton")
            chat_button_on_product_page = _field("dokan_live_chat", "chat_button_product_page", "liveChat.productPageButton")

        class Rma:
            order_status = _field("dokan_rma", "rma_order_status", "rma.orderStatus")
            enable_refund_requests = _switch("dokan_rma", "rma_enable_refund_request", "rma.refundRequests")
            enable_coupon_requests = _switch("dokan_rma", "rma_enable_coupon_request", "rma.couponRequests")
            reasons_for_rma_single = ParamLocator(
                "settings.rma.reasonRemove", _list("dokan_rma", "rma_reasons") + ' li[data-value="{value}"] .remove-item', "admin"
            )
            reasons_for_rma_input = Locator("settings.rma.reasonInput", _list("dokan_rma", "rma_reasons") + " input.list-input", "admin")
            reasons_for_rma_add = Locator("settings.rma.reasonAdd", _list("dokan_rma", "rma_reasons") + " button.list-add", "admin")
            refund_policy_iframe = _frame("dokan_rma", "rma_policy", "rma.refundPolicyIframe")
            refund_policy_html_body = Locator("settings.rma.refundPolicyBody", "body#tinymce", "admin")

        class Wholesale:
            who_can_see_wholesale_price = _radio("dokan_wholesale", "wholesale_price_display", "wholesale.whoCanSeePrice")
            show_wholesale_price_on_shop_archive = _switch("dokan_wholesale", "display_price_in_shop_archieve", "wholesale.showOnShopArchive")
            need_approval_for_customer = _switch("dokan_wholesale", "need_approval_for_wholesale_customer", "wholesale.needApproval")

        class EuCompliance:
            vendor_company_name = _switch("dokan_germanized", "vendor_company_name", "euCompliance.vendorCompanyName")
            vendor_company_id_number = _switch("dokan_germanized", "vendor_company_id_number", "euCompliance.vendorCompanyIdNumber")
            vendor_vat_number = _switch("dokan_germanized", "vendor_vat_number", "euCompliance.vendorVatNumber")
            vendor_bank_name = _switch("dokan_germanized", "vendor_bank_name", "euCompliance.vendorBankName")
            vendor_bank_iban = _switch("dokan_germanized", "vendor_bank_iban", "euCompliance.vendorBankIban")
            display_in_vendor_registration_form = _switch("dokan_germanized", "vendor_show_on_registration", "euCompliance.vendorRegistration")
            customer_company_id_number = _switch("dokan_germanized", "customer_company_id_number", "euCompliance.customerCompanyIdNumber")
            customer_vat_number = _switch("dokan_germanized", "customer_vat_number", "euCompliance.customerVatNumber")
            customer_bank_name = _switch("dokan_germanized", "customer_bank_name", "euCompliance.customerBankName")
            customer_bank_iban = _switch("dokan_germanized", "customer_bank_iban", "euCompliance.customerBankIban")
            enable_germanized_support_for_vendors = _switch("dokan_germanized", "enabled_germanized", "euCompliance.germanizedSupport")
            vendors_will_be_able_to_override_invoice_number = _switch("dokan_germanized", "override_invoice_number", "euCompliance.overrideInvoiceNumber")

            all_fields = (
                vendor_company_name,
                vendor_company_id_number,
                vendor_vat_number,
                vendor_bank_name,
                vendor_bank_iban,
                display_in_vendor_registration_form,
                customer_company_id_number,
                customer_vat_number,
                customer_bank_name,
                customer_bank_iban,
                enable_germanized_support_for_vendors,
                vendors_will_be_able_to_override_invoice_number,
            )

        class DeliveryTime:
            allow_vendor_settings = _switch("dokan_delivery_time", "allow_vendor_override_settings", "deliveryTime.allowVendorSettings")
            home_delivery = _switch("dokan_delivery_time", "enable_delivery", "deliveryTime.homeDelivery")
            store_pickup = _switch("dokan_delivery_time", "enable_store_pickup", "deliveryTime.storePickup")
            delivery_date_label = _field("dokan_delivery_time", "delivery_date_label", "deliveryTime.dateLabel")
            delivery_blocked_buffer = _field("dokan_delivery_time", "preorder_date", "deliveryTime.blockedBuffer")
            time_slot = _field("dokan_delivery_time", "time_slot_minutes", "deliveryTime.timeSlot")
            order_per_slot = _field("dokan_delivery_time", "order_per_slot", "deliveryTime.orderPerSlot")
            delivery_box_info = _field("dokan_delivery_time", "delivery_box_info", "deliveryTime.boxInfo")
            require_delivery_date_and_time = _switch("dokan_delivery_time", "selected_date_time_required", "deliveryTime.requireDateAndTime")
            delivery_day = _param_switch("dokan_delivery_time", "delivery_day_", "deliveryTime.day")
            opening_time = _param_field("dokan_delivery_time", "opening_time_", "deliveryTime.openingTime")
            closing_time = _param_field("dokan_delivery_time", "closing_time_", "deliveryTime.closingTime")

        class ProductAdvertising:
            no_of_available_slot = _field("dokan_product_advertisement", "total_available_slot", "productAdvertising.availableSlot")
            expire_after_days = _field("dokan_product_advertisement", "expire_after_days", "productAdvertising.expireAfterDays")
            vendor_can_purchase_advertisement = _switch("dokan_product_advertisement", "vendor_can_purchase_advertisement", "productAdvertising.vendorCanPurchase")
            advertisement_cost = _field("dokan_product_advertisement", "cost", "productAdvertising.cost")
            enable_advertisement_in_subscription = _switch("dokan_product_advertisement", "enable_advertisement_for_subscription", "productAdvertising.inSubscription")
            mark_advertised_product_as_featured = _switch("dokan_product_advertisement", "featured", "productAdvertising.markAsFeatured")
            display_advertised_product_on_top = _switch("dokan_product_advertisement", "display_on_top", "productAdvertising.displayOnTop")
            out_of_stock_visibility = _switch("dokan_product_advertisement", "hide_out_of_stock_items", "productAdvertising.outOfStockVisibility")

        class Geolocation:
            location_map_position = _radio("dokan_geolocation", "show_locations_map", "geolocation.mapPosition")
            show_map = _radio("dokan_geolocation", "show_location_map_pages", "geolocation.showMap")
            show_filters_before_location_map = _switch("dokan_geolocation", "show_filters_before_locations_map", "geolocation.filtersBeforeMap")
            product_location_tab = _switch("dokan_geolocation", "show_product_location_in_wc_tab", "geolocation.productLocationTab")
            radius_search_unit = _radio("dokan_geolocation", "distance_unit", "geolocation.radiusUnit")
            radius_search_minimum_distance = _field("dokan_geolocation", "distance_min", "geolocation.radiusMin")
            radius_search_maximum_distance = _field("dokan_geolocation", "distance_max", "geolocation.radiusMax")
            map_zoom_level = _field("dokan_geolocation", "map_zoom", "geolocation.mapZoom")
            default_location = _field("dokan_geolocation", "location", "geolocation.defaultLocation")
            map_result_first = Locator("settings.geolocation.mapResultFirst", "#dokan_geolocation .pac-container .pac-item:first-child", "admin")

        class ProductReportAbuse:
            reasons_for_abuse_report_single = ParamLocator(
                "settings.reportAbuse.reasonRemove", _list("dokan_report_abuse", "abuse_reasons") + ' li[data-value="{value}"] .remove-item', "admin"
            )
            reasons_for_abuse_report_input = Locator("settings.reportAbuse.reasonInput", _list("dokan_report_abuse", "abuse_reasons") + " input.list-input", "admin")
            reasons_for_abuse_report_add = Locator("settings.reportAbuse.reasonAdd", _list("dokan_report_abuse", "abuse_reasons") + " button.list-add", "admin")

        class Spmv:
            enable_single_product_multiple_vendor = _switch("dokan_spmv", "enable_pricing", "spmv.enable")
            sell_item_button_text = _field("dokan_spmv", "sell_item_btn", "spmv.sellItemButtonText")
            available_vendor_display_area_title = _field("dokan_spmv", "available_vendor_list_title", "spmv.availableVendorTitle")
            available_vendor_section_display_position = _field("dokan_spmv", "available_vendor_list_position", "spmv.availableVendorPosition")
            show_spmv_products = _field("dokan_spmv", "show_order", "spmv.showProducts")

    class WooCommerce:
        save_changes = Locator("wc.saveChanges", 'button[name="save"]', "admin")
        updated_message = Locator("wc.updatedMessage", "#message.updated p", "admin")

        class General:
            currency = Locator("wc.general.currency", "#woocommerce_currency", "admin")

        class Payments:
            gateway_table = Locator("wc.payments.table", "table.wc_gateways", "admin")
            gateway_row = ParamLocator("wc.payments.gatewayRow", 'table.wc_gateways tr[data-gateway_id="{value}"]', "admin")
            gateway_toggle = ParamLocator(
                "wc.payments.gatewayToggle",
                'table.wc_gateways tr[data-gateway_id="{value}"] .woocommerce-input-toggle',
                "admin",
            )

    class SetupWizard:
        steps = Locator("setupWizard.steps", "ol.wc-setup-steps", "admin")
        active_step = Locator("setupWizard.activeStep", "ol.wc-setup-steps li.active", "admin")
        heading = Locator("setupWizard.heading", ".wc-setup-content h1", "admin")
        lets_go = Locator("setupWizard.letsGo", ".wc-setup-actions a.button-primary", "admin")
        continue_button = Locator("setupWizard.continue", 'input[name="save_step"]', "admin")
        skip_this_step = Locator("setupWizard.skip", ".wc-setup-actions a.button-next:not(.button-primary)", "admin")

        vendor_store_url = Locator("setupWizard.vendorStoreUrl", "#custom_store_url", "admin")
        shipping_fee_recipient = Locator("setupWizard.shippingFeeRecipient", "#shipping_fee_recipient", "admin")
        tax_fee_recipient = Locator("setupWizard.taxFeeRecipient", "#tax_fee_recipient", "admin")

        new_vendor_enable_selling = Locator("setupWizard.enableSelling", "#new_seller_enable_selling", "admin")
        commission_type = Locator("setupWizard.commissionType", 'select[name="commission_type"]', "admin")
        admin_commission = Locator("setupWizard.adminCommission", "#admin_percentage", "admin")
        order_status_change = Locator("setupWizard.orderStatusChange", "#order_status_change", "admin")

        withdraw_method = ParamLocator("setupWizard.withdrawMethod", 'input[id="withdraw_methods[{value}]"]', "admin")
        minimum_withdraw_limit = Locator("setupWizard.minimumWithdrawLimit", "#withdraw_limit", "admin")
        withdraw_order_status = ParamLocator(
            "setupWizard.withdrawOrderStatus", 'input[id="withdraw_order_status[{value}]"]', "admin"
        )

        ready_heading = Locator("setupWizard.ready", ".dokan-setup-done h1", "admin")
        setup_your_store = Locator("setupWizard.setupYourStore", ".dokan-setup-done-content a.button-primary", "admin")


class Vendor:
    class Payments:
        header = Locator("vendorPayments.header", ".dokan-dashboard-content header h1.entry-title", "vendor")
        method_list = Locator("vendorPayments.methods", "ul.dokan-payment-methods", "vendor")
        method_row = ParamLocator("vendorPayments.methodRow", 'ul.dokan-payment-methods li[data-method="{value}"]', "vendor")
        manage_method = ParamLocator(
            "vendorPayments.manage", 'ul.dokan-payment-methods li[data-method="{value}"] a.dokan-manage-method', "vendor"
        )

        paypal_email = Locator("vendorPayments.paypalEmail", 'input[name="settings[paypal][email]"]', "vendor")
        skrill_email = Locator("vendorPayments.skrillEmail", 'input[name="settings[skrill][email]"]', "vendor")
        custom_value = Locator("vendorPayments.customValue", 'input[name="settings[dokan_custom][value]"]', "vendor")

        bank_account_name = Locator("vendorPayments.bank.accountName", 'input[name="settings[bank][ac_name]"]', "vendor")
        bank_account_type = Locator("vendorPayments.bank.accountType", 'select[name="settings[bank][ac_type]"]', "vendor")
        bank_account_number = Locator("vendorPayments.bank.accountNumber", 'input[name="settings[bank][ac_number]"]', "vendor")
        bank_routing_number = Locator("vendorPayments.bank.routingNumber", 'input[name="settings[bank][routing_number]"]', "vendor")
        bank_name = Locator("vendorPayments.bank.name", 'input[name="settings[bank][bank_name]"]', "vendor")
        bank_address = Locator("vendorPayments.bank.address", 'textarea[name="settings[bank][bank_addr]"]', "vendor")
        bank_iban = Locator("vendorPayments.bank.iban", 'input[name="settings[bank][iban]"]', "vendor")
        bank_swift = Locator("vendorPayments.bank.swift", 'input[name="settings[bank][swift]"]', "vendor")
        bank_declaration = Locator("vendorPayments.bank.declaration", "#declaration", "vendor")

        update_settings = Locator("vendorPayments.update", 'button[name="dokan_update_payment_settings"]', "vendor")
        disconnect = Locator("vendorPayments.disconnect", "button.dokan-payment-disconnect-btn", "vendor")
        success_message = Locator("vendorPayments.success", ".dokan-ajax-response .dokan-alert-success", "vendor")

    class Withdraw:
        balance = Locator("vendorWithdraw.balance", ".dokan-withdraw-area .dokan-withdraw-balance", "vendor")
        request_withdraw = Locator("vendorWithdraw.request", "#dokan-request-withdraw-button", "vendor")
        amount = Locator("vendorWithdraw.amount", "#dokan-withdraw-amount", "vendor")
        method = Locator("vendorWithdraw.method", "#dokan-withdraw-method", "vendor")
        submit = Locator("vendorWithdraw.submit", "#dokan-withdraw-request-submit", "vendor")
        success_message = Locator("vendorWithdraw.success", ".dokan-withdraw-request-response .dokan-alert-success", "vendor")
        error_message = Locator("vendorWithdraw.error", ".dokan-withdraw-request-response .dokan-alert-danger", "vendor")
