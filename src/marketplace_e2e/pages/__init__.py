"""
Page objects.

- BasePage: primitives and assertions
- AdminPage, SettingsPage, PaymentsPage, SetupWizardPage: admin journeys
- WithdrawsPage: vendor withdraw requests
"""
from .base_page import BasePage
from .admin_page import AdminPage
from .settings_page import SettingsPage
from .payments_page import PaymentsPage
from .withdraws_page import WithdrawsPage
from .setup_wizard_page import SetupWizardPage

__all__ = ['BasePage', 'AdminPage', 'SettingsPage', 'PaymentsPage', 'WithdrawsPage', 'SetupWizardPage']
