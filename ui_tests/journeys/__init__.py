"""
Live marketplace journeys.

Each module drives a real site from the roles' stored sessions, seeds what
it needs through the REST API or the database and restores every global
setting it touched in teardown. Modules are independent of each other and
of their order.

    payments      - currency, checkout gateways, vendor payout methods
    settings      - admin settings sections, module gated sections
    withdraw      - minimum withdraw limit seen by a vendor request
    setup_wizard  - admin onboarding wizard
"""
