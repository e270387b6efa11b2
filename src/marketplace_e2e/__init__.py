"""
Page-object end-to-end harness for a WooCommerce multi-vendor marketplace.

Provides:
- selectors / locators: typed element registry
- data / payloads: scenario inputs and REST bodies
- api_utils / db_utils: out-of-band state setup and teardown
- pages: page objects, one journey per public method
- sessions / shared_state: per-role browser contexts and global-state locking
"""

__version__ = "0.3.0"
