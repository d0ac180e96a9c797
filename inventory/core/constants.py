"""Core constants: validation cache keys and refresh sources.

Single source of truth for reference-set names shared by the loader,
the repositories that keep sets current, and the existence rules.
"""

# Validation cache keys (one reference set each)
CACHE_KEY_SUPPLIER_IDS = "SupplierIds"
CACHE_KEY_CATEGORIES = "Categories"
CACHE_KEY_PRODUCT_CODES = "ProductCodes"

# Labels recorded as ValidationState.last_reload_source
RELOAD_SOURCE_STARTUP = "startup"
RELOAD_SOURCE_SCHEDULED = "scheduled"
RELOAD_SOURCE_API = "api"
