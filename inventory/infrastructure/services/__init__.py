"""Infrastructure services (background reference-data refresh)."""

from inventory.infrastructure.services.reference_data import (
    reload_reference_data,
    run_periodic_refresh,
)

__all__ = ["reload_reference_data", "run_periodic_refresh"]
