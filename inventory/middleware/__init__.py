"""HTTP middleware applied in inventory.main (first added = outermost)."""

from inventory.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
