"""Rate limiter instance for SlowAPI.

Shared so main (app.state.limiter) and route modules use the same
instance. Limit strings live here.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

WRITE_ENDPOINT_LIMIT = "120/minute"
CACHE_RELOAD_LIMIT = "10/minute"

limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)
limit_cache_reload = limiter.limit(CACHE_RELOAD_LIMIT)
