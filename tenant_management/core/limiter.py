"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# Provisioning creates identity-provider resources; keep it slow.
PROVISION_TENANT_LIMIT = "5/minute"
WRITE_ENDPOINT_LIMIT = "60/minute"

limit_provision_tenant = limiter.limit(PROVISION_TENANT_LIMIT)
limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)
