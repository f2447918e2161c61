"""Domain entities and aggregates.

Pure domain models; no ORM or persistence concerns.
"""

from tenant_management.domain.entities.tenant import PENDING, TenantRecord

__all__ = ["PENDING", "TenantRecord"]
