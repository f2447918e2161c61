"""Domain value objects."""

from tenant_management.domain.value_objects.core import (
    TENANT_CODE_MAX_LENGTH,
    EmailAddress,
    TenantCode,
    normalize_email,
)

__all__ = ["TENANT_CODE_MAX_LENGTH", "EmailAddress", "TenantCode", "normalize_email"]
