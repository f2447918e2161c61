"""Tests for domain exceptions (error_code, message, details) and their HTTP mapping."""

import pytest

from tenant_management.core.exception_handlers import approximate_http_status
from tenant_management.domain.exceptions import (
    ConcurrencyConflictException,
    DuplicateKeyError,
    DuplicateResourceException,
    IdentityProviderException,
    InvalidArgumentException,
    InvalidOperationException,
    OperationCancelledException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    TenantManagementException,
)


def test_base_exception_default_error_code() -> None:
    """Base exception uses class name as error_code when not provided."""
    exc = TenantManagementException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "TenantManagementException"
    assert exc.details == {}
    assert exc.to_dict() == {
        "error_code": "TenantManagementException",
        "message": "Something failed",
        "details": {},
    }


def test_invalid_argument_carries_field() -> None:
    exc = InvalidArgumentException("bad", field="tenant_code")
    assert exc.error_code == "INVALID_ARGUMENT"
    assert exc.details == {"field": "tenant_code"}


def test_duplicate_resource() -> None:
    exc = DuplicateResourceException("TenantCode", "ACME")
    assert exc.error_code == "DUPLICATE_RESOURCE"
    assert exc.details == {"resource_type": "TenantCode", "key": "ACME"}
    assert "ACME" in exc.message


def test_resource_not_found() -> None:
    exc = ResourceNotFoundException("Tenant", "t1")
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "Tenant", "resource_id": "t1"}


def test_concurrency_conflict() -> None:
    exc = ConcurrencyConflictException("Tenant", "t1", 3)
    assert exc.error_code == "CONCURRENCY_CONFLICT"
    assert exc.details["expected_version"] == 3


def test_identity_provider_exception_is_invalid_operation() -> None:
    exc = IdentityProviderException("create_pool", 500)
    assert isinstance(exc, InvalidOperationException)
    assert exc.error_code == "INVALID_OPERATION"
    assert exc.operation == "create_pool"
    assert exc.details == {"status_code": 500, "operation": "create_pool"}
    assert "Status Code: 500" in exc.message


def test_operation_cancelled() -> None:
    exc = OperationCancelledException("provision_tenant.create_identity_pool")
    assert exc.error_code == "OPERATION_CANCELLED"


def test_duplicate_key_error_is_storage_level() -> None:
    exc = DuplicateKeyError("tenant_code_key", "ACME")
    assert exc.error_code == "DUPLICATE_KEY"
    assert exc.details == {"constraint": "tenant_code_key", "key": "ACME"}


def test_sql_not_configured() -> None:
    assert SqlNotConfiguredException().error_code == "SERVICE_UNAVAILABLE"


@pytest.mark.parametrize(
    ("error_code", "status"),
    [
        ("INVALID_ARGUMENT", 400),
        ("DUPLICATE_RESOURCE", 409),
        ("RESOURCE_NOT_FOUND", 404),
        ("CONCURRENCY_CONFLICT", 409),
        ("INVALID_OPERATION", 500),
        ("OPERATION_CANCELLED", 500),
        ("SERVICE_UNAVAILABLE", 503),
        ("UNKNOWN", 500),
        ("SOMETHING_ELSE", 500),
    ],
)
def test_approximate_http_status(error_code: str, status: int) -> None:
    assert approximate_http_status(error_code) == status
