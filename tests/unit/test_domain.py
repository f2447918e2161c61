"""Tests for domain value objects, the tenant record and its provisioning phase."""

import pytest

from tenant_management.domain import (
    PENDING,
    EmailAddress,
    InvalidArgumentException,
    ProvisioningPhase,
    TenantCode,
    TenantRecord,
)
from tenant_management.domain.value_objects import normalize_email


def test_tenant_code_is_stripped_and_upper_cased() -> None:
    assert TenantCode("  acme-01 ").value == "ACME-01"


@pytest.mark.parametrize("value", ["", "   "])
def test_tenant_code_rejects_blank(value: str) -> None:
    with pytest.raises(InvalidArgumentException) as exc_info:
        TenantCode(value)
    assert exc_info.value.details == {"field": "tenant_code"}


def test_tenant_code_max_length() -> None:
    assert TenantCode("a" * 50).value == "A" * 50
    with pytest.raises(InvalidArgumentException):
        TenantCode("a" * 51)


@pytest.mark.parametrize(
    "value",
    ["admin@acme.com", "first.last+tag@sub.example.org", "admin@bücher.de"],
)
def test_email_accepts_valid_addresses(value: str) -> None:
    assert EmailAddress(value).value == value


@pytest.mark.parametrize(
    "value",
    ["", "   ", "plainaddress", "no-at.example.com", "a@b", "a b@c.com", "a@@b.com", "a@b..com"],
)
def test_email_rejects_invalid_addresses(value: str) -> None:
    with pytest.raises(InvalidArgumentException) as exc_info:
        EmailAddress(value)
    assert exc_info.value.error_code == "INVALID_ARGUMENT"


def test_normalize_email_converts_unicode_domain() -> None:
    assert normalize_email("admin@bücher.de") == "admin@xn--bcher-kva.de"


def test_new_record_is_pending() -> None:
    record = TenantRecord.new("t1", "acme", "Acme", "admin@acme.com")

    assert record.tenant_code == "ACME"
    assert record.version == 1
    assert record.phase is ProvisioningPhase.PENDING
    assert not record.is_fully_provisioned
    assert record.identity_pool_id is None


def test_phase_follows_identity_fields() -> None:
    record = TenantRecord.new("t1", "acme", "Acme", "admin@acme.com")

    record = record.with_identity_pool("pool-1")
    assert record.phase is ProvisioningPhase.POOL_CREATED
    record = record.with_identity_domain("tenant-t1")
    assert record.phase is ProvisioningPhase.DOMAIN_CREATED
    record = record.with_client_app("client-1")
    assert record.phase is ProvisioningPhase.CLIENT_APP_CREATED
    record = record.with_administrator("sub-1")
    assert record.phase is ProvisioningPhase.ACTIVE
    assert record.is_fully_provisioned


def test_with_methods_do_not_mutate() -> None:
    record = TenantRecord.new("t1", "acme", "Acme", "admin@acme.com")
    updated = record.with_identity_pool("pool-1")
    assert record.identity_pool_id is None
    assert updated.identity_pool_id == "pool-1"


def test_pending_sentinel_value() -> None:
    assert PENDING == "PENDING"
    assert "pending" in ProvisioningPhase.values()
