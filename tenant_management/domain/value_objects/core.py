"""Domain value objects for the tenant management service.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

import re
from dataclasses import dataclass

from tenant_management.domain.exceptions import InvalidArgumentException

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", re.IGNORECASE)
_DOMAIN_PART_RE = re.compile(r"(@)(.+)$")

TENANT_CODE_MAX_LENGTH = 50


def _to_ascii_domain(match: re.Match[str]) -> str:
    """Convert the Unicode domain part of an address to its IDNA (punycode) form."""
    return match.group(1) + match.group(2).encode("idna").decode("ascii")


def normalize_email(value: str) -> str | None:
    """Return the address with an IDNA-normalized domain, or None if it is not valid."""
    if not value or not value.strip():
        return None
    try:
        normalized = _DOMAIN_PART_RE.sub(_to_ascii_domain, value)
    except UnicodeError:
        return None
    if not _EMAIL_RE.match(normalized):
        return None
    return normalized


@dataclass(frozen=True)
class TenantCode:
    """Value object for tenant code.

    Codes are user-supplied, case-insensitively unique, and always stored
    upper-cased. Max 50 characters.
    """

    value: str

    def __post_init__(self) -> None:
        stripped = (self.value or "").strip()
        if not stripped:
            raise InvalidArgumentException(
                "Tenant code must be a non-empty string", field="tenant_code"
            )
        if len(stripped) > TENANT_CODE_MAX_LENGTH:
            raise InvalidArgumentException(
                f"Tenant code must not exceed {TENANT_CODE_MAX_LENGTH} characters",
                field="tenant_code",
            )
        object.__setattr__(self, "value", stripped.upper())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EmailAddress:
    """Value object for a syntactically valid email address.

    The domain part is normalized with IDNA before matching, so Unicode
    domains are accepted and invalid labels are rejected.
    """

    value: str

    def __post_init__(self) -> None:
        if normalize_email(self.value) is None:
            raise InvalidArgumentException(
                "Invalid email format", field="administrator_email"
            )

    def __str__(self) -> str:
        return self.value
