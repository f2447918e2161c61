"""Identity-provider request DTOs.

Provider-neutral descriptions of the resources the provisioning saga
creates. The gateway translates them to provider API calls.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SchemaAttribute:
    """A user-pool attribute definition (string type)."""

    name: str
    required: bool = False
    mutable: bool = True
    min_length: int = 0
    max_length: int = 128


@dataclass(frozen=True)
class InviteMessageTemplate:
    """Invitation sent with the administrator's temporary password.

    The provider substitutes {username} and {####} (the temporary password).
    """

    email_subject: str
    email_message: str
    sms_message: str


@dataclass(frozen=True)
class PoolSpec:
    """Identity pool (realm) definition."""

    pool_name: str
    schema: tuple[SchemaAttribute, ...]
    invite_template: InviteMessageTemplate
    auto_verified_attributes: tuple[str, ...] = ("email",)
    recovery_mechanisms: tuple[tuple[str, int], ...] = (("verified_email", 1),)


@dataclass(frozen=True)
class ClientAppSpec:
    """OAuth client application registered on a pool."""

    client_name: str
    callback_urls: list[str] = field(default_factory=list)
    logout_urls: list[str] = field(default_factory=list)
    oauth_flows: tuple[str, ...] = ("code", "implicit")
    oauth_scopes: tuple[str, ...] = ("email", "openid", "profile")
    identity_providers: tuple[str, ...] = ("COGNITO",)
    generate_secret: bool = False


@dataclass(frozen=True)
class AdminUserSpec:
    """Administrator account created with a temporary password."""

    username: str
    email: str
    temporary_password: str
    attributes: dict[str, str] = field(default_factory=dict)
    delivery_mediums: tuple[str, ...] = ("EMAIL",)
