"""Tenant provisioning: durable tenant record + identity realm, with rollback.

The saga creates, in this exact order: tenant record, identity pool,
hosted login domain, OAuth client app, Administrators group, administrator
user. Each step persists its output before the next one runs.

Rollback only deletes the identity pool (the provider cascades the delete to
the pool's domain and client apps) and then the tenant record. That shortcut
holds only while the pool is created before any of its children: do not
reorder the steps without re-deriving the compensations.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from tenant_management.application.dtos.identity import (
    AdminUserSpec,
    ClientAppSpec,
    InviteMessageTemplate,
    PoolSpec,
    SchemaAttribute,
)
from tenant_management.application.dtos.tenant import (
    ProvisionTenantRequest,
    ProvisionTenantResult,
)
from tenant_management.application.interfaces.repositories import (
    IDeploymentSettingRepository,
    ITenantRecordStore,
)
from tenant_management.application.interfaces.services import IIdentityProviderGateway
from tenant_management.application.services.saga import Saga, SagaStep
from tenant_management.application.services.secret_generator import SecretGenerator
from tenant_management.core.config import ProvisioningConfig
from tenant_management.domain.entities.tenant import TenantRecord
from tenant_management.domain.enums import DeploymentSettingType
from tenant_management.domain.exceptions import (
    DuplicateKeyError,
    DuplicateResourceException,
    InvalidArgumentException,
    InvalidOperationException,
)
from tenant_management.shared.cancellation import CancellationToken
from tenant_management.shared.logging import get_logger
from tenant_management.shared.utils.generators import generate_cuid

logger = get_logger(__name__)

INVITE_EMAIL_SUBJECT = "Your temporary password for tenant UI application"
INVITE_MESSAGE = (
    "Login into your application at '{url}' with username {{username}} "
    "and temporary password {{####}}"
)

POOL_SCHEMA: tuple[SchemaAttribute, ...] = (
    SchemaAttribute(name="email", required=True, mutable=True, max_length=128),
    SchemaAttribute(name="tenant_id", required=False, mutable=False, max_length=64),
    SchemaAttribute(name="user_role", required=False, mutable=True, max_length=128),
)


def pool_name_for(tenant_id: str) -> str:
    return f"tenant-user-pool-{tenant_id}"


def domain_name_for(tenant_id: str) -> str:
    """Hosted login domain for a tenant (deterministic, lower-cased)."""
    return f"tenant-{tenant_id}".lower()


def _is_duplicate_key(exc: BaseException) -> bool:
    """True if exc or anything in its cause/context chain is a storage duplicate-key error."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, DuplicateKeyError):
            return True
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return False


@dataclass
class _ProvisioningState:
    """Mutable progress shared by the saga steps of one provisioning run."""

    record: TenantRecord
    app_urls: list[str] = field(default_factory=list)
    pool_id: str | None = None


class ProvisioningOrchestrator:
    """Runs the provisioning saga against the record store and the identity provider."""

    def __init__(
        self,
        tenant_store: ITenantRecordStore,
        settings_repo: IDeploymentSettingRepository,
        identity_gateway: IIdentityProviderGateway,
        config: ProvisioningConfig,
        secret_generator: SecretGenerator | None = None,
        id_generator: Callable[[], str] = generate_cuid,
    ) -> None:
        self.tenant_store = tenant_store
        self.settings_repo = settings_repo
        self.identity_gateway = identity_gateway
        self.config = config
        self.secret_generator = secret_generator or SecretGenerator()
        self.id_generator = id_generator

    async def provision(
        self,
        request: ProvisionTenantRequest,
        cancellation: CancellationToken | None = None,
    ) -> ProvisionTenantResult:
        """Provision a tenant and return its ID.

        Raises:
            InvalidArgumentException: Missing field or invalid email.
            DuplicateResourceException: Tenant code already exists (case-insensitive).
            IdentityProviderException: A provider call failed (after rollback).
            OperationCancelledException: Cancellation observed between steps (after rollback).
        """
        self._validate(request)
        record = TenantRecord.new(
            tenant_id=self.id_generator(),
            tenant_code=request.tenant_code,
            tenant_name=request.tenant_name.strip(),
            administrator_email=request.administrator_email.strip(),
        )
        state = _ProvisioningState(record=record)
        logger.info(
            "Provisioning tenant '%s' (code '%s')", record.tenant_id, record.tenant_code
        )

        try:
            await Saga("provision_tenant").run(self._steps(state), cancellation)
        except Exception as exc:
            if _is_duplicate_key(exc):
                raise DuplicateResourceException(
                    "TenantCode", record.tenant_code
                ) from exc
            raise

        logger.info("Tenant '%s' provisioned", record.tenant_id)
        return ProvisionTenantResult(tenant_id=record.tenant_id)

    @staticmethod
    def _validate(request: ProvisionTenantRequest | None) -> None:
        if request is None:
            raise InvalidArgumentException("Request is required", field="request")
        for field_name in ("tenant_name", "tenant_code", "administrator_email"):
            value = getattr(request, field_name, None)
            if not value or not value.strip():
                raise InvalidArgumentException(
                    f"{field_name} is required", field=field_name
                )
        # TenantRecord.new validates code length and email format.

    def _steps(self, state: _ProvisioningState) -> list[SagaStep]:
        return [
            SagaStep(
                "create_tenant_record",
                lambda: self._create_record(state),
                compensation=lambda: self._delete_record(state),
            ),
            SagaStep("read_client_app_urls", lambda: self._read_app_urls(state)),
            SagaStep(
                "create_identity_pool",
                lambda: self._create_pool(state),
                compensation=lambda: self._delete_pool(state),
            ),
            SagaStep("record_identity_pool", lambda: self._record_pool(state)),
            SagaStep("create_identity_domain", lambda: self._create_domain(state)),
            SagaStep("create_client_app", lambda: self._create_client_app(state)),
            SagaStep("create_admin_group", lambda: self._create_admin_group(state)),
            SagaStep("create_administrator", lambda: self._create_administrator(state)),
        ]

    async def _persist(self, state: _ProvisioningState, record: TenantRecord) -> None:
        state.record = await self.tenant_store.update(
            record, expected_version=record.version
        )

    async def _create_record(self, state: _ProvisioningState) -> None:
        state.record = await self.tenant_store.create(state.record)

    async def _delete_record(self, state: _ProvisioningState) -> None:
        logger.warning("Rollback: Delete Tenant '%s'...", state.record.tenant_id)
        await self.tenant_store.delete(state.record)

    async def _read_app_urls(self, state: _ProvisioningState) -> None:
        state.app_urls = await self.settings_repo.list_values(
            DeploymentSettingType.CLIENT_APP_URL.value
        )

    async def _create_pool(self, state: _ProvisioningState) -> None:
        tenant_id = state.record.tenant_id
        logger.info("Creating identity pool for Tenant '%s'", tenant_id)
        first_url = state.app_urls[0] if state.app_urls else ""
        message = INVITE_MESSAGE.format(url=first_url)
        spec = PoolSpec(
            pool_name=pool_name_for(tenant_id),
            schema=POOL_SCHEMA,
            invite_template=InviteMessageTemplate(
                email_subject=INVITE_EMAIL_SUBJECT,
                email_message=message,
                sms_message=message,
            ),
        )
        state.pool_id = await self.identity_gateway.create_pool(spec)

    async def _delete_pool(self, state: _ProvisioningState) -> None:
        if not state.pool_id:
            return
        logger.warning("Rollback: Delete Tenant identity pool '%s'...", state.pool_id)
        await self.identity_gateway.delete_pool(state.pool_id)

    async def _record_pool(self, state: _ProvisioningState) -> None:
        if not state.pool_id:
            raise InvalidOperationException(
                f"Identity pool for Tenant '{state.record.tenant_id}' has no ID"
            )
        await self._persist(state, state.record.with_identity_pool(state.pool_id))

    async def _create_domain(self, state: _ProvisioningState) -> None:
        record = state.record
        logger.info("Creating login domain for Tenant '%s'", record.tenant_id)
        domain = await self.identity_gateway.create_domain(
            record.identity_pool_id, domain_name_for(record.tenant_id)
        )
        await self._persist(state, record.with_identity_domain(domain))

    async def _create_client_app(self, state: _ProvisioningState) -> None:
        record = state.record
        logger.info("Creating client app for Tenant '%s'", record.tenant_id)
        spec = ClientAppSpec(
            client_name=self.config.client_app_name,
            callback_urls=list(state.app_urls),
            logout_urls=list(state.app_urls),
        )
        client_id = await self.identity_gateway.create_client_app(
            record.identity_pool_id, spec
        )
        await self._persist(state, record.with_client_app(client_id))

    async def _create_admin_group(self, state: _ProvisioningState) -> None:
        await self.identity_gateway.create_group(
            state.record.identity_pool_id, self.config.admin_group_name, precedence=0
        )

    async def _create_administrator(self, state: _ProvisioningState) -> None:
        record = state.record
        pool_id = record.identity_pool_id
        logger.info(
            "Creating Administrator '%s' for Tenant '%s' in identity pool '%s'",
            record.administrator_email,
            record.tenant_id,
            pool_id,
        )
        spec = AdminUserSpec(
            username=self.config.admin_username,
            email=record.administrator_email,
            temporary_password=self.secret_generator.generate(
                self.config.temporary_password_length
            ),
            attributes={
                "email": record.administrator_email,
                "custom:user_role": self.config.admin_role_name,
                "custom:tenant_id": record.tenant_id,
            },
        )
        subject = await self.identity_gateway.create_admin_user(pool_id, spec)
        await self.identity_gateway.add_user_to_group(
            pool_id, self.config.admin_group_name, self.config.admin_username
        )
        await self._persist(state, record.with_administrator(subject))
