"""AWS Cognito implementation of the identity-provider gateway."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from tenant_management.application.dtos.identity import (
    AdminUserSpec,
    ClientAppSpec,
    PoolSpec,
)
from tenant_management.domain.exceptions import IdentityProviderException
from tenant_management.shared.logging import get_logger

logger = get_logger(__name__)


def _status_of(response: dict[str, Any]) -> int | None:
    return (response.get("ResponseMetadata") or {}).get("HTTPStatusCode")


class CognitoIdentityProviderGateway:
    """Cognito user pools behind IIdentityProviderGateway.

    Uses boto3 (sync) via asyncio.to_thread for async API. Any response
    other than HTTP 200, and any botocore error, is raised as
    IdentityProviderException carrying the operation and status.
    """

    def __init__(
        self,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        access_key: str | None = None,
        secret_key: str | None = None,
        client: Any = None,
    ) -> None:
        """Initialize the cognito-idp client.

        Args:
            region: AWS region.
            endpoint_url: Custom endpoint (e.g. a local Cognito emulator).
            access_key: Optional; uses env/IAM if not set.
            secret_key: Optional.
            client: Prebuilt client (tests); skips boto3.client when given.
        """
        self.region = region
        if client is not None:
            self._client = client
            return
        extra = {} if endpoint_url is None else {"endpoint_url": endpoint_url}
        self._client = boto3.client(
            "cognito-idp",
            region_name=region,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            **extra,
        )

    async def _call(
        self, operation: str, fn: Callable[..., dict[str, Any]], **kwargs: Any
    ) -> dict[str, Any]:
        """Run a client method in a thread and enforce a 200 response."""
        try:
            response = await asyncio.to_thread(fn, **kwargs)
        except ClientError as e:
            status = _status_of(e.response)
            error = e.response.get("Error") or {}
            logger.error(
                "Cognito %s failed: %s %s", operation, error.get("Code"), status
            )
            raise IdentityProviderException(
                operation,
                status,
                f"Identity provider call '{operation}' failed. "
                f"Status Code: {status} ({error.get('Code')}: {error.get('Message')})",
            ) from e
        except BotoCoreError as e:
            logger.error("Cognito %s failed: %s", operation, e)
            raise IdentityProviderException(operation, message=str(e)) from e

        status = _status_of(response)
        if status != 200:
            raise IdentityProviderException(operation, status)
        return response

    async def create_pool(self, spec: PoolSpec) -> str:
        response = await self._call(
            "create_pool",
            self._client.create_user_pool,
            PoolName=spec.pool_name,
            AutoVerifiedAttributes=list(spec.auto_verified_attributes),
            Schema=[
                {
                    "Name": attr.name,
                    "AttributeDataType": "String",
                    "Required": attr.required,
                    "Mutable": attr.mutable,
                    "StringAttributeConstraints": {
                        "MinLength": str(attr.min_length),
                        "MaxLength": str(attr.max_length),
                    },
                }
                for attr in spec.schema
            ],
            AccountRecoverySetting={
                "RecoveryMechanisms": [
                    {"Name": name, "Priority": priority}
                    for name, priority in spec.recovery_mechanisms
                ]
            },
            AdminCreateUserConfig={
                "InviteMessageTemplate": {
                    "EmailSubject": spec.invite_template.email_subject,
                    "EmailMessage": spec.invite_template.email_message,
                    "SMSMessage": spec.invite_template.sms_message,
                }
            },
        )
        return response["UserPool"]["Id"]

    async def create_domain(self, pool_id: str, domain: str) -> str:
        await self._call(
            "create_domain",
            self._client.create_user_pool_domain,
            Domain=domain,
            UserPoolId=pool_id,
        )
        return domain

    async def create_client_app(self, pool_id: str, spec: ClientAppSpec) -> str:
        response = await self._call(
            "create_client_app",
            self._client.create_user_pool_client,
            UserPoolId=pool_id,
            ClientName=spec.client_name,
            GenerateSecret=spec.generate_secret,
            CallbackURLs=list(spec.callback_urls),
            LogoutURLs=list(spec.logout_urls),
            SupportedIdentityProviders=list(spec.identity_providers),
            AllowedOAuthFlows=list(spec.oauth_flows),
            AllowedOAuthScopes=list(spec.oauth_scopes),
            AllowedOAuthFlowsUserPoolClient=True,
        )
        return response["UserPoolClient"]["ClientId"]

    async def create_group(
        self, pool_id: str, group_name: str, precedence: int = 0
    ) -> None:
        await self._call(
            "create_group",
            self._client.create_group,
            GroupName=group_name,
            UserPoolId=pool_id,
            Precedence=precedence,
        )

    async def create_admin_user(self, pool_id: str, spec: AdminUserSpec) -> str:
        response = await self._call(
            "create_admin_user",
            self._client.admin_create_user,
            UserPoolId=pool_id,
            Username=spec.username,
            TemporaryPassword=spec.temporary_password,
            UserAttributes=[
                {"Name": name, "Value": value}
                for name, value in spec.attributes.items()
            ],
            DesiredDeliveryMediums=list(spec.delivery_mediums),
        )
        attributes = (response.get("User") or {}).get("Attributes") or []
        subject = next((a["Value"] for a in attributes if a.get("Name") == "sub"), None)
        if not subject:
            raise IdentityProviderException(
                "create_admin_user",
                _status_of(response),
                "Identity provider did not return a subject for the created user.",
            )
        return subject

    async def add_user_to_group(
        self, pool_id: str, group_name: str, username: str
    ) -> None:
        await self._call(
            "add_user_to_group",
            self._client.admin_add_user_to_group,
            UserPoolId=pool_id,
            Username=username,
            GroupName=group_name,
        )

    async def delete_pool(self, pool_id: str) -> None:
        await self._call(
            "delete_pool", self._client.delete_user_pool, UserPoolId=pool_id
        )

    async def delete_domain(self, pool_id: str, domain: str) -> None:
        await self._call(
            "delete_domain",
            self._client.delete_user_pool_domain,
            Domain=domain,
            UserPoolId=pool_id,
        )
