"""Identity-provider adapters."""

from tenant_management.infrastructure.external.identity.cognito_gateway import (
    CognitoIdentityProviderGateway,
)

__all__ = ["CognitoIdentityProviderGateway"]
