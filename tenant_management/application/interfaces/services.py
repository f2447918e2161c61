"""Service interfaces (ports) for the application layer.

Protocols define contracts for external collaborators (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tenant_management.application.dtos.identity import (
        AdminUserSpec,
        ClientAppSpec,
        PoolSpec,
    )


# Identity provider gateway interface
class IIdentityProviderGateway(Protocol):
    """Protocol for the identity provider (user pools, domains, client apps, users).

    Every call either returns its success payload or raises
    IdentityProviderException carrying the provider status. Calls are not
    idempotent; callers track which ones already succeeded.
    """

    async def create_pool(self, spec: PoolSpec) -> str:
        """Create a user pool; return its ID."""

    async def create_domain(self, pool_id: str, domain: str) -> str:
        """Create a hosted login domain on the pool; return the domain."""

    async def create_client_app(self, pool_id: str, spec: ClientAppSpec) -> str:
        """Register an OAuth client app on the pool; return its client ID."""

    async def create_group(
        self, pool_id: str, group_name: str, precedence: int = 0
    ) -> None:
        """Create a user group on the pool."""

    async def create_admin_user(self, pool_id: str, spec: AdminUserSpec) -> str:
        """Create a user with a temporary password; return its subject (sub)."""

    async def add_user_to_group(
        self, pool_id: str, group_name: str, username: str
    ) -> None:
        """Add a user to a group."""

    async def delete_pool(self, pool_id: str) -> None:
        """Delete a pool; its domain and client apps go with it."""

    async def delete_domain(self, pool_id: str, domain: str) -> None:
        """Delete a pool's hosted login domain."""
