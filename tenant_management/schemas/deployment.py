"""Deployment settings API schemas."""

from pydantic import BaseModel, Field


class DeploymentSettingsBody(BaseModel):
    """URLs of the deployed applications, reported after each deployment."""

    saas_operations_url: str = Field(..., description="SaaS operations UI URL")
    client_app_urls: list[str] = Field(
        default_factory=list,
        description="Client app URLs in order; the first one is used in invitations",
    )
