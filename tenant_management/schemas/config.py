"""Client configuration API schemas."""

from pydantic import BaseModel


class AuthSettingsResponse(BaseModel):
    """Sign-in settings for the SaaS operations UI."""

    region: str
    cognito_url: str
    user_pool_id: str
    app_client_id: str
