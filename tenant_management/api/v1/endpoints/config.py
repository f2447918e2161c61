"""Client configuration endpoints. No database access."""

from fastapi import APIRouter

from tenant_management.core.config import get_settings
from tenant_management.schemas.config import AuthSettingsResponse

router = APIRouter()


@router.get("/auth-settings", response_model=AuthSettingsResponse)
def get_auth_settings() -> AuthSettingsResponse:
    """Sign-in settings of the operations user pool."""
    settings = get_settings()
    return AuthSettingsResponse(
        region=settings.aws_region,
        cognito_url=settings.cognito_url(),
        user_pool_id=settings.operations_user_pool_id,
        app_client_id=settings.operations_app_client_id,
    )
