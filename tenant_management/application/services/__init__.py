"""Application services shared by the use cases."""

from tenant_management.application.services.saga import Saga, SagaStep
from tenant_management.application.services.secret_generator import SecretGenerator

__all__ = ["Saga", "SagaStep", "SecretGenerator"]
