"""DTOs for deployment settings (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DeploymentSetting:
    """One row of the deployment settings list."""

    id: int
    setting_type: str
    setting_value: str
