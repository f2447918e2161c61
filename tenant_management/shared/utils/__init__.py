"""Shared utility helpers."""

from tenant_management.shared.utils.generators import generate_cuid

__all__ = ["generate_cuid"]
