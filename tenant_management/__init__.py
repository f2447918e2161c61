"""Tenant management service: tenant provisioning and decommissioning."""
