"""Shared utilities: logging, cancellation, ID generators."""
