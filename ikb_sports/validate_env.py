"""Fail-fast environment validation for the IKB search plugin."""

from __future__ import annotations

import os
from functools import lru_cache
from urllib.parse import urlparse

ALLOWED_ENVIRONMENTS = {"development", "staging", "production", "test"}


def require_env(name: str) -> str:
    """Fetch an environment variable or raise RuntimeError if missing."""
    value = os.getenv(name)
    if value is None or not value.strip():
        raise RuntimeError(f"{name} is required and must be set before startup.")
    return value.strip()


def validate_environment_value(environment: str) -> None:
    """Ensure ENVIRONMENT is one of the allowed values."""
    if environment not in ALLOWED_ENVIRONMENTS:
        allowed = ", ".join(sorted(ALLOWED_ENVIRONMENTS))
        raise RuntimeError(f"ENVIRONMENT must be one of: {allowed}.")


def validate_non_local_url(name: str, value: str) -> None:
    """Ensure a URL does not point to localhost in production."""
    parsed = urlparse(value)
    host = parsed.hostname
    if not host:
        raise RuntimeError(f"{name} must be a valid URL (missing hostname).")
    if host in {"localhost", "127.0.0.1"}:
        raise RuntimeError(f"{name} must not point to localhost in production.")


@lru_cache(maxsize=1)
def validate_env() -> None:
    """Validate environment variables before the plugin is configured.

    Outside production nothing is required: the API key can also be passed
    directly to the plugin. Production deployments must provide IKB_API_KEY.
    """
    environment = os.getenv("ENVIRONMENT", "development")
    validate_environment_value(environment)

    if environment == "production":
        require_env("IKB_API_KEY")
        base_url = os.getenv("IKB_BASE_URL")
        if base_url:
            validate_non_local_url("IKB_BASE_URL", base_url)
