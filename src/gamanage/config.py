"""
Client configuration

Settings come from explicit arguments first, then GA_* environment variables.
"""

import os
from typing import Any, Optional

from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "https://www.googleapis.com/analytics/v3"

_ENV_VARS = {
    "access_token": "GA_ACCESS_TOKEN",
    "base_url": "GA_API_BASE_URL",
    "quota_user": "GA_QUOTA_USER",
    "timeout_seconds": "GA_TIMEOUT_SECONDS",
    "max_results": "GA_MAX_RESULTS",
}


class ClientConfig(BaseModel):
    """Configuration for the Management API client

    Attributes:
        access_token: OAuth2 bearer token (obtaining it is the caller's job)
        base_url: API root, without trailing slash
        quota_user: Optional quotaUser value attached to every request
        timeout_seconds: Per-request timeout
        max_results: Page size hint for paginated listings
    """

    access_token: Optional[str] = Field(None, description="OAuth2 bearer token")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API root URL")
    quota_user: Optional[str] = Field(None, description="quotaUser request parameter")
    timeout_seconds: float = Field(default=30.0, description="Request timeout in seconds")
    max_results: Optional[int] = Field(None, description="Page size for list requests")


def load_config(**overrides: Any) -> ClientConfig:
    """
    Build a ClientConfig from the environment

    Args:
        **overrides: Field values that take precedence over the environment.
            None values are ignored.

    Returns:
        Validated ClientConfig
    """
    values: dict[str, Any] = {}
    for field_name, env_var in _ENV_VARS.items():
        value = os.environ.get(env_var)
        if value:
            values[field_name] = value

    values.update({key: value for key, value in overrides.items() if value is not None})
    return ClientConfig.model_validate(values)
