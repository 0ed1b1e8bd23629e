"""Environment-driven settings for the bundled HTTP transport."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def get_config_value(key: str, default: str = "") -> str:
    value = os.getenv(key)
    return value.strip() if value and value.strip() else default


@dataclass
class Settings:
    api_endpoint: str
    api_token: Optional[str] = None
    schema_name: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Settings":
        """
        Load settings from the environment, reading a ``.env`` file first if present.

        Variables:
            GRAPHQL_API_ENDPOINT: GraphQL endpoint URL (required)
            GRAPHQL_API_TOKEN: Token sent as the Authorization header
            GRAPHQL_SCHEMA_NAME: Schema name sent with each request
            GRAPHQL_TIMEOUT: Request timeout in seconds
        """
        load_dotenv(dotenv_path)

        api_endpoint = get_config_value("GRAPHQL_API_ENDPOINT")
        if not api_endpoint:
            raise ValueError("GRAPHQL_API_ENDPOINT is not set")

        raw_timeout = get_config_value("GRAPHQL_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ValueError(f"GRAPHQL_TIMEOUT must be a number, got '{raw_timeout}'") from None

        settings = cls(
            api_endpoint=api_endpoint,
            api_token=get_config_value("GRAPHQL_API_TOKEN") or None,
            schema_name=get_config_value("GRAPHQL_SCHEMA_NAME") or None,
            timeout=timeout,
        )
        logger.info(f"Loaded settings for endpoint {settings.api_endpoint}")
        return settings
