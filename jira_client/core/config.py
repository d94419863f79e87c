"""
Client Configuration.

This module defines the client settings using Pydantic Settings.
It loads configuration variables from environment variables and/or a .env file,
ensuring typed and validated settings for the Jira client.

Attributes:
    settings: The global instance of the Settings class, ready to be imported and used.
"""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """
    Client Settings.

    Attributes:
        JIRA_HOST: Base URL of the Jira site (e.g. https://example.atlassian.net).
        JIRA_MAIL: Account e-mail used for basic auth.
        JIRA_TOKEN: API token paired with JIRA_MAIL.
        JIRA_API_VERSION: REST API version interpolated into every endpoint.
    """

    # Jira
    JIRA_HOST: Optional[str] = None
    JIRA_MAIL: Optional[str] = None
    JIRA_TOKEN: Optional[SecretStr] = None
    JIRA_API_VERSION: str = "3"

    # HTTP
    HTTP_TIMEOUT_SECONDS: float = 30.0
    USER_AGENT: str = "jira-client/1.0"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env", env_ignore_empty=True, extra="ignore"
    )


settings = Settings()
