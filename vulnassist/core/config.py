"""
App Configuration.

This module defines the global application settings using Pydantic Settings.
It loads configuration variables from environment variables and/or a .env file,
ensuring typed and validated settings for the application.

Attributes:
    settings: The global instance of the Settings class, ready to be imported and used.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """
    Application Settings.

    This class defines the configuration for the application, validating
    environment variables against the specified types.

    Attributes:
        PROJECT_NAME: The name of the project (default: "Vulnerability Assist").
        OPENAI_API_KEY: The API key for accessing OpenAI services.
        LLM_MODEL: Chat model used by the suggestion flows.
        LLM_MAX_RETRIES: Client-level retries; 0 keeps every flow call single-shot.
        LLM_TIMEOUT_SECONDS: Per-call timeout for a suggestion, None disables it.
        MAX_DESCRIPTION_LENGTH: Optional upper bound on vulnerability descriptions.
    """

    # Core
    PROJECT_NAME: str = "Vulnerability Assist"
    LOG_LEVEL: str = "INFO"

    # AI / Model Providers
    OPENAI_API_KEY: str
    LLM_MODEL: str = "gpt-5-mini"
    LLM_TEMPERATURE: float = 0
    LLM_MAX_COMPLETION_TOKENS: int = 1000
    LLM_MAX_RETRIES: int = 0
    LLM_TIMEOUT_SECONDS: Optional[float] = 30.0

    # Suggestions
    MAX_DESCRIPTION_LENGTH: Optional[int] = None

    model_config = SettingsConfigDict(
        env_file=".env", env_ignore_empty=True, extra="ignore"
    )


settings = Settings()
