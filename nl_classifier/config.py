"""
Client configuration using Pydantic Settings.
Loads from explicit arguments or environment variables; a .env file is
read only when requested, e.g. ``ClientSettings(_env_file=".env")``.
"""

from typing import Dict, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SERVICE_URL = "https://gateway.watsonplatform.net/natural-language-classifier/api"


class ClientSettings(BaseSettings):
    """Connection settings shared by the blocking and async clients."""

    model_config = SettingsConfigDict(
        env_prefix="NLC_",
        env_file=None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Service endpoint
    service_url: str = DEFAULT_SERVICE_URL

    # Basic auth credentials
    username: Optional[str] = None
    password: Optional[str] = None

    # Headers sent with every request, e.g. {"X-Watson-Learning-Opt-Out": "true"}
    default_headers: Dict[str, str] = {}

    # Seconds, passed to httpx when the client creates its own session
    timeout: float = 60.0
