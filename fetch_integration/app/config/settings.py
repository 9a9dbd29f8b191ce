"""Settings for the fetch integration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    fetch_backend: str = Field("httpx", validation_alias="FETCH_BACKEND")

    fetch_connect_timeout_seconds: float = Field(5.0, validation_alias="FETCH_CONNECT_TIMEOUT_SECONDS")
    fetch_read_timeout_seconds: float = Field(5.0, validation_alias="FETCH_READ_TIMEOUT_SECONDS")
    fetch_follow_redirects: bool = Field(True, validation_alias="FETCH_FOLLOW_REDIRECTS")
    # Non-2xx responses surface as RestException when enabled.
    fetch_raise_for_status: bool = Field(True, validation_alias="FETCH_RAISE_FOR_STATUS")
    fetch_verify_tls: bool = Field(True, validation_alias="FETCH_VERIFY_TLS")
    fetch_user_agent: str = Field("", validation_alias="FETCH_USER_AGENT")
