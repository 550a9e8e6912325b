from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Configuration
    app_name: str = Field("scimprep", description="Application name")
    environment: str = Field("development", description="Environment (development, staging, production)")
    debug: bool = Field(True, description="Debug mode")
    log_level: str = Field("INFO", description="Logging level")

    # API Configuration
    api_prefix: str = Field("/scim/v2", description="API route prefix")
    base_url: str = Field("http://localhost:8000", description="Public base URL used to build meta.location")
    cors_origins: List[str] = Field(["http://localhost:3000"], description="Allowed CORS origins")

    # Service Provider Configuration
    documentation_uri: Optional[str] = Field(None, description="Help documentation published on /ServiceProviderConfig")
    patch_supported: bool = Field(False, description="Advertise PATCH support")
    bulk_supported: bool = Field(False, description="Advertise bulk support")
    bulk_max_operations: int = Field(0, ge=0, description="Maximum operations in a bulk request")
    bulk_max_payload_size: int = Field(0, ge=0, description="Maximum bulk payload size in bytes")
    filter_supported: bool = Field(True, description="Advertise filter support")
    filter_max_results: int = Field(100, ge=0, description="Maximum resources returned by a filtered query")
    change_password_supported: bool = Field(False, description="Advertise password change support")
    sort_supported: bool = Field(False, description="Advertise sorting support")
    etag_supported: bool = Field(False, description="Advertise ETag support")

    # Server
    host: str = Field("0.0.0.0", description="Server host")
    port: int = Field(8000, description="Server port")
    reload: bool = Field(True, description="Enable auto-reload")

    @field_validator("environment")
    def validate_environment(cls, v: str) -> str:
        allowed = ["development", "staging", "production"]
        if v not in allowed:
            raise ValueError(f"Environment must be one of {allowed}")
        return v

    @field_validator("log_level")
    def validate_log_level(cls, v: str) -> str:
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in allowed:
            raise ValueError(f"Log level must be one of {allowed}")
        return v

    @field_validator("base_url")
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def scim_base_url(self) -> str:
        return f"{self.base_url}{self.api_prefix}"


# Create a singleton instance
settings = Settings()
