"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings
from typing import Optional, Dict, Any, List, Tuple, Union
from enum import Enum
import os


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class AzureMapsSettings(BaseSettings):
    """Azure Maps POI search configuration"""

    base_url: str = Field(default="https://atlas.microsoft.com")
    api_version: str = Field(default="1.0")
    subscription_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("AZURE_MAPS_SUBSCRIPTION_KEY", "AzureMapsKey"),
        description="Azure Maps subscription key",
    )
    # None leaves the httpx client default in place
    timeout_seconds: Optional[float] = Field(default=None, gt=0, le=300)

    @field_validator('base_url')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    model_config = {
        "env_prefix": "AZURE_MAPS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


class SearchPolicySettings(BaseSettings):
    """Relevance policy applied to upstream search results"""

    query_term: str = Field(default="restaurant")
    min_score: float = Field(default=0.98, ge=0.0, le=1.0)
    required_category: str = Field(default="restaurant")

    model_config = {
        "env_prefix": "SEARCH_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="Lunch Roulette API")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = Field(default=False)
    workers: int = Field(default=1, ge=1, le=16)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: str = Field(default="json", pattern="^(json|text)$")

    # CORS Configuration
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST"])

    # Nested Settings
    azure_maps: AzureMapsSettings = Field(default_factory=AzureMapsSettings)
    search: SearchPolicySettings = Field(default_factory=SearchPolicySettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from environment variable or list"""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v or ["*"]

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def get_cors_config(self) -> Dict[str, Any]:
        """Get CORS configuration for FastAPI"""
        return {
            "allow_origins": self.cors_origins,
            "allow_credentials": False,
            "allow_methods": self.cors_allow_methods,
            "allow_headers": ["*"],
        }

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


def env_files(environment: Optional[str] = None) -> Tuple[str, ...]:
    """.env plus the per-environment file; later files take priority"""
    environment = (environment or os.getenv("ENVIRONMENT", "development")).lower()
    return (".env", f".env.{environment}")


def build_settings(env_file: Union[str, Tuple[str, ...], None] = None) -> Settings:
    """Build settings with nested sections read from the same env file(s)"""
    env_file = env_file or env_files()
    return Settings(
        _env_file=env_file,
        azure_maps=AzureMapsSettings(_env_file=env_file),
        search=SearchPolicySettings(_env_file=env_file),
    )


# Global settings instance
settings = build_settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = build_settings()
    return settings
