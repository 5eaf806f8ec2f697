from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, AliasChoices, field_validator
from pydantic import ValidationError as PydanticValidationError

from gymfeedback.core.errors import ConfigurationError


class Settings(BaseSettings):
    app_name: str = "limit-feedback"
    environment: str = "dev"
    log_level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL", "log_level"))

    supabase_url: str = Field(validation_alias=AliasChoices("SUPABASE_URL", "supabase_url"))
    supabase_anon_key: str = Field(
        validation_alias=AliasChoices("SUPABASE_ANON_KEY", "SUPABASE_KEY", "supabase_anon_key")
    )
    supabase_timeout: float = Field(
        default=30.0, validation_alias=AliasChoices("SUPABASE_TIMEOUT", "supabase_timeout")
    )

    cors_origins: str = Field(default="*", validation_alias=AliasChoices("CORS_ORIGINS", "cors_origins"))

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @field_validator("supabase_url", "supabase_anon_key")
    @classmethod
    def required_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


@lru_cache
def get_settings() -> Settings:
    """Load settings once; missing endpoint or key is a fatal ConfigurationError."""
    try:
        return Settings()
    except PydanticValidationError as exc:
        bad = sorted({str(e["loc"][0]) for e in exc.errors() if e["loc"]})
        raise ConfigurationError(f"missing or invalid settings: {', '.join(bad)}") from exc
