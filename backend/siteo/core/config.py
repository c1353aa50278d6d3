from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _split_csv(value: str) -> list[str]:
    return [item.strip().lower() for item in value.split(',') if item.strip()]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra='forbid',
    )

    DATABASE_URL: str
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = 'HS256'
    APP_ENV: str = 'development'
    CORS_ORIGINS: str = 'http://localhost:5173'
    TRUST_PROXY_HEADERS: bool = False

    # Custom-domain routing
    API_BASE_URL: str = 'http://localhost:3001'
    CANONICAL_ORIGIN: str = 'https://real-estate-lead-ai.vercel.app'
    PLATFORM_HOSTS: str = 'real-estate-lead-ai.vercel.app,siteo.io,www.siteo.io'
    PREVIEW_HOST_SUFFIXES: str = '.vercel.app'

    VERCEL_API_BASE: str = 'https://api.vercel.com'
    VERCEL_AUTH_TOKEN: str | None = None
    VERCEL_PROJECT_ID: str | None = None
    VERCEL_TEAM_ID: str | None = None

    STRIPE_API_KEY: str | None = None
    STRIPE_PRICE_ID: str | None = None

    RESEND_API_BASE: str = 'https://api.resend.com'
    RESEND_API_KEY: str | None = None
    RESEND_FROM_EMAIL: str = 'noreply@siteo.io'

    # Public asset bucket (storage REST API)
    STORAGE_URL: str | None = None
    STORAGE_SERVICE_KEY: str | None = None
    STORAGE_BUCKET: str = 'agent-assets'

    @field_validator('DATABASE_URL')
    @classmethod
    def validate_database_url(cls, value: str) -> str:
        if not value.startswith('postgresql'):
            raise ValueError('DATABASE_URL must point to PostgreSQL and start with postgresql')
        return value

    @field_validator('JWT_SECRET_KEY')
    @classmethod
    def validate_jwt_secret_strength(cls, value: str) -> str:
        if len(value) < 32:
            raise ValueError('JWT secrets must be at least 32 characters')
        return value

    @field_validator('API_BASE_URL', 'CANONICAL_ORIGIN', 'VERCEL_API_BASE', 'RESEND_API_BASE')
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip('/')

    @property
    def cors_origins(self) -> list[str]:
        return [item.strip() for item in self.CORS_ORIGINS.split(',') if item.strip()]

    @property
    def platform_hosts(self) -> list[str]:
        return _split_csv(self.PLATFORM_HOSTS)

    @property
    def preview_host_suffixes(self) -> list[str]:
        return _split_csv(self.PREVIEW_HOST_SUFFIXES)


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
