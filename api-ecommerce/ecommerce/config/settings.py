# ecommerce/config/settings.py
from urllib.parse import quote_plus

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # PostgreSQL
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "ecommerce"
    db_user: str = "postgres"
    db_password: str = ""
    db_ssl: bool = False

    # full URL wins over the pieces above (sqlite in tests, managed DBs in prod)
    database_uri: str | None = None
    db_auto_create: bool = False

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    app_prefix: str = "/ecommerce"
    cors_origins_raw: str = "http://localhost:5173,http://127.0.0.1:5173"

    jwt_secret: str = "dev-secret-change-me"
    jwt_issuer: str = "ecommerce-api"
    jwt_audience: str = "ecommerce-front"
    jwt_access_minutes: int = 60

    password_iterations: int = 600_000

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("db_host", "db_name", "db_user", "db_password", "jwt_secret", mode="before")
    @classmethod
    def strip_strings(cls, v):
        if isinstance(v, str):
            return v.strip().strip('"').strip("'")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def database_url(self) -> str:
        if self.database_uri:
            return self.database_uri

        user = quote_plus(self.db_user)
        password = quote_plus(self.db_password)
        url = f"postgresql+psycopg2://{user}:{password}@{self.db_host}:{self.db_port}/{self.db_name}"
        if self.db_ssl:
            url += "?sslmode=require"
        return url

    @property
    def api_prefix(self) -> str:
        return f"{self.app_prefix.rstrip('/')}/api"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins_raw.split(",") if o.strip()]


settings = Settings()
