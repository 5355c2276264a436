from pathlib import Path

from pydantic import computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url

PACKAGE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000

    LOG_LEVEL: str = "INFO"

    DATABASE_URL: str = ""
    DB_ECHO: bool = False

    STATIC_DIR: Path = PACKAGE_DIR / "public"

    @model_validator(mode="after")
    def check_required_field_are_set(self):
        missing_fields = []
        if not self.DATABASE_URL:
            missing_fields.append("DATABASE_URL")

        if missing_fields:
            raise ValueError(
                f"Missing required environment variables: {','.join(missing_fields)}"
            )

        return self

    @computed_field
    @property
    def ASYNC_DATABASE_URL(self) -> str:
        # libpq style URLs (postgres://...?sslmode=disable) are routed to asyncpg,
        # which takes the TLS mode as "ssl" instead.
        url = make_url(self.DATABASE_URL).set(drivername="postgresql+asyncpg")
        sslmode = url.query.get("sslmode")
        if sslmode:
            url = url.difference_update_query(["sslmode"]).update_query_dict({"ssl": sslmode})
        return url.render_as_string(hide_password=False)


settings = Settings()
