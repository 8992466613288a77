from typing import Annotated, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Correos con acceso al panel de administración
    ADMIN_EMAILS: Annotated[List[str], NoDecode] = []
    LOGIN_URL: str = "/login"

    FRONTEND_URL: str = "http://localhost:3000"
    # Si no se configura, solo se permite el frontend
    CORS_ORIGINS: Annotated[List[str], NoDecode] = []

    MEMBERSHIP_CODE_PREFIX: str = "OC"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("ADMIN_EMAILS", "CORS_ORIGINS", mode="before")
    @classmethod
    def _split_csv(cls, value):
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


settings = Settings()
