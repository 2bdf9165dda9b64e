from typing import List, Union
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    ENVIRONMENT: str = "development"
    NAME: str = "Student Records"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api/v1"
    """Pydantic v2 doesn't support parsing List[str] from a plain comma-separated string by default anymore."""
    ALLOWED_HOSTS: Union[str, List[str]] = "http://localhost:5173,http://localhost:3000"
    LOG_LEVEL: str = "INFO"

    # Record store: "memory", "rest" or "database"
    STORE_BACKEND: str = "memory"

    # Database
    DATABASE_URL: str = "sqlite:///./students.db"

    # Remote students API
    STUDENTS_API_BASE_URL: str = "http://localhost:5000"
    STUDENTS_API_TIMEOUT: float = 10.0

    @field_validator("ALLOWED_HOSTS", mode="before")
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if not v:
            return []
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        return v

    @field_validator("STORE_BACKEND", mode="before")
    def normalize_store_backend(cls, v: str) -> str:
        return str(v).strip().lower()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
