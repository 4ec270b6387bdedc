# api/settings.py
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Users CRUD API"
    PROJECT_DESCRIPTION: str = "A simple CRUD API with authentication and Swagger documentation"
    VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    API_TOKEN: str = "mysecrettoken"
    API_PREFIX: str = "/api/v1"
    DOCS_URL: str = "/api-docs"
    # count: id = количество записей + 1; sequence: счётчик, id не переиспользуются
    ID_ASSIGNMENT: Literal["count", "sequence"] = "count"
    SEED_USERS: bool = True
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
