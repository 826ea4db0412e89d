from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from pathlib import Path
from typing import List

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"


class Settings(BaseSettings):

    PROJECT_NAME: str = "Report-It API"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = "production"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: str = "https://report-it-frontend.vercel.app"
    DEV_CORS_ORIGIN: str = "http://localhost:8080"

    DATABASE_URL: str = ""
    MARIADB_USER: str = ""
    MARIADB_PASSWORD: str = ""
    MARIADB_HOST: str = ""
    MARIADB_PORT: str = "3306"
    MARIADB_DATABASE: str = ""
    SQLITE_PATH: str = "./report_it.db"
    DB_ECHO: bool = False

    STATIC_DIR: str = "public"

    class Config:
        env_file = ENV_PATH
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    @property
    def cors_origins(self) -> List[str]:
        origins = [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]
        if self.is_development and self.DEV_CORS_ORIGIN not in origins:
            origins.append(self.DEV_CORS_ORIGIN)
        return origins

    @property
    def mariadb_url(self) -> str:
        return f'mysql+pymysql://{self.MARIADB_USER}:{self.MARIADB_PASSWORD}@{self.MARIADB_HOST}:{self.MARIADB_PORT}/{self.MARIADB_DATABASE}?charset=utf8mb4'

    @property
    def database_url(self) -> str:
        # Explicit URL first, then MariaDB, then a local SQLite file.
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.MARIADB_HOST:
            return self.mariadb_url
        return f"sqlite:///{Path(self.SQLITE_PATH).resolve()}"


settings = Settings()
