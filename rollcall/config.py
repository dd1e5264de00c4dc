import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Runtime settings read from the environment (and a local .env file)."""

    def __init__(self):
        self.admin_key: Optional[str] = os.getenv("ADMIN_KEY") or None

        self.db_host = os.getenv("DB_HOST", "localhost")
        self.db_port = os.getenv("DB_PORT", "3306")
        self.db_user = os.getenv("DB_USER", "root")
        self.db_password = os.getenv("DB_PASSWORD", "")
        self.db_name = os.getenv("DB_NAME", "rollcall")
        self.database_url = os.getenv("DATABASE_URL") or (
            f"mysql+aiomysql://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )
        self.sql_echo = _as_bool(os.getenv("SQL_ECHO"))

        self.default_batch = os.getenv("DEFAULT_BATCH", "JNU MIT 1st Year")
        self.api_prefix = os.getenv("API_PREFIX", "/api").rstrip("/")
        self.cors_origins: List[str] = [
            origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
        ]

        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_file = os.getenv("LOG_FILE", "app.log")

        self.host = os.getenv("HOST", "0.0.0.0")
        self.port = int(os.getenv("PORT", "8000"))


settings = Settings()
