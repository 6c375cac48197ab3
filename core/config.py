from pydantic_settings import BaseSettings
from typing import Optional
from fastapi import Request

class Settings(BaseSettings):
    # 1️⃣ Database
    DATABASE_URL: str = "sqlite:///./contact_messages.db"
    DATABASE_ECHO: bool = False
    AUTO_CREATE_TABLES: bool = True

    # 2️⃣ Admin access (unset or empty keeps /admin and GET /api/messages locked)
    ADMIN_TOKEN: Optional[str] = None

    # 3️⃣ CORS (unset or empty means "*")
    ALLOWED_ORIGIN: Optional[str] = None

    # 4️⃣ Header set by the edge proxy with the real client address
    TRUSTED_IP_HEADER: str = "CF-Connecting-IP"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings
