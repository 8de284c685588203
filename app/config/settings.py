from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


# ----------------------------
# General / App settings
# ----------------------------
class AppSettings(BaseSettings):
    app_name: str = "UserDirectory"
    banner: str = "Hello, world from the user directory!"

    # Logger
    log_file: Optional[str] = None
    log_level: str = "INFO"

    class Config:
        env_prefix = "USERDIR_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# ----------------------------
# HTTP server settings
# ----------------------------
class ServerSettings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 3000

    class Config:
        env_prefix = "USERDIR_SERVER_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    def get_url(self) -> str:
        return f"http://{self.host}:{self.port}"


# ----------------------------
# Top-level settings
# ----------------------------
class Settings(BaseSettings):
    # Built per Settings() so env and .env are read at that point
    app: AppSettings = Field(default_factory=AppSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
