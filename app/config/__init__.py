from app.config.settings import Settings, AppSettings, ServerSettings
from app.config.logger import get_logger, get_settings

__all__ = ["Settings", "AppSettings", "ServerSettings", "get_logger", "get_settings"]
