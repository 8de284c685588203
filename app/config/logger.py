from functools import lru_cache
from typing import Optional

from app.config.settings import Settings
from app.shared.logger import AppLogger


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_logger(name: Optional[str] = None) -> AppLogger:
    """
    Return the AppLogger for `name`, built from settings.
    Loggers are cached per name, so repeated calls are cheap.
    """
    settings = get_settings()
    return AppLogger(
        name=name or settings.app.app_name,
        log_file=settings.app.log_file,
        level=settings.app.log_level,
    )
