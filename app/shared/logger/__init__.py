from app.shared.logger.app_logger import AppLogger

__all__ = ["AppLogger"]
