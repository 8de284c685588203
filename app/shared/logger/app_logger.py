import inspect
import logging
import os
from datetime import datetime, timezone
from typing import Dict, Optional, Tuple

import structlog


class AppLogger:
    """
    structlog-backed logger with a colored console line and, optionally,
    a JSON-lines file. Instances are cached per (name, log_file), so a
    name first built without a file gets one when asked with a file later.
    A cached instance keeps the level it was first built with.
    """

    _logger_cache: Dict[Tuple[str, Optional[str]], "AppLogger"] = {}

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",     # cyan
        "INFO": "\033[32m",      # green
        "WARNING": "\033[33m",   # yellow
        "ERROR": "\033[31m",     # red
        "CRITICAL": "\033[1;31m" # bold red
    }
    RESET_COLOR = "\033[0m"

    def __init__(
        self,
        name: str = "default",
        log_file: Optional[str] = None,
        level: str = "INFO",
        context: Optional[dict] = None,
    ):
        self.name = name
        self.context = context or {}

        cache_key = (name, log_file)
        cached = self._logger_cache.get(cache_key)
        if cached is not None:
            self.console_logger = cached.console_logger
            self.file_logger = cached.file_logger
            if self.context:
                self.console_logger = self.console_logger.bind(**self.context)
                if self.file_logger is not None:
                    self.file_logger = self.file_logger.bind(**self.context)
            return

        stdlib_level = getattr(logging, level.upper(), logging.INFO)

        console_logger = logging.getLogger(f"{name}.console")
        console_logger.propagate = False
        if not console_logger.handlers:
            console_logger.setLevel(stdlib_level)
            ch = logging.StreamHandler()
            ch.setFormatter(logging.Formatter("%(message)s"))
            console_logger.addHandler(ch)

        self.console_logger = structlog.wrap_logger(
            console_logger,
            processors=[
                structlog.processors.TimeStamper(fmt="ISO"),
                structlog.stdlib.add_log_level,
                structlog.processors.format_exc_info,
                self._add_caller,
                self._render_console,
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        ).bind(logger=name, **self.context)

        self.file_logger = None
        if log_file:
            log_path = os.path.abspath(log_file)
            file_logger = logging.getLogger(f"{name}.file:{log_path}")
            file_logger.setLevel(stdlib_level)
            file_logger.propagate = False
            if not file_logger.handlers:
                fh = logging.FileHandler(log_file, encoding="utf-8")
                fh.setFormatter(logging.Formatter("%(message)s"))
                file_logger.addHandler(fh)

            self.file_logger = structlog.wrap_logger(
                file_logger,
                processors=[
                    structlog.processors.TimeStamper(fmt="ISO"),
                    structlog.stdlib.add_log_level,
                    structlog.processors.StackInfoRenderer(),
                    structlog.processors.format_exc_info,
                    self._add_caller,
                    structlog.processors.UnicodeDecoder(),
                    structlog.processors.JSONRenderer(),
                ],
                wrapper_class=structlog.stdlib.BoundLogger,
                cache_logger_on_first_use=True,
            ).bind(logger=name, **self.context)

        self._logger_cache[cache_key] = self

    # ----------------------------
    # Processors
    # ----------------------------
    @staticmethod
    def _add_caller(logger, method_name, event_dict):
        frame = inspect.currentframe()
        while frame:
            module_name = frame.f_globals.get("__name__", "")
            if not module_name.startswith("structlog") and not module_name.endswith("app_logger"):
                event_dict["module"] = module_name
                event_dict["function"] = frame.f_code.co_name
                event_dict["lineno"] = frame.f_lineno
                break
            frame = frame.f_back
        return event_dict

    def _render_console(self, logger, method_name, event_dict):
        ts = event_dict.pop("timestamp", None) or datetime.now(timezone.utc).isoformat()
        level = event_dict.pop("level", method_name).upper()
        logger_name = event_dict.pop("logger", self.name)
        msg = event_dict.pop("event", "")
        module = event_dict.pop("module", "")
        func = event_dict.pop("function", "")
        lineno = event_dict.pop("lineno", "")

        # Caller info only for WARNING and above
        caller = ""
        if level in ("WARNING", "ERROR", "CRITICAL") and module and func:
            caller = f" ({module}.{func}:{lineno})"

        fields = " ".join(f"{k}={v}" for k, v in event_dict.items())
        if fields:
            fields = " " + fields

        color = self.LEVEL_COLORS.get(level, "")
        return f"{color}{ts} [{logger_name}] {level}: {msg}{fields}{caller}{self.RESET_COLOR}"

    # ----------------------------
    # Logging methods
    # ----------------------------
    def _emit(self, method: str, msg: str, **extra):
        getattr(self.console_logger, method)(msg, **extra)
        if self.file_logger is not None:
            getattr(self.file_logger, method)(msg, **extra)

    def debug(self, msg: str, **extra):
        self._emit("debug", msg, **extra)

    def info(self, msg: str, **extra):
        self._emit("info", msg, **extra)

    def warning(self, msg: str, **extra):
        self._emit("warning", msg, **extra)

    def error(self, msg: str, **extra):
        self._emit("error", msg, **extra)

    def exception(self, msg: str, **extra):
        self._emit("exception", msg, **extra)
