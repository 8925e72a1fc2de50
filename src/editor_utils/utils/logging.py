"""Root logging setup driven by :class:`~editor_utils.services.settings.Settings`."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from ..services.settings import Settings

__all__ = ["setup_logging", "get_log_path"]

_DEFAULT_LOG_DIR = Path.home() / ".editor_utils" / "logs"
_LOG_FILE_NAME = "editor_utils.log"
_MAX_BYTES = 1_000_000
_BACKUP_COUNT = 3
_NOISY_LOGGERS: tuple[str, ...] = ("PySide6",)
_CONFIGURED = False
_LOG_PATH: Path | None = None


def setup_logging(settings: Settings, *, force: bool = False) -> Path:
    """Install a rotating file handler, plus a console one when enabled.

    Later calls return the first log path unless ``force`` is set.
    """

    global _CONFIGURED, _LOG_PATH
    if _CONFIGURED and not force and _LOG_PATH is not None:
        return _LOG_PATH

    level = settings.log_level
    target_dir = Path(settings.log_dir or _DEFAULT_LOG_DIR).expanduser()
    target_dir.mkdir(parents=True, exist_ok=True)
    log_path = target_dir / _LOG_FILE_NAME

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = logging.handlers.RotatingFileHandler(
        log_path, maxBytes=_MAX_BYTES, backupCount=_BACKUP_COUNT, encoding="utf-8"
    )
    file_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [file_handler]

    if settings.console_logging:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    logging.captureWarnings(True)
    _quiet_qt_loggers(level)

    _CONFIGURED = True
    _LOG_PATH = log_path
    return log_path


def get_log_path() -> Path | None:
    """Return the active log file, or ``None`` before :func:`setup_logging` ran."""

    return _LOG_PATH


def _quiet_qt_loggers(root_level: int) -> None:
    quiet_level = max(logging.WARNING, root_level)
    for logger_name in _NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(quiet_level)
