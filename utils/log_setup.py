"""
Root logger configuration shared by the GUI and the verify script.
"""

import logging

from config.settings import Settings

_configured = False


def setup_logging(level: str | None = None,
                  log_file: str | None = None) -> logging.Logger:
    """
    Attach a console handler (and optionally a file handler) to the
    root logger. Safe to call more than once; only the first call
    adds handlers.
    """
    global _configured
    root_logger = logging.getLogger()
    root_logger.setLevel(level or Settings.LOG_LEVEL)

    if not _configured:
        fmt = logging.Formatter(Settings.LOG_FORMAT,
                                datefmt=Settings.LOG_DATE_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(fmt)
        root_logger.addHandler(console_handler)

        if log_file or Settings.LOG_TO_FILE:
            file_handler = logging.FileHandler(
                log_file or Settings.LOG_FILE, encoding="utf-8"
            )
            file_handler.setFormatter(fmt)
            root_logger.addHandler(file_handler)

        _configured = True

    return logging.getLogger(Settings.APP_NAME)
