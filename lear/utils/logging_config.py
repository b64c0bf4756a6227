# lear/utils/logging_config.py

import logging
from typing import Optional, Union


def configure_logging(level: Union[int, str] = logging.INFO,
                      format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                      file: Optional[str] = None,
                      suppress_http: bool = True):
    """
    Configure logging for the limerick service.

    Args:
        level: Logging level name or number (default: INFO)
        format: Log record format
        file: Optional path of a log file written alongside the console
        suppress_http: Whether to quieten HTTP client request logs (default: True)
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handlers = [logging.StreamHandler()]
    if file:
        handlers.append(logging.FileHandler(file, encoding='utf-8'))

    logging.basicConfig(
        level=level,
        format=format,
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=handlers,
        force=True
    )

    if suppress_http:
        http_loggers = [
            "httpx",
            "httpcore",
            "openai",
            "anthropic",
            "groq",
        ]

        for logger_name in http_loggers:
            logging.getLogger(logger_name).setLevel(logging.WARNING)

        verbose_loggers = [
            "httpx._client",
            "openai._base_client",
            "anthropic._base_client",
            "groq._base_client",
        ]

        for logger_name in verbose_loggers:
            logging.getLogger(logger_name).setLevel(logging.ERROR)

    logging.getLogger().setLevel(level)

    return logging.getLogger(__name__)
