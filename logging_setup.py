"""
Logging configuration for the Email Reply Writer backend.

Everything goes to the console; the hosting platform collects stdout.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"

def setup_logging(level: str = "INFO"):
    """
    Configure the root logger with a console handler.

    Args:
        level: Level name such as "INFO" or "DEBUG"

    Returns:
        logging.Logger: The root logger
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )
    # httpx logs every request line at INFO, including the ?key= query
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return logging.getLogger()
