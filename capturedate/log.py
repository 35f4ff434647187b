"""
Logging setup: rich console output plus an optional log file.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from rich.logging import RichHandler

from .config import Config
from .constants import get_console, get_logger


FILE_LOG_FORMAT = '%(asctime)s [%(name)s] %(levelname)s: %(message)s'

# Handlers added by setup_logging, removed again on the next call
_installed_handlers: List[logging.Handler] = []


def setup_logging(config: Optional[Config] = None, verbose: bool = False,
                  log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
    """Configure the program logger with separate console and file levels.

    Handlers installed by an earlier call are replaced, not stacked.
    """
    logger = get_logger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        logger.removeHandler(handler)
        handler.close()

    if verbose:
        console_level = logging.DEBUG
    elif config is not None:
        console_level = getattr(logging, config.get_log_level())
    else:
        console_level = logging.WARNING

    console_handler = RichHandler(console=get_console(), rich_tracebacks=True)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    log_file = log_file or (config.get_log_file() if config is not None else None)
    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
        logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    # Allow all messages to reach handlers
    logger.setLevel(logging.DEBUG)
    return logger
