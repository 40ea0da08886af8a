import logging
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logging(level: Union[str, int] = logging.WARNING,
                  log_file: Optional[str] = None,
                  name: str = "geomag") -> logging.Logger:
    """
    Configure the package logger.

    Installs a console handler (and a file handler if ``log_file`` is
    given). Calling it again replaces the handlers installed by a previous
    call instead of stacking duplicates.

    Args:
        level: Logging level name or number
        log_file: Optional path of a log file

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    for handler in list(logger.handlers):
        if getattr(handler, "_geomag_handler", False):
            logger.removeHandler(handler)
            handler.close()

    # Console handler
    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    console._geomag_handler = True
    logger.addHandler(console)

    # File handler if specified
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_handler._geomag_handler = True
        logger.addHandler(file_handler)

    return logger
