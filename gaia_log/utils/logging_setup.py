import logging
import logging.handlers
import os
from typing import Optional, Union

from gaia_log.core.config import CONFIG
from gaia_log.utils.client_logging import attach_log_client_handler


def setup_logging(name: str = "gaia-log", level: Optional[Union[int, str]] = None, client=None) -> logging.Logger:
    """Configure logging to console, syslog (if enabled) and a LogClient (if given)."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = level if level is not None else CONFIG.logging.level
    logger.setLevel(level)

    # Console handler
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter(fmt='%(asctime)s %(name)s [%(levelname)s] %(message)s'))
    logger.addHandler(ch)

    if CONFIG.logging.syslog:
        # journald forwards from /dev/log
        syslog_address = '/dev/log' if os.path.exists('/dev/log') else ('localhost', 514)
        sh = logging.handlers.SysLogHandler(address=syslog_address)
        sh.setLevel(level)
        sh.setFormatter(logging.Formatter(fmt='%(name)s[%(process)d]: %(levelname)s %(message)s'))
        logger.addHandler(sh)

    if client is not None:
        attach_log_client_handler(logger, client)

    logger.propagate = False
    return logger
