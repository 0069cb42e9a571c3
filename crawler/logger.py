"""
Logging setup for the crawler.

Every line carries a context column: the crawl job id for records logged
through job_logger(), otherwise the component that emitted it
(engine, service, api, ...).
"""

import logging
import sys
from datetime import datetime, timezone

from crawler.config import LOG_FILE, LOG_LEVEL

ROOT_LOGGER = "crawler"


class JobLogFormatter(logging.Formatter):
    """
    [ Tue Jan 06 05:32:41 AM UTC 2026 ] : INFO : <job id | component> : Message
    """
    def format(self, record):
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        timestamp = dt.strftime("%a %b %d %I:%M:%S %p UTC %Y")
        context = getattr(record, 'job_id', None) or _component(record.name)
        message = f"[ {timestamp} ] : {record.levelname} : {context} : {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def _component(name):
    if name == ROOT_LOGGER:
        return "root"
    return name[len(ROOT_LOGGER) + 1:] if name.startswith(ROOT_LOGGER + ".") else name


def setup_logger(name=ROOT_LOGGER, log_file=None, level=logging.INFO):
    """
    Returns the named logger. Only the root 'crawler' logger owns handlers;
    component loggers propagate to it and inherit its level.
    """
    logger = logging.getLogger(name)

    if name != ROOT_LOGGER:
        logger.propagate = True
        setup_logger(ROOT_LOGGER, log_file=log_file, level=level)
        return logger

    # Configured once per process
    if logger.handlers:
        return logger

    logger.setLevel(level)
    formatter = JobLogFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def job_logger(job_id):
    """Logger whose records are tagged with job_id."""
    return logging.LoggerAdapter(setup_logger(f"{ROOT_LOGGER}.job"), {"job_id": job_id})


logger = setup_logger(log_file=LOG_FILE, level=getattr(logging, LOG_LEVEL, logging.INFO))
