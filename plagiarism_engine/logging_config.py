"""
Logging Configuration
Console logging for the detector and API, plus stage timing helpers
"""
import logging
import sys
import os
import time
from contextlib import contextmanager

_logging_configured = False

def setup_logging(app_name='plagiarism'):
    """Configure structured logging for the application

    Sets up console logging with timestamps and levels.
    Suppresses noisy third-party loggers.
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger(app_name)

    log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'

    debug_mode = os.environ.get('DEBUG', '').lower() in ('true', '1', 'yes')
    log_level = logging.DEBUG if debug_mode else logging.INFO

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    logging.getLogger('werkzeug').setLevel(logging.WARNING)
    logging.getLogger('urllib3').setLevel(logging.WARNING)

    logger = logging.getLogger(app_name)
    logger.setLevel(log_level)

    _logging_configured = True
    return logger

def get_logger(name):
    """Get a logger for a specific module

    Args:
        name: Module name (e.g., 'detector', 'excerpts', 'api')

    Returns:
        Logger instance with plagiarism namespace
    """
    return logging.getLogger(f'plagiarism.{name}')

@contextmanager
def log_timing(logger, stage):
    """Log how long a pipeline stage took, at DEBUG level"""
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug(f"{stage} finished in {elapsed_ms:.1f}ms")
