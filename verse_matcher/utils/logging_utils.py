import logging
import os
from datetime import datetime
from pathlib import Path

from verse_matcher.config import LOGS_DIR


def setup_logging(log_name, log_to_console=True, log_to_file=False, level=logging.INFO):
    """
    Set up logging configuration for command line scripts.

    Args:
        log_name (str): Base name for the log file
        log_to_console (bool): Whether to log to the console
        log_to_file (bool): Whether to also write a timestamped log file under LOGS_DIR
        level (int): Logging level

    Returns:
        tuple: (logging.Logger, log file path or None)
    """
    handlers = []
    log_file = None

    if log_to_file:
        Path(LOGS_DIR).mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(LOGS_DIR, f"{log_name}_{timestamp}.log")
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    if log_to_console:
        handlers.append(logging.StreamHandler())
    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True,
    )

    logger = logging.getLogger(log_name)
    if log_file:
        logger.info(f"Logging initialized: {log_file}")

    return logger, log_file
