import logging
import os
import sys
from pathlib import Path

DEFAULT_LOG_DIR = Path.home() / ".rem-cli" / "logs"

def setup_logging(log_dir: Path = None):
    """Set up logging configuration for remcli package with environment-based levels."""
    # Determine log level from environment
    env_level = os.getenv('REMCLI_LOG_LEVEL', '').upper()
    is_debug = os.getenv('REMCLI_DEBUG', '').lower() in ('1', 'true', 'yes')

    # Default to WARNING so the console stays quiet for regular use
    if is_debug:
        level = logging.DEBUG
    elif env_level:
        level = getattr(logging, env_level, logging.WARNING)
    else:
        level = logging.WARNING

    if log_dir is None:
        log_dir = Path(os.getenv('REMCLI_LOG_DIR', '') or DEFAULT_LOG_DIR)

    log_format = '[%(asctime)s] %(levelname)-8s [%(name)s:%(funcName)s:%(lineno)d] %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'

    detailed_formatter = logging.Formatter(log_format, date_format)
    console_formatter = logging.Formatter(
        '%(levelname)-8s [%(name)s] %(message)s' if is_debug
        else '%(levelname)s: %(message)s'
    )

    # Console handler goes to stderr so command output stays clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)

    logger = logging.getLogger('remcli')
    logger.setLevel(logging.DEBUG)  # Logger accepts all, handlers filter
    logger.handlers.clear()
    logger.addHandler(console_handler)

    # File handler (always detailed); skipped when the directory is unusable
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / "remcli.log", encoding='utf-8')
    except OSError as e:
        logger.warning(f"File logging disabled, cannot use {log_dir}: {e}")
    else:
        file_handler.setFormatter(detailed_formatter)
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger

# Initialize logging when package is imported
setup_logging()

def get_logger(name: str = None):
    """Get a logger instance for a specific module."""
    if name:
        return logging.getLogger(f'remcli.{name}')
    return logging.getLogger('remcli')
