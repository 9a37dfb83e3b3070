"""
Logging setup shared by the application entry point.
"""
import logging
import sys
from pathlib import Path


DEFAULT_LOG_DIR = Path.home() / ".easel"


class LoggingConfig:
    """Central logging configuration"""

    _initialized = False
    _log_file_path = None

    @classmethod
    def setup_logging(cls, log_dir: Path = DEFAULT_LOG_DIR, console_level=logging.INFO):
        """Install a file handler and a console handler on the root logger"""
        if cls._initialized:
            return

        logger = logging.getLogger()
        logger.setLevel(logging.DEBUG)

        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            cls._log_file_path = log_dir / "easel.log"
            file_handler = logging.FileHandler(cls._log_file_path, encoding='utf-8')
        except OSError:
            cls._log_file_path = None
            file_handler = None

        if file_handler is not None:
            file_handler.setLevel(logging.DEBUG)
            file_formatter = logging.Formatter(
                '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            logger.addHandler(file_handler)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
        logger.addHandler(console_handler)

        cls._initialized = True
        if cls._log_file_path is None:
            logger.warning("Log directory %s is not writable; logging to console only", log_dir)
        logger.info("Logging system initialized")

    @classmethod
    def get_log_file_path(cls) -> Path:
        """Get the log file path"""
        return cls._log_file_path


__all__ = ['LoggingConfig']
