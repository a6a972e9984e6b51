import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logger(name: str = "task_nlp", log_level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, log_level.upper()))

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path("logs") / log_file
        log_path.parent.mkdir(exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def redact_text(text: str, logger: Optional[logging.Logger] = None) -> str:
    """User input only goes to logs verbatim at DEBUG level."""
    target = logger or logging.getLogger("task_nlp")
    if target.isEnabledFor(logging.DEBUG):
        return text
    return f"[{len(text)} chars]"
