from loguru import logger
from pathlib import Path
from typing import Optional
import sys


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None):
    """Setup logging configuration."""
    # Remove default logger
    logger.remove()

    # Console logger; stdout stays free for tool output
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[component]}</cyan> - <level>{message}</level>",
        level=log_level.upper(),
        colorize=True,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # File logger
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[component]} | {name}:{function}:{line} - {message}",
            level=log_level.upper(),
            rotation="10 MB",
            retention="30 days",
            compression="zip",
        )

    return logger


logger.configure(extra={"component": "godepgraph"})

# Initialize logger
app_logger = setup_logging()
