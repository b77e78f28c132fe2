"""Logging configuration for toggl-clock."""

import logging
from pathlib import Path

# httpx logs every request at INFO; httpcore logs connection details at DEBUG
HTTP_LOGGERS = ("httpx", "httpcore")


def setup_logging(log_level: int = logging.INFO, config_dir: Path | None = None) -> None:
    """Configure logging for the application.

    Everything at ``log_level`` goes to ``toggl-clock.log``. The console only
    shows warnings and errors unless DEBUG is requested, since clock events
    are already reported there by the notifier. Request lines from httpx are
    only logged at DEBUG.

    Args:
        log_level: Logging level (e.g., logging.INFO, logging.DEBUG).
        config_dir: Directory to store log files. Defaults to ~/.toggl-clock/
    """
    if config_dir is None:
        config_dir = Path.home() / ".toggl-clock"

    config_dir.mkdir(parents=True, exist_ok=True)
    log_file = config_dir / "toggl-clock.log"
    verbose = log_level <= logging.DEBUG

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(log_level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(name)s - %(levelname)s - %(message)s"))
    root_logger.addHandler(console_handler)

    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)
