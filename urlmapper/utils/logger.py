import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Configure urlmapper logging.

    Args:
        home: Path to the urlmapper home directory. If None, derived from environment.
        level: Level name applied to the ``urlmapper`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        env_home = os.environ.get("URLMAPPER_HOME")
        home = Path(env_home).expanduser().resolve() if env_home else Path.home() / ".urlmapper"

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "urlmapper.log"

    root_logger = logging.getLogger("urlmapper")
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # pymongo is chatty at DEBUG
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    _CONFIGURED = True
