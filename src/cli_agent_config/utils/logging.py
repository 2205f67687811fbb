"""Logging setup for CLI Agent Config."""

import logging
import os
from datetime import datetime

from cli_agent_config.constants import LOG_DIR


def setup_logging() -> None:
    """Setup logging to a timestamped file under LOG_DIR.

    The level comes from the CAC_LOG_LEVEL environment variable (default INFO).
    """
    log_level = os.environ.get("CAC_LOG_LEVEL", "INFO").upper()

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = LOG_DIR / f"cac_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.FileHandler(log_file)],
    )

    print(f"Logs: {log_file}")
    print(f"Log level: {log_level} (set CAC_LOG_LEVEL to change)")
    logging.info(f"Logging to {log_file}")
