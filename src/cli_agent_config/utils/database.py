"""Database utilities and initialization."""

import logging

from cli_agent_config.clients.database import init_db
from cli_agent_config.constants import DATABASE_FILE

logger = logging.getLogger(__name__)


def init_database():
    """Initialize database with tables if not already created."""
    try:
        if not DATABASE_FILE.exists():
            logger.info("Database not found, creating tables...")
            init_db()
            logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise
