# src/footprint_api/init_db.py
"""Create tables and the serial counter row for a fresh database."""

import logging

from footprint_api.db.session import create_tables, session_scope
from footprint_api.services.serial_allocator import ensure_serial_counter

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Initialize the database by creating all tables and seeding the counter."""
    create_tables()
    with session_scope() as db:
        counter = ensure_serial_counter(db)
    logger.info("Serial counter ready at %d", counter.last_serial)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
    print("Database initialized.")
