import logging

from config.settings import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure the root logger once for the API process or the console client."""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
    # SQL statements are only interesting when DB_ECHO is on
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
