import logging

from sqlalchemy.engine import Engine

from database.models import Base

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    logger.info("Initializing database...")
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Tables created or verified.")
    except Exception as e:
        logger.error(f"Error initializing DB: {e}")
        raise
