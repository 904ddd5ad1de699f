import logging

from tracker.db.session import engine
from tracker.db.base import Base
import tracker.db.models  # noqa: F401  registers every table on Base.metadata

logger = logging.getLogger(__name__)


def init_db():
    """Create any missing tables without running migrations."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured")
