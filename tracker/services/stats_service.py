"""
Derived statistics over a user's applications.

Nothing here is persisted; counts are recomputed from the rows on every call.
"""
import logging
from collections import Counter
from typing import Dict, TypedDict
from sqlalchemy.orm import Session

from tracker.db.models.application import Application

logger = logging.getLogger(__name__)


class ApplicationStatsResult(TypedDict):
    total: int
    by_status: Dict[str, int]


def get_application_stats(db: Session, user_id: str) -> ApplicationStatsResult:
    """
    Count the user's applications overall and per status.
    
    Statuses with no applications are left out of `by_status`, so `total`
    always equals the sum of its values.
    
    Returns:
        {"total": int, "by_status": {status value: count}}
    """
    statuses = db.query(Application.status).filter(Application.user_id == user_id).all()
    by_status = Counter(status.value for (status,) in statuses)
    
    logger.debug(f"Stats computed: user_id={user_id}, total={len(statuses)}")
    
    return ApplicationStatsResult(total=len(statuses), by_status=dict(by_status))
