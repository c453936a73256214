"""Admin dashboard statistics API router."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from artline.database import get_db
from artline.middleware.auth_middleware import require_admin
from artline.models.user import User
from artline.schemas.stats import StatsOut
from artline.services import stats_service

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("", response_model=StatsOut)
def get_stats(
    db: Session = Depends(get_db),
    _current_user: User = Depends(require_admin),
):
    return StatsOut(**stats_service.get_stats(db))
