# bank_account_service/api/v1/endpoints/health.py
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bank_account_service.infra.db.session import get_db
from bank_account_service.schemas.health_schemas import ComponentStatus, HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request, db: AsyncSession = Depends(get_db)):
    cfg = request.app.state.settings

    try:
        await db.execute(text("SELECT 1"))
        db_status = ComponentStatus(status="operational", detail="Database connection OK")
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Health check database error: {e}")
        db_status = ComponentStatus(status="major_outage", detail=f"Database error: {e}")

    return HealthResponse(
        service=cfg.PROJECT_NAME,
        version=cfg.PROJECT_VERSION,
        time=datetime.now(timezone.utc).isoformat(),
        indicator=db_status.status,
        components={"database": db_status},
    )
