"""MiniCRM Backend — Dashboard Route (GET /api/dashboard)."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from minicrm.database import get_db_session
from minicrm.schemas.dashboard import DashboardStats
from minicrm.services.dashboard_service import dashboard_service

router = APIRouter(prefix="/api", tags=["Dashboard"])


@router.get(
    "/dashboard",
    response_model=DashboardStats,
    summary="Counts of contacts, companies and deals, plus open pipeline value",
)
async def get_dashboard(db: AsyncSession = Depends(get_db_session)) -> DashboardStats:
    return await dashboard_service.get_stats(db)
