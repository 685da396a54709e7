"""Read-only views: the daily sales report and the KOT log."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from restopos.infrastructure.bootstrap import Services
from restopos.infrastructure.persistence.codec import (
    daily_report_to_dict,
    kot_entry_to_dict,
    kot_stats_to_dict,
)
from restopos.infrastructure.web.deps import get_services

router = APIRouter(prefix="/api", tags=["reports"])


@router.get("/reports/daily")
async def daily_report(services: Services = Depends(get_services)) -> dict[str, Any]:
    return daily_report_to_dict(services.daily_report().handle())


@router.get("/logs/kot")
async def kot_logs(limit: int | None = None, services: Services = Depends(get_services)) -> list[dict[str, Any]]:
    return [kot_entry_to_dict(e) for e in services.kot_log.query_recent(limit)]


@router.get("/logs/kot/stats")
async def kot_stats(services: Services = Depends(get_services)) -> dict[str, Any]:
    return kot_stats_to_dict(services.kot_log.stats())
