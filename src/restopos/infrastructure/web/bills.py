from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from restopos.infrastructure.bootstrap import Services
from restopos.infrastructure.persistence.codec import bill_to_dict
from restopos.infrastructure.web.deps import get_services
from restopos.infrastructure.web.schemas import BillIn

router = APIRouter(prefix="/api", tags=["bills"])


@router.post("/bills")
async def generate_bill(body: BillIn, services: Services = Depends(get_services)) -> dict[str, Any]:
    bill = services.generate_bill().handle(body.order_id)
    return {"success": True, "bill": bill_to_dict(bill)}
