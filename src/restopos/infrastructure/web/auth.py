from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from restopos.infrastructure.bootstrap import Services
from restopos.infrastructure.persistence.codec import user_to_dict
from restopos.infrastructure.web.deps import get_services
from restopos.infrastructure.web.schemas import LoginIn

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login")
async def login(body: LoginIn, services: Services = Depends(get_services)) -> dict[str, Any]:
    user = services.login().handle(body.mobile, body.pin)
    return {"success": True, "user": user_to_dict(user)}
