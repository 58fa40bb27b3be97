from fastapi import APIRouter

from app.api.routers.contact import router as contact_router
from app.api.routers.health import router as health_router


api_routers = APIRouter(prefix="/api")
api_routers.include_router(contact_router, prefix="/contact", tags=["contact"])
api_routers.include_router(health_router, tags=["health"])
