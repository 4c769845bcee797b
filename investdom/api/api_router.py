from fastapi import APIRouter
from investdom.api.endpoints import contact, health

api_router = APIRouter(prefix="/api")

api_router.include_router(contact.router, tags=["Contact"])
api_router.include_router(health.router, tags=["Health"])
