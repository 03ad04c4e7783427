from fastapi import APIRouter
from jrtech.api.endpoints import contact, health

api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(contact.router)
