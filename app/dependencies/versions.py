from fastapi import APIRouter
from app.api import actors


api_router = APIRouter()

api_router.include_router(actors.router, prefix="/actors", tags=["Actors"])
