from fastapi import APIRouter

from .endpoints import news

api_router = APIRouter()

api_router.include_router(news.router, tags=["news"])
