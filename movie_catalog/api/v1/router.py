from fastapi import APIRouter

from movie_catalog.api.routers import movies

api_router = APIRouter()

api_router.include_router(movies.router)
