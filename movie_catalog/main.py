from fastapi import FastAPI

from movie_catalog.api.exception_handlers import register_exception_handlers
from movie_catalog.api.v1.router import api_router
from movie_catalog.core.config import settings
from movie_catalog.core.logging import setup_logging

setup_logging()

app = FastAPI(title=settings.service_name)

register_exception_handlers(app)
app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
def health():
    return {"status": "ok"}
