import logging

from fastapi import FastAPI

from wordsmith import api
from wordsmith.config import get_settings


settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.app_title,
    description="Word definitions, comparisons and synonym sets from a generative text service",
    version=settings.app_version,
)

app.include_router(api.router)


@app.get("/status")
def status_info():
    return {
        "name": settings.app_title,
        "version": settings.app_version,
        "model": settings.model,
        "api_key_configured": bool(settings.api_key),
    }
