from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from boardhub.api.v1 import api_router
from boardhub.config import settings
from boardhub.database import engine
from boardhub.logger import get_logger, setup_logging
from boardhub.migrations import upgrade

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)

upgrade(engine)

app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION, debug=settings.DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.get("/health", include_in_schema=False)
def health():
    return {"status": "ok", "app": settings.APP_NAME, "version": settings.APP_VERSION}
