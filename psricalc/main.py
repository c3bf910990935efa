import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from psricalc.api.routes import router
from psricalc.core.config import settings

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    log.info("%s ready, default time points %s", settings.PROJECT_NAME, settings.DEFAULT_TIME_POINTS)
    yield

app = FastAPI(
    title="PSRI Service",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(router)
