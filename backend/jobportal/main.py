import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jobportal.core.config import settings, require_jwt_secret
from jobportal.core.database import init_db
from jobportal.core.errors import register_error_handlers
from jobportal.core.logging_setup import configure_logging
from jobportal.middleware.trace import register_trace_middleware
from jobportal.routes.auth import router as auth_router
from jobportal.routes.companies import router as companies_router
from jobportal.routes.health import router as health_router
from jobportal.routes.jobs import router as jobs_router

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

require_jwt_secret()


@asynccontextmanager
async def lifespan(app: FastAPI):  # noqa: ARG001
    if settings.AUTO_CREATE_TABLES:
        init_db()
    yield


app = FastAPI(title="Job Portal", lifespan=lifespan)
logger.info(
    "Startup config: ENV=%s AUTO_CREATE_TABLES=%s JWT_ISSUER=%s",
    settings.ENV,
    settings.AUTO_CREATE_TABLES,
    settings.JWT_ISSUER,
)

register_error_handlers(app)
register_trace_middleware(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(auth_router)
app.include_router(companies_router)
app.include_router(jobs_router)
