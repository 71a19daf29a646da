from dotenv import load_dotenv
load_dotenv()

import logging
import logfire

import config

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger("main")

# Only send to Logfire when a token is present (production); spans still work locally otherwise
try:
    logfire.configure(
        service_name=config.LOGFIRE_SERVICE_NAME,
        service_version=config.APP_VERSION,
        send_to_logfire=config.LOGFIRE_SEND_TO_LOGFIRE,
        console=None if config.LOGFIRE_CONSOLE else False,
    )
    logger.info("Logfire configured successfully")
except Exception as e:
    logger.warning("Logfire not configured (running without observability): %s", e)
    logfire.configure(send_to_logfire=False, console=False)

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import Response

from errors import register_exception_handlers
from models.dosage_models import HealthResponse
from routers import dosage, form


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan event handler for startup and shutdown
    """
    logfire.info("TRT Dosage API started", version=config.APP_VERSION)

    yield

    logfire.info("Shutting down TRT Dosage API...")


app = FastAPI(
    title=config.APP_TITLE,
    description="Computes injection volume per shot from a weekly dose, strength and frequency",
    version=config.APP_VERSION,
    lifespan=lifespan,
)


@app.middleware("http")
async def cors_headers(request: Request, call_next):
    """
    Answer every OPTIONS request with an empty 200 and stamp the permissive
    CORS headers on all other responses.
    """
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=config.CORS_HEADERS)
    response = await call_next(request)
    response.headers.update(config.CORS_HEADERS)
    return response


register_exception_handlers(app)

# Include Routers
app.include_router(form.router, tags=["form"])
app.include_router(dosage.router, tags=["dosage"])

logfire.instrument_fastapi(app)


@app.get("/health", response_model=HealthResponse)
async def health_check():
    return {
        "status": "healthy",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT)
