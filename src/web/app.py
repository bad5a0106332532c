from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
import contextlib
import logging

from src.core.config import settings
from src.core.exceptions import DataLoadError

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="BlueBloom",
    description="Cyanobacteria bloom situation scoring for the blue-economy ecosystem",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "Bloom", "description": "Regional weekly bloom summaries, bulletins and beach status"},
        {"name": "Actors", "description": "Startup and investor catalog"},
        {"name": "Startups", "description": "Fit scores, pitches, pilots, impact and case studies"},
        {"name": "Investors", "description": "Investor view of a bloom situation"},
        {"name": "Ecosystem", "description": "Solution gap radar and collaboration clusters"},
        {"name": "Config", "description": "Active scoring catalog"},
    ]
)

from src.web.routers import register_routers
from src.web.dependencies import get_repo

register_routers(app)

@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    # Fail fast on missing or malformed static data
    repo = app.dependency_overrides.get(get_repo, get_repo)()
    repo.load()
    logger.info(f"BlueBloom ready: {len(repo.observations)} observations, {len(repo.actors)} actors")

    yield

app.router.lifespan_context = lifespan

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DataLoadError)
async def data_load_error_handler(request: Request, exc: DataLoadError):
    logger.error(f"Static data unavailable for {request.url.path}: {exc}")
    return JSONResponse(status_code=503, content={"detail": "Bloom data is unavailable"})


@app.get("/", include_in_schema=False)
async def root():
    return RedirectResponse(url="/docs")


@app.get("/health", include_in_schema=False)
async def health():
    return {"status": "ok", "environment": settings.environment}
