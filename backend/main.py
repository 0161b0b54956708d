from contextlib import asynccontextmanager

from dotenv import load_dotenv

# Load environment variables before the config class reads them
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from huewheel import __version__
from huewheel.config import config
from huewheel.api.v1 import router as v1_router
from huewheel.api.observability import router as observability_router
from huewheel.schemas import HealthResponse
from huewheel.services.colors.naming import close_name_resolver
from huewheel.utils.logging import configure_logging
from loguru import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info(f"HueWheel {__version__} starting, color names from {config.COLOR_API_URL}")
    yield
    await close_name_resolver()


app = FastAPI(
    title="HueWheel Color Harmony Backend",
    description="Complementary, analogous, triadic, tetradic, tint and shade colors for a base color",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(v1_router)
app.include_router(observability_router)


@app.get("/healthz", response_model=HealthResponse)
def health_check():
    return HealthResponse(ok=True, version=__version__)


@app.get("/")
def root():
    return {
        "message": "HueWheel Color Harmony Backend",
        "version": __version__,
        "endpoints": {
            "health": "/healthz",
            "sections": "/v1/sections",
            "color": "/v1/colors/{hex}",
            "relation": "/v1/colors/{hex}/{relation}",
            "analysis": "/v1/analysis?hex=%23rrggbb",
            "metrics": "/metrics",
        },
    }
