from fastapi import FastAPI
from fastapi.responses import FileResponse
from fastapi.middleware.cors import CORSMiddleware
import logging
import os

from .calculators.registry import list_calculators
from .config import settings
from .database import engine, Base
from .routers import catalog, customers, quotes, rate_presets, saved_quotes, speech

logger = logging.getLogger("tilequote")


def _configure_logging():
    """Attach a stream handler to the app logger once; level comes from LOG_LEVEL."""
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(settings.LOG_LEVEL.upper())


_configure_logging()

# Create tables (handles new tables but won't add columns to existing ones)
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title="Tiling Quote App",
    description="Room measurements in, priced tiling quote out",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
for module in (catalog, quotes, saved_quotes, rate_presets, customers, speech):
    app.include_router(module.router, prefix="/api")

# Single-page frontend, when one is deployed alongside the API
frontend_index = os.path.join(os.path.dirname(__file__), "..", "frontend", "index.html")
if os.path.exists(frontend_index):
    @app.get("/")
    def serve_frontend():
        return FileResponse(frontend_index)


@app.get("/health")
def health():
    return {"status": "ok", "app": "tilequote"}


@app.on_event("startup")
def log_startup():
    logger.info(
        "Tiling quote API ready (%s, options: %s)",
        settings.DATABASE_URL.split("://", 1)[0], ", ".join(list_calculators()),
    )
