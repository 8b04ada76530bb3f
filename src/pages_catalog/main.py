import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from pages_catalog.api.router import api_router, site_router
from pages_catalog.catalog.loader import ManifestLoader, ManifestLoadError
from pages_catalog.config import settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"

# 全域資源
_loader: ManifestLoader | None = None


def get_loader() -> ManifestLoader:
    assert _loader is not None
    return _loader


@asynccontextmanager
async def lifespan(app: FastAPI):
    global _loader

    logger.info("Starting Pages Catalog...")
    _loader = ManifestLoader(settings)
    logger.info("Manifest source: %s", _loader.source())

    yield

    logger.info("Shutting down...")
    if _loader:
        _loader.close()
        _loader = None


app = FastAPI(title="Pages Catalog", version="0.1.0", lifespan=lifespan)
app.include_router(api_router)
app.include_router(site_router)
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.get("/api/v1/health")
async def health():
    try:
        records = await asyncio.to_thread(get_loader().load)
    except ManifestLoadError:
        return {"status": "degraded", "manifest": "unavailable", "projects": 0}
    return {"status": "ok", "manifest": "loaded", "projects": len(records)}
