from fastapi import APIRouter

from pages_catalog.api.catalog import router as catalog_router
from pages_catalog.api.pages import router as pages_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(catalog_router, tags=["catalog"])

site_router = APIRouter()
site_router.include_router(pages_router, tags=["site"])
