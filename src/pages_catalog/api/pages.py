import asyncio
import logging

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse

from pages_catalog.api.catalog import load_records_or_503
from pages_catalog.catalog.loader import ManifestLoadError
from pages_catalog.catalog.page import render_page
from pages_catalog.catalog.view import build_cards, topic_vocabulary
from pages_catalog.models.project import ProjectRecord
from pages_catalog.models.view import SortOrder, ViewState

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def catalog_page(
    q: str = Query(""),
    tag: str | None = Query(None),
    sort: SortOrder = Query("desc"),
):
    """目錄頁面；每次載入都重新讀取 manifest。"""
    from pages_catalog.main import get_loader

    loader = get_loader()
    settings = loader.settings
    state = ViewState(query=q, tag=tag, sort=sort)

    try:
        records = await asyncio.to_thread(loader.load)
    except ManifestLoadError as e:
        logger.error("Failed to load manifest: %s", e)
        error = "Failed to load the project list." if settings.show_load_error else None
        return render_page([], [], state, settings, error=error)

    cards = build_cards(records, state, settings)
    return render_page(cards, topic_vocabulary(records), state, settings)


@router.get("/projects.json", response_model=list[ProjectRecord])
async def raw_manifest():
    return await load_records_or_503()
