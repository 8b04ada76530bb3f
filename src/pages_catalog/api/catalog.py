import asyncio
import logging

from fastapi import APIRouter, HTTPException, Query

from pages_catalog.catalog.loader import ManifestLoadError
from pages_catalog.catalog.view import build_cards, topic_vocabulary
from pages_catalog.models.view import Card, SortOrder, ViewState

logger = logging.getLogger(__name__)

router = APIRouter()


async def load_records_or_503():
    from pages_catalog.main import get_loader

    try:
        return await asyncio.to_thread(get_loader().load)
    except ManifestLoadError as e:
        logger.error("Manifest unavailable: %s", e)
        raise HTTPException(503, "Project manifest is unavailable")


@router.get("/projects", response_model=list[Card])
async def list_projects(
    q: str = Query("", description="搜尋名稱或描述"),
    tag: str | None = Query(None, description="限定標籤"),
    sort: SortOrder = Query("desc", description="依更新時間排序"),
):
    """回傳目前檢視條件下可見的卡片。"""
    from pages_catalog.main import get_loader

    records = await load_records_or_503()
    state = ViewState(query=q, tag=tag, sort=sort)
    return build_cards(records, state, get_loader().settings)


@router.get("/topics", response_model=list[str])
async def list_topics():
    return topic_vocabulary(await load_records_or_503())
