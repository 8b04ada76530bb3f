"""Manifest 產生流程：列出 repository → 篩選 → 取得 Pages / topics → 排序。"""

import logging

from pages_catalog.github.client import GitHubAPIError, RepositoryAPI
from pages_catalog.models.project import ProjectRecord
from pages_catalog.models.report import Excluded, Failed, GenerationReport, Included, Outcome
from pages_catalog.utils.dates import sort_records

logger = logging.getLogger(__name__)


def classify_repository(api: RepositoryAPI, owner: str, repo: dict) -> Outcome:
    """決定單一 repository 是否產出紀錄。"""
    name = repo.get("name") if isinstance(repo, dict) else None
    if not name:
        logger.warning("Skipping repository entry without a name")
        return Failed(repo="", error="Repository entry has no name")

    if repo.get("fork"):
        return Excluded(repo=name, reason="fork")
    if repo.get("archived"):
        return Excluded(repo=name, reason="archived")

    try:
        pages = api.get_pages(owner, name)
    except GitHubAPIError as e:
        if e.not_found:
            return Excluded(repo=name, reason="no_pages")
        logger.warning("Failed to get pages config for %s: %s", name, e.message)
        return Failed(repo=name, error=e.message, status=e.status)

    warnings = []
    try:
        topics = api.get_topics(owner, name)
    except GitHubAPIError as e:
        # topics 失敗不排除，只降級為空清單
        logger.warning("Failed to get topics for %s: %s", name, e.message)
        warnings.append(f"{name}: topics unavailable ({e.message})")
        topics = []

    record = ProjectRecord(
        name=name,
        repo=name,
        url=pages.get("html_url") or "",
        description=repo.get("description") or "",
        topics=topics,
        date=repo.get("updated_at") or "",
        screenshot="",
    )
    return Included(repo=name, record=record, warnings=warnings)


def generate(api: RepositoryAPI, owner: str) -> GenerationReport:
    """執行完整產生流程；列出 repository 失敗時直接拋出。"""
    repos = api.list_repositories(owner)
    report = GenerationReport()

    for repo in repos:
        try:
            outcome = classify_repository(api, owner, repo)
        except Exception as e:
            # 單一 repository 的非預期錯誤不中斷整次執行
            name = str(repo.get("name") or "") if isinstance(repo, dict) else ""
            logger.warning("Unexpected error processing %s: %s", name or "<unnamed>", e)
            outcome = Failed(repo=name, error=f"{type(e).__name__}: {e}")
        if isinstance(outcome, Excluded):
            logger.debug("Skipped %s (%s)", outcome.repo, outcome.reason)
        report.add(outcome)

    report.records = sort_records(report.records, descending=True)
    logger.info("Generation finished for %s: %s", owner, report.summary())
    return report
