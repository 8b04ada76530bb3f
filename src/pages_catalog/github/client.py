"""GitHub REST API 客戶端。"""

import logging
from typing import Protocol

import httpx

from pages_catalog.config import settings

logger = logging.getLogger(__name__)


class GitHubAPIError(Exception):
    def __init__(self, status: int | None, message: str):
        super().__init__(message)
        self.status = status
        self.message = message

    @property
    def not_found(self) -> bool:
        return self.status == 404


class RepositoryAPI(Protocol):
    def list_repositories(self, owner: str) -> list[dict]: ...

    def get_pages(self, owner: str, repo: str) -> dict: ...

    def get_topics(self, owner: str, repo: str) -> list[str]: ...


class GitHubClient:
    def __init__(self, token: str, transport: httpx.BaseTransport | None = None):
        self.per_page = settings.github_per_page
        self.client = httpx.Client(
            base_url=settings.github_api_url,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            timeout=settings.request_timeout,
            transport=transport,
        )

    def _get(self, url: str, params: dict | None = None) -> httpx.Response:
        try:
            resp = self.client.get(url, params=params)
        except httpx.HTTPError as e:
            raise GitHubAPIError(None, f"{type(e).__name__}: {e}") from e
        if resp.is_error:
            raise GitHubAPIError(resp.status_code, _error_message(resp))
        return resp

    def list_repositories(self, owner: str) -> list[dict]:
        """列出使用者所有 repository，沿著 Link header 走完所有分頁。"""
        repos: list[dict] = []
        resp = self._get(f"/users/{owner}/repos", params={"per_page": self.per_page})
        repos.extend(_json_body(resp, list))
        while "next" in resp.links:
            # next 連結已帶有完整 query string
            resp = self._get(resp.links["next"]["url"])
            repos.extend(_json_body(resp, list))
        logger.info("Listed %d repositories for %s", len(repos), owner)
        return repos

    def get_pages(self, owner: str, repo: str) -> dict:
        return _json_body(self._get(f"/repos/{owner}/{repo}/pages"), dict)

    def get_topics(self, owner: str, repo: str) -> list[str]:
        resp = self._get(f"/repos/{owner}/{repo}/topics")
        names = _json_body(resp, dict).get("names") or []
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise GitHubAPIError(resp.status_code, "Unexpected topics payload")
        return names

    def close(self):
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


def _error_message(resp: httpx.Response) -> str:
    try:
        data = resp.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return f"HTTP {resp.status_code}"


def _json_body(resp: httpx.Response, expected: type):
    """解析成功回應的 JSON；格式不符時視同 API 錯誤。"""
    try:
        data = resp.json()
    except ValueError as e:
        raise GitHubAPIError(resp.status_code, f"Invalid JSON response: {e}") from e
    if not isinstance(data, expected):
        raise GitHubAPIError(
            resp.status_code,
            f"Unexpected response type {type(data).__name__}, expected {expected.__name__}",
        )
    return data
