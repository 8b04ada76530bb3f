import pytest

from pages_catalog.github.client import GitHubAPIError
from pages_catalog.models.project import ProjectRecord


class FakeRepositoryAPI:
    """以記憶體資料模擬 GitHub API。"""

    def __init__(self, repos, pages=None, topics=None, list_error=None):
        self.repos = repos
        # repo -> dict 或 GitHubAPIError
        self.pages = pages or {}
        self.topics = topics or {}
        self.list_error = list_error
        self.calls = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True

    def list_repositories(self, owner):
        self.calls.append(("list", owner))
        if self.list_error:
            raise self.list_error
        return list(self.repos)

    def get_pages(self, owner, repo):
        self.calls.append(("pages", repo))
        value = self.pages.get(repo, GitHubAPIError(404, "Not Found"))
        if isinstance(value, Exception):
            raise value
        return value

    def get_topics(self, owner, repo):
        self.calls.append(("topics", repo))
        value = self.topics.get(repo, [])
        if isinstance(value, Exception):
            raise value
        return value


def make_repo(name, updated_at="2024-01-01T00:00:00Z", **kwargs):
    repo = {
        "name": name,
        "fork": False,
        "archived": False,
        "description": f"{name} description",
        "updated_at": updated_at,
    }
    repo.update(kwargs)
    return repo


@pytest.fixture
def sample_records():
    return [
        ProjectRecord(name="A", date="2023-01-01", topics=["x"]),
        ProjectRecord(name="B", date="2023-06-01", topics=["y"]),
    ]
