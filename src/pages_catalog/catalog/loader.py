"""讀取 manifest：HTTP 來源或本地檔案。"""

import json
import logging
from pathlib import Path

import httpx

from pages_catalog.config import Settings
from pages_catalog.generator.manifest import parse_manifest
from pages_catalog.models.project import ProjectRecord

logger = logging.getLogger(__name__)


class ManifestLoadError(Exception):
    pass


class ManifestLoader:
    def __init__(self, settings: Settings, transport: httpx.BaseTransport | None = None):
        self.settings = settings
        self.client = httpx.Client(timeout=settings.request_timeout, transport=transport)

    def source(self) -> str:
        if self.settings.manifest_is_remote():
            return self.settings.manifest_url
        return str(Path(self.settings.manifest_path).resolve())

    def load(self) -> list[ProjectRecord]:
        """每次呼叫都重新讀取，不做快取也不重試。"""
        if self.settings.manifest_is_remote():
            data = self._fetch(self.settings.manifest_url)
        else:
            data = self._read(Path(self.settings.manifest_path))
        try:
            return parse_manifest(data)
        except ValueError as e:
            raise ManifestLoadError(f"Invalid manifest from {self.source()}: {e}") from e

    def _fetch(self, url: str):
        try:
            resp = self.client.get(url)
        except httpx.HTTPError as e:
            raise ManifestLoadError(f"Failed to fetch manifest {url}: {e}") from e
        if not resp.is_success:
            raise ManifestLoadError(f"Failed to fetch manifest {url}: HTTP {resp.status_code}")
        try:
            return resp.json()
        except ValueError as e:
            raise ManifestLoadError(f"Manifest at {url} is not valid JSON: {e}") from e

    def _read(self, path: Path):
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ManifestLoadError(f"Failed to read manifest {path}: {e}") from e
        except ValueError as e:
            raise ManifestLoadError(f"Manifest {path} is not valid JSON: {e}") from e

    def close(self):
        self.client.close()
