import json
from pathlib import Path

from pages_catalog.models.project import ProjectRecord


def dump_manifest(records: list[ProjectRecord]) -> str:
    return json.dumps([r.model_dump() for r in records], indent=2, ensure_ascii=False)


def write_manifest(records: list[ProjectRecord], path: str | Path) -> Path:
    """整檔覆寫 manifest，回傳寫入的路徑。"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_manifest(records), encoding="utf-8")
    return path


def parse_manifest(data) -> list[ProjectRecord]:
    if not isinstance(data, list):
        raise ValueError(f"Manifest must be a JSON array, got {type(data).__name__}")
    return [ProjectRecord.model_validate(item) for item in data]


def read_manifest(path: str | Path) -> list[ProjectRecord]:
    return parse_manifest(json.loads(Path(path).read_text(encoding="utf-8")))
