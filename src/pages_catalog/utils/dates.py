from datetime import datetime, timezone

from pages_catalog.models.project import ProjectRecord


def parse_timestamp(value: str | None) -> datetime | None:
    """解析 ISO-8601 時間字串，無法解析時回傳 None。"""
    if not value:
        return None
    text = value.strip()
    # GitHub 使用 "Z" 結尾
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_date(value: str | None) -> str:
    parsed = parse_timestamp(value)
    if parsed is None:
        return ""
    return parsed.astimezone(timezone.utc).strftime("%Y-%m-%d")


def sort_records(records: list[ProjectRecord], descending: bool = True) -> list[ProjectRecord]:
    """依更新時間排序；時間相同維持原順序，無法解析的一律排在最後。"""
    dated = []
    undated = []
    for record in records:
        parsed = parse_timestamp(record.date)
        if parsed is None:
            undated.append(record)
        else:
            dated.append((parsed, record))
    # sorted 在 reverse=True 時仍是穩定排序
    dated = sorted(dated, key=lambda item: item[0], reverse=descending)
    return [record for _, record in dated] + undated
