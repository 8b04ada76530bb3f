"""篩選、排序與卡片轉換，皆為純函式。"""

from pages_catalog.config import Settings
from pages_catalog.models.project import ProjectRecord
from pages_catalog.models.view import Card, ViewState
from pages_catalog.utils.dates import format_date, sort_records


def topic_vocabulary(records: list[ProjectRecord]) -> list[str]:
    """所有不重複的 topic，依字典序排列（保留原始大小寫與空白）。"""
    return sorted({topic for r in records for topic in r.topics})


def matches(record: ProjectRecord, state: ViewState) -> bool:
    query = state.normalized_query
    if query:
        in_name = bool(record.name) and query in record.name.lower()
        in_desc = bool(record.description) and query in record.description.lower()
        if not (in_name or in_desc):
            return False
    if not state.all_tags and state.tag not in record.topics:
        return False
    return True


def apply_view(records: list[ProjectRecord], state: ViewState) -> list[ProjectRecord]:
    """每次都從完整清單重新計算可見的紀錄。"""
    visible = [r for r in records if matches(r, state)]
    return sort_records(visible, descending=state.sort == "desc")


def to_card(record: ProjectRecord, settings: Settings) -> Card:
    formatted = format_date(record.date)
    return Card(
        title=record.name or settings.untitled_label,
        description=record.description or "",
        href=record.url or "#",
        image=record.screenshot or settings.placeholder_image,
        tags=list(record.topics),
        date_label=f"{settings.date_label_prefix} {formatted}" if formatted else "",
    )


def build_cards(records: list[ProjectRecord], state: ViewState, settings: Settings) -> list[Card]:
    return [to_card(r, settings) for r in apply_view(records, state)]
