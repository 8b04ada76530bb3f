from typing import Literal

from pydantic import BaseModel, ConfigDict

SortOrder = Literal["asc", "desc"]


class ViewState(BaseModel):
    """目前的搜尋、標籤、排序選擇；每次輸入變更都建立新的值。"""

    model_config = ConfigDict(frozen=True)

    query: str = ""
    # None 或空字串代表全部標籤
    tag: str | None = None
    sort: SortOrder = "desc"

    @property
    def normalized_query(self) -> str:
        return self.query.strip().lower()

    @property
    def all_tags(self) -> bool:
        return not self.tag


class Card(BaseModel):
    title: str
    description: str = ""
    href: str = "#"
    image: str
    tags: list[str] = []
    date_label: str = ""
