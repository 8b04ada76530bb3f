from pydantic import BaseModel, field_validator


class ProjectRecord(BaseModel):
    name: str | None = None
    repo: str = ""
    url: str = ""
    description: str = ""
    topics: list[str] = []
    date: str = ""
    screenshot: str = ""

    @field_validator("repo", "url", "description", "date", "screenshot", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("topics", mode="before")
    @classmethod
    def _topics_always_list(cls, value):
        # 手寫 manifest 可能缺少 topics 或為 null
        if value is None:
            return []
        return value
