"""單一 repository 的處理結果，以及整次執行的彙總。"""

from typing import Literal

from pydantic import BaseModel

from pages_catalog.models.project import ProjectRecord


class Included(BaseModel):
    repo: str
    record: ProjectRecord
    warnings: list[str] = []


class Excluded(BaseModel):
    repo: str
    reason: Literal["fork", "archived", "no_pages"]


class Failed(BaseModel):
    repo: str
    error: str
    status: int | None = None


Outcome = Included | Excluded | Failed


class GenerationReport(BaseModel):
    records: list[ProjectRecord] = []
    excluded: list[Excluded] = []
    failed: list[Failed] = []
    warnings: list[str] = []

    def add(self, outcome: Outcome):
        if isinstance(outcome, Included):
            self.records.append(outcome.record)
            self.warnings.extend(outcome.warnings)
        elif isinstance(outcome, Excluded):
            self.excluded.append(outcome)
        else:
            self.failed.append(outcome)

    def summary(self) -> str:
        return (
            f"{len(self.records)} included, {len(self.excluded)} excluded, "
            f"{len(self.failed)} failed, {len(self.warnings)} warning(s)"
        )
