from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Status(str, Enum):
    SUCCESS = "success"
    PLANNED = "planned"
    ERROR = "error"


@dataclass(frozen=True)
class FileRecord:
    path: Path
    project_key: str
    suffix_key: str | None = None


@dataclass(frozen=True)
class ProjectSet:
    projects: dict[str, tuple[Path, ...]] = field(default_factory=dict)

    def sorted_keys(self) -> list[str]:
        return sorted(self.projects)

    def files(self, project_key: str) -> tuple[Path, ...]:
        return self.projects[project_key]

    def __len__(self) -> int:
        return len(self.projects)


@dataclass(frozen=True)
class SignatureIndex:
    entries: dict[str, tuple[Path, ...]] = field(default_factory=dict)

    def get(self, suffix_key: str) -> tuple[Path, ...]:
        return self.entries.get(suffix_key, ())

    def __contains__(self, suffix_key: object) -> bool:
        return suffix_key in self.entries


@dataclass(frozen=True)
class ProjectPlan:
    project_key: str
    merge_order: tuple[Path, ...]
    output_path: Path


@dataclass(frozen=True)
class OperationMessage:
    level: str
    text: str


@dataclass(frozen=True)
class ProjectMergeResult:
    project_key: str
    status: Status
    merge_order: tuple[Path, ...] = ()
    output_path: Path | None = None
    messages: tuple[OperationMessage, ...] = ()
    merged_pages: int = 0


@dataclass(frozen=True)
class RunResult:
    items: list[ProjectMergeResult]

    @property
    def success_count(self) -> int:
        return len([item for item in self.items if item.status == Status.SUCCESS])

    @property
    def planned_count(self) -> int:
        return len([item for item in self.items if item.status == Status.PLANNED])

    @property
    def error_count(self) -> int:
        return len([item for item in self.items if item.status == Status.ERROR])
