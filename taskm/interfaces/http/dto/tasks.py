from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, StrictStr
from pydantic.alias_generators import to_camel

from taskm.domain.tasks.entities import Task, TaskQuery, TaskStatus


class CreateTaskRequestDTO(BaseModel):
    title: StrictStr | None = None
    description: StrictStr | None = None


class EditTaskRequestDTO(BaseModel):
    title: StrictStr | None = None
    description: StrictStr | None = None


class TaskQueryDTO(BaseModel):
    status: str | None = None
    title: str | None = None

    def to_query(self) -> TaskQuery:
        return TaskQuery(status=self.status, title_contains=self.title)


class TaskDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    description: str | None
    status: TaskStatus
    owner_id: int
    created_at: datetime

    @classmethod
    def from_domain(cls, task: Task) -> TaskDTO:
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            owner_id=task.owner_id,
            created_at=task.created_at,
        )


class TaskResponseDTO(BaseModel):
    success: bool = True
    task: TaskDTO


class TaskListResponseDTO(BaseModel):
    success: bool = True
    tasks: list[TaskDTO]


class TaskDeletedResponseDTO(BaseModel):
    success: bool = True
    message: str = "Task deleted successfully"
