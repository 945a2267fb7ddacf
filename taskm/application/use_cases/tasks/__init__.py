from .complete_task import CompleteTaskUseCase
from .create_task import CreateTaskUseCase
from .delete_task import DeleteTaskUseCase
from .edit_task import EditTaskUseCase
from .list_tasks import ListTasksUseCase

__all__ = [
    "CompleteTaskUseCase",
    "CreateTaskUseCase",
    "DeleteTaskUseCase",
    "EditTaskUseCase",
    "ListTasksUseCase",
]
