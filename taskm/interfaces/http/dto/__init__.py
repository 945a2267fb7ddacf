from .auth import CredentialsRequestDTO, LoginResponseDTO, SignupResponseDTO, UserDTO
from .tasks import (
    CreateTaskRequestDTO,
    EditTaskRequestDTO,
    TaskDeletedResponseDTO,
    TaskDTO,
    TaskListResponseDTO,
    TaskQueryDTO,
    TaskResponseDTO,
)

__all__ = [
    "CreateTaskRequestDTO",
    "CredentialsRequestDTO",
    "EditTaskRequestDTO",
    "LoginResponseDTO",
    "SignupResponseDTO",
    "TaskDTO",
    "TaskDeletedResponseDTO",
    "TaskListResponseDTO",
    "TaskQueryDTO",
    "TaskResponseDTO",
    "UserDTO",
]
