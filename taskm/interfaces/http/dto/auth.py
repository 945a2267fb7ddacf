from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, StrictStr
from pydantic.alias_generators import to_camel

from taskm.domain.users.entities import User


class CredentialsRequestDTO(BaseModel):
    # Presence is checked by the use cases so both routes answer "All fields required".
    email: StrictStr | None = None
    password: StrictStr | None = None


class UserDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    email: str
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> UserDTO:
        return cls(id=user.id, email=user.email, created_at=user.created_at)


class SignupResponseDTO(BaseModel):
    success: bool = True
    message: str = "Signup successful"
    user: UserDTO
    token: str


class LoginResponseDTO(BaseModel):
    success: bool = True
    message: str = "Login successful"
    token: str
