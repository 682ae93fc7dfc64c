"""User DTOs. The password hash never leaves the application layer."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from konektz.domain.entities.user import User


class PublicUserDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    username: str
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "PublicUserDTO":
        return cls(
            id=user.id.value,
            username=user.username,
            email=user.email.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
