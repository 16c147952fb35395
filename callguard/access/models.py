"""Requester identity carried through a request."""

from pydantic import BaseModel, ConfigDict, Field

from callguard.privacy.roles import UserRole


class RequesterContext(BaseModel):
    """Authenticated user making the request."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(min_length=1)
    role: UserRole = UserRole.CLIENT

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN
