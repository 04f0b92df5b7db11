"""Authentication schemas - the logged-in user as reported by /auth/me."""

from enum import Enum

from pydantic import BaseModel


class Role(str, Enum):
    """Role tags used to gate what the UI shows."""

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    MEMBER = "MEMBER"


class Country(str, Enum):
    """Countries a restaurant or user can belong to."""

    INDIA = "INDIA"
    AMERICA = "AMERICA"


class LoginRequest(BaseModel):
    """Body for POST /auth/login."""

    email: str
    password: str


class UserInfo(BaseModel):
    """The authenticated user returned by GET /auth/me."""

    sub: str = ""
    email: str = ""
    role: Role
    country: Country
    name: str = ""

    @property
    def is_staff_role(self) -> bool:
        """ADMIN and MANAGER manage restaurants and orders instead of buying."""
        return self.role in (Role.ADMIN, Role.MANAGER)

    @property
    def is_member(self) -> bool:
        return self.role == Role.MEMBER
