"""DTOs for Identity app."""
from dataclasses import dataclass
from uuid import UUID
from typing import List

from ninja import Schema


@dataclass(frozen=True)
class UserDTO:
    id: UUID
    username: str
    email: str
    role: str
    is_active: bool
    permissions: List[str]


class LoginIn(Schema):
    username: str
    password: str
