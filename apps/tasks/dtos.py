from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from ninja import Schema


@dataclass(frozen=True)
class TaskChanges:
    """
    Partial update of a task. A field left as None is not touched.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    assignee_id: Optional[UUID] = None


class TaskIn(Schema):
    # Presence is checked by the service so missing fields share one error message
    name: Optional[str] = None
    description: Optional[str] = None
    assign: Optional[UUID] = None


class TaskUpdateIn(Schema):
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    assign: Optional[UUID] = None

    def to_changes(self) -> TaskChanges:
        return TaskChanges(
            name=self.name,
            description=self.description,
            status=self.status,
            assignee_id=self.assign,
        )


class TaskOut(Schema):
    id: UUID
    name: str
    description: str
    status: str
    user_id: UUID
    assign: UUID
    created_at: datetime
    updated_at: datetime

    @staticmethod
    def resolve_user_id(obj):
        return obj.creator_id

    @staticmethod
    def resolve_assign(obj):
        return obj.assignee_id


class CommentIn(Schema):
    comment: Optional[str] = None


class CommentOut(Schema):
    id: int
    task_id: UUID
    user_id: UUID
    comment: str
    created_at: datetime

    @staticmethod
    def resolve_user_id(obj):
        return obj.author_id
