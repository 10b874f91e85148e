from ninja import Schema
from uuid import UUID
from datetime import datetime
from typing import Optional


class AuditLogOut(Schema):
    id: int
    task_id: UUID
    user_id: Optional[UUID] = None
    type: str
    old_value: str
    new_value: str
    performed_at: datetime

    @staticmethod
    def resolve_user_id(obj):
        return obj.performed_by_id
