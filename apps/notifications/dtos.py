from ninja import Schema
from uuid import UUID
from datetime import datetime


class NotificationOut(Schema):
    id: int
    user_id: UUID
    message: str
    created_at: datetime
