"""
Comments attached to tasks. Append-only: comments are never edited.
"""
import logging
from typing import List
from uuid import UUID

from apps.core.exceptions import ValidationError
from .models import Comment
from .services import get_task, require_actor

logger = logging.getLogger(__name__)

MIN_COMMENT_LENGTH = 3


def add_comment(actor, task_id: UUID, text: str) -> Comment:
    """
    Post a comment on a task.

    The task is resolved before the text is validated, so an unknown task is
    reported as NotFound even when the text is also invalid.
    """
    actor = require_actor(actor)
    task = get_task(task_id)

    text = text.strip() if isinstance(text, str) else text
    if not text or len(text) < MIN_COMMENT_LENGTH:
        raise ValidationError("Please fill all required fields")

    comment = Comment.objects.create(task=task, author=actor, comment=text)
    logger.info(f"Comment {comment.id} posted on task {task.id} by {actor.id}")
    return comment


def get_comments(task_id: UUID) -> List[Comment]:
    """Comments on a task in the order they were posted."""
    task = get_task(task_id)
    return list(task.comments.order_by('id'))
