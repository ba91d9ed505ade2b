"""댓글 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class CommentCreate(BaseModel):
    comment: str


class CommentOut(BaseModel):
    comment_id: int
    entity_type: str
    entity_id: int
    user_id: int
    comment: str
    author_name: Optional[str] = None
    created_at: Optional[datetime] = None
